"""Async worker pool for checking many files at once."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from docalign.types import FileReport

logger = logging.getLogger(__name__)


class FilePool:
    """Run a synchronous per-file function in worker threads.

    Files are independent, so the only coordination is a semaphore bounding
    how many run at once.
    """

    def __init__(self, max_workers: int = 4) -> None:
        self._max_workers = max_workers

    @property
    def max_workers(self) -> int:
        return self._max_workers

    async def process_batch(
        self,
        lint_fn: Callable[..., FileReport],
        file_paths: list[str | Path],
        **kwargs: Any,
    ) -> list[FileReport]:
        """Process a batch of files concurrently.

        Args:
            lint_fn: Callable(path, **kwargs) -> FileReport.
            file_paths: Source files to process.
            **kwargs: Additional args passed to lint_fn.

        Returns list of FileReport (one per file, in input order).
        """
        semaphore = asyncio.Semaphore(self._max_workers)

        async def worker(path: str | Path) -> FileReport:
            async with semaphore:
                return await asyncio.to_thread(lint_fn, path, **kwargs)

        tasks = [worker(p) for p in file_paths]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        # Convert exceptions to failed reports
        final: list[FileReport] = []
        for path, result in zip(file_paths, results, strict=True):
            if isinstance(result, Exception):
                logger.error("File %s failed: %s", path, result)
                final.append(FileReport(path=Path(path), failed=True, error=str(result)))
            else:
                final.append(result)

        return final
