"""Splice comment replacements back into a source buffer."""

from __future__ import annotations

import logging

from docalign.types import Diagnostic

logger = logging.getLogger(__name__)


def apply_fixes(source: str, diagnostics: list[Diagnostic]) -> str:
    """Apply diagnostic replacements to ``source``.

    Fixes are applied in source order. A fix overlapping one already applied
    is skipped; the next lint pass reports it again against the new text.
    """
    parts: list[str] = []
    cursor = 0
    applied = 0

    for diagnostic in sorted(diagnostics, key=lambda d: (d.comment.start, d.comment.end)):
        comment = diagnostic.comment
        if comment.start < cursor:
            logger.debug("Skipping overlapping fix at line %d", comment.line)
            continue
        parts.append(source[cursor : comment.start])
        parts.append(diagnostic.replacement_text)
        cursor = comment.end
        applied += 1

    parts.append(source[cursor:])
    logger.debug("Applied %d of %d fixes", applied, len(diagnostics))
    return "".join(parts)
