"""Top-level entry points: lint_source(), fix_source(), lint_file()."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from docalign.config.schema import AlignConfig
from docalign.errors.exceptions import AlignmentInvariantError, CommentLevelError, ConfigError
from docalign.rules import Rule, fix_comment, get_rule
from docalign.source.fixer import apply_fixes
from docalign.source.scanner import find_block_comments
from docalign.types import CommentBlock, CommentFailure, Diagnostic, FileReport

logger = logging.getLogger(__name__)

_SKIP_DIRS = {"node_modules", "dist", "build", "coverage"}


def _resolve_rule(config: AlignConfig) -> Rule:
    rule = get_rule(config.rule)
    if rule is None:
        raise ConfigError(f"Unknown rule: {config.rule}", key="rule")
    return rule


def _check_comment(comment: CommentBlock, rule: Rule, tags: list[str]) -> list[Diagnostic]:
    """Run the rule on one comment, isolating invariant failures to that comment."""
    try:
        return rule.check(comment, tags)
    except AlignmentInvariantError as e:
        raise CommentLevelError(
            f"Comment at line {comment.line} could not be aligned: {e.message}",
            line=comment.line,
            inner=e,
        ) from e


def lint_source(source: str, config: AlignConfig | None = None) -> FileReport:
    """Check every block comment in ``source`` and collect diagnostics."""
    config = config or AlignConfig()
    rule = _resolve_rule(config)
    report = FileReport()

    for comment in find_block_comments(source):
        report.comments_checked += 1
        try:
            report.diagnostics.extend(_check_comment(comment, rule, config.tags))
        except CommentLevelError as e:
            logger.error("%s", e.message)
            report.errors.append(CommentFailure(line=e.line, message=e.message))

    return report


def fix_source(source: str, config: AlignConfig | None = None) -> tuple[str, FileReport]:
    """Fix every misaligned comment in ``source``.

    Re-lints after each pass, up to ``config.max_fix_passes`` passes.

    Returns:
        The fixed text and the report of whatever is still wrong with it.
    """
    config = config or AlignConfig()
    rule = _resolve_rule(config)
    current = source

    report = lint_source(current, config)
    for attempt in range(1, config.max_fix_passes + 1):
        if not report.diagnostics:
            break

        # One whole-comment fix per comment so fixes never overlap.
        merged: dict[int, Diagnostic] = {}
        for diagnostic in report.diagnostics:
            comment = diagnostic.comment
            if comment.start in merged:
                continue
            try:
                replacement = fix_comment(comment, rule, config.tags)
            except AlignmentInvariantError as e:
                logger.error("Not fixing comment at line %d: %s", comment.line, e.message)
                continue
            merged[comment.start] = diagnostic.model_copy(update={"replacement": replacement})

        if not merged:
            break

        current = apply_fixes(current, list(merged.values()))
        logger.debug("Fix pass %d: %d comments rewritten", attempt, len(merged))
        report = lint_source(current, config)

    report.fixed = current != source
    return current, report


def lint_file(path: str | Path, config: AlignConfig | None = None, fix: bool = False) -> FileReport:
    """Check (and optionally fix in place) one source file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")

    # newline="" keeps CRLF files byte-identical outside the rewritten lines
    with open(path, encoding="utf-8", newline="") as f:
        source = f.read()

    if fix:
        fixed, report = fix_source(source, config)
        if report.fixed:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(fixed)
            logger.info("Fixed %s", path)
    else:
        report = lint_source(source, config)

    report.path = path
    return report


def collect_files(paths: Iterable[str | Path], extensions: Iterable[str]) -> list[Path]:
    """Expand directories into the source files they contain.

    Files given explicitly are kept whatever their extension.
    """
    suffixes = {ext.lower() for ext in extensions}
    files: list[Path] = []

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            for candidate in sorted(path.rglob("*")):
                if not candidate.is_file() or candidate.suffix.lower() not in suffixes:
                    continue
                if any(part in _SKIP_DIRS for part in candidate.relative_to(path).parts):
                    continue
                files.append(candidate)
        else:
            files.append(path)

    # Preserve order, drop duplicates
    return list(dict.fromkeys(files))
