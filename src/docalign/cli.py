"""Click CLI for docalign — check and fix JSDoc tag alignment."""

from __future__ import annotations

import asyncio
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from docalign.config.hierarchy import load_config_hierarchy
from docalign.config.schema import AlignConfig
from docalign.errors.exceptions import DocAlignError
from docalign.types import FileReport, RuleName

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = getattr(logging, default_level.upper(), logging.WARNING)
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _resolve_config(
    config_path: str | None,
    rule: str | None = None,
    tags: tuple[str, ...] = (),
    workers: int | None = None,
) -> AlignConfig:
    """Merge the config hierarchy with CLI overrides; exit on invalid config."""
    try:
        merged = load_config_hierarchy(
            config_path=config_path,
            rule=rule,
            tags=tags,
            max_workers=workers,
        )
        return AlignConfig.from_mapping(merged)
    except (DocAlignError, FileNotFoundError, ValueError) as e:
        error_console.print(f"[red]Invalid configuration:[/red] {e}")
        sys.exit(2)


def _run_batch(paths: tuple[str, ...], config: AlignConfig, fix: bool) -> list[FileReport]:
    from docalign.concurrency.pool import FilePool
    from docalign.core import collect_files, lint_file

    files = collect_files(paths, config.extensions)
    if not files:
        error_console.print("[yellow]No source files found.[/yellow]")
        return []

    pool = FilePool(max_workers=config.max_workers)
    return asyncio.run(pool.process_batch(lint_file, files, config=config, fix=fix))


_common_options = [
    click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True)),
    click.option(
        "--rule",
        type=click.Choice([name.value for name in RuleName]),
        default=None,
        help="Alignment rule to run.",
    ),
    click.option("--tag", "tags", multiple=True, help="Tag keyword to align (repeatable)."),
    click.option("--config", "config_path", type=click.Path(), help="Explicit config YAML."),
    click.option("--workers", type=int, default=None, help="Concurrent file workers."),
    click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)."),
]


def common_options(fn):
    for option in reversed(_common_options):
        fn = option(fn)
    return fn


@click.group()
@click.version_option(package_name="docalign")
def cli() -> None:
    """docalign: keep JSDoc tag columns aligned."""


@cli.command()
@common_options
def check(
    paths: tuple[str, ...],
    rule: str | None,
    tags: tuple[str, ...],
    config_path: str | None,
    workers: int | None,
    verbose: int,
) -> None:
    """Report misaligned tag blocks."""
    config = _resolve_config(config_path, rule, tags, workers)
    _setup_logging(verbose, config.log_level)

    reports = _run_batch(paths, config, fix=False)
    _print_reports(reports)

    if any(r.has_problems for r in reports):
        sys.exit(1)


@cli.command()
@common_options
def fix(
    paths: tuple[str, ...],
    rule: str | None,
    tags: tuple[str, ...],
    config_path: str | None,
    workers: int | None,
    verbose: int,
) -> None:
    """Rewrite misaligned tag blocks in place."""
    config = _resolve_config(config_path, rule, tags, workers)
    _setup_logging(verbose, config.log_level)

    reports = _run_batch(paths, config, fix=True)

    fixed = [r for r in reports if r.fixed]
    for report in fixed:
        console.print(f"[green]Fixed {report.path}[/green]")
    console.print(f"{len(fixed)} of {len(reports)} files changed")

    remaining = [r for r in reports if r.has_problems]
    if remaining:
        _print_reports(remaining)
        sys.exit(1)


def _print_reports(reports: list[FileReport]) -> None:
    """Print a table of every problem found."""
    problems = [r for r in reports if r.has_problems]
    if not problems:
        console.print("[green]All tag blocks aligned.[/green]")
        return

    table = Table(title="Alignment Problems", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Rule")
    table.add_column("Message")

    for report in problems:
        name = str(report.path) if report.path else "-"
        if report.failed:
            table.add_row(name, "-", "-", f"[red]{report.error}[/red]")
        for diagnostic in report.diagnostics:
            message = diagnostic.message
            if diagnostic.tag:
                message = f"{message} (@{diagnostic.tag})"
            table.add_row(name, str(diagnostic.line), diagnostic.rule.value, message)
        for failure in report.errors:
            table.add_row(name, str(failure.line), "-", f"[red]{failure.message}[/red]")

    console.print(table)


@cli.command("rules")
def list_rules_command() -> None:
    """List available rules."""
    from docalign.rules import list_rules

    table = Table(title="Available Rules", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Fixable")

    for info in sorted(list_rules(), key=lambda r: r.name.value):
        table.add_row(info.name.value, info.description, "yes" if info.fixable else "no")

    console.print(table)


@cli.command("show-config")
@click.option("--config", "config_path", type=click.Path(), help="Explicit config YAML.")
def show_config(config_path: str | None) -> None:
    """Show the resolved configuration."""
    config = _resolve_config(config_path)

    table = Table(title="Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in config.model_dump(mode="json").items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(key, str(value))

    console.print(table)


@cli.command("validate-config")
@click.argument("config_yaml", type=click.Path(exists=True))
def validate_config(config_yaml: str) -> None:
    """Validate a config YAML file."""
    from docalign.config.loader import load_config_yaml

    try:
        config = load_config_yaml(config_yaml)
        console.print(f"[green]Valid config:[/green] rule {config.rule.value}")
        console.print(f"  Tags: {', '.join(config.tags)}")
    except (DocAlignError, ValueError) as e:
        error_console.print(f"[red]Invalid config:[/red] {e}")
        sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    cli()
