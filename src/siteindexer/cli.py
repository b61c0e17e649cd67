"""Command line interface for Site Indexer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from siteindexer.config import AppConfig
from siteindexer.errors import IndexOutputError
from siteindexer.index.indexer import Indexer, IndexStats


console = Console()
app = typer.Typer(help="Site Indexer - client-side search index for generated HTML sites")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _check_start_dir(start_dir: Path) -> None:
    if not start_dir.is_dir():
        raise typer.BadParameter(f"Directory not found: {start_dir}")


def _print_tag_stats(stats: IndexStats) -> None:
    console.print(
        f"Tagged: {stats.augmented}, already tagged: {stats.already_augmented}, "
        f"tag failures: {stats.augment_failed}"
    )


@app.command()
def index(
    start_dir: Path = typer.Argument(..., help="Root folder of the generated site.", resolve_path=True),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Index script to write"),
    no_augment: bool = typer.Option(False, "--no-augment", help="Do not inject the search box"),
    raw_literals: bool = typer.Option(
        False, "--raw-literals", help="Embed titles and text without escaping quotes"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build the search index for a site and tag its pages."""
    _setup_logging(verbose)
    _check_start_dir(start_dir)
    config = AppConfig(
        output_path=output,
        escape_literals=not raw_literals,
        augment=not no_augment,
    )
    resolved_output = config.resolve_output_path(Path.cwd())

    console.print(f"Indexing [bold]{start_dir}[/bold] into [bold]{resolved_output}[/bold]...")
    try:
        stats = Indexer(config).build(start_dir, resolved_output)
    except IndexOutputError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    if not stats.processed_files:
        console.print("[yellow]No HTML pages found.[/yellow]")
        return

    console.print(f"Indexed: {stats.indexed}, failed: {stats.failed}")
    if config.augment:
        _print_tag_stats(stats)


@app.command()
def tag(
    start_dir: Path = typer.Argument(..., help="Root folder of the generated site.", resolve_path=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Inject the search box into every page without rebuilding the index."""
    _setup_logging(verbose)
    _check_start_dir(start_dir)

    stats = Indexer(AppConfig()).tag(start_dir)
    if not stats.processed_files:
        console.print("[yellow]No HTML pages found.[/yellow]")
        return
    _print_tag_stats(stats)
