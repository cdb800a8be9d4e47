"""Console progress reporting for the CLI."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import typer

from heic2webp.application.results import ConversionResult, RunSummary, Success
from heic2webp.schemas import RunConfiguration


def format_bytes(size: int) -> str:
    """Format a byte count as ``B``, ``KB`` or ``MB``."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def format_reduction(outcome: Success) -> str:
    """Describe the size change of a successful conversion."""
    # Negative when the WebP is bigger than its source.
    return (
        f"{format_bytes(outcome.input_size)} -> "
        f"{format_bytes(outcome.image.output_size)} ({outcome.size_reduction:.1f}% smaller)"
    )


class ConsoleReporter:
    """Print one line per file as soon as it finishes.

    Successes go to stdout, failures to stderr.
    """

    def on_empty(self, root: Path) -> None:
        typer.echo("No HEIC files found")

    def on_start(
        self, root: Path, files: Sequence[Path], config: RunConfiguration
    ) -> None:
        if root.is_dir():
            typer.echo(f"Found {len(files)} HEIC file(s)")
        if config.verbose:
            typer.echo(f"Quality: {config.quality}")
            typer.echo(f"Codec: {config.codec}")
            if config.output_directory is not None:
                typer.echo(f"Output: {config.output_directory}")

    def on_result(self, result: ConversionResult, config: RunConfiguration) -> None:
        source = result.task.source_path.name
        outcome = result.outcome
        if isinstance(outcome, Success):
            typer.echo(f"{source} -> {result.task.destination_path.name}")
            if config.verbose:
                image = outcome.image
                typer.echo(f"  Dimensions: {image.width}x{image.height}")
                typer.echo(f"  Size: {format_reduction(outcome)}")
            return
        typer.secho(f"Failed: {source}", fg=typer.colors.RED, err=True)
        typer.echo(f"  {outcome.reason}", err=True)

    def on_finish(self, summary: RunSummary) -> None:
        typer.echo(f"\nConverted: {summary.success_count}/{summary.total} files")
