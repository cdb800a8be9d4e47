#!/usr/bin/env python3
"""
heic2webp.cli.cli

Typer-based CLI converting HEIC/HEIF images to WebP.

Examples
--------
Convert one photo next to the original:

    heic2webp photo.heic

Convert a directory tree into another folder:

    heic2webp photos/ -r -o converted/ -q 90
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence
from pathlib import Path

import click
import typer

from heic2webp.cli.reporting import ConsoleReporter
from heic2webp.errors import Heic2WebpError
from heic2webp.types import DEFAULT_CODEC, DEFAULT_QUALITY

app = typer.Typer(
    name="heic2webp",
    help="Convert HEIC/HEIF images to WebP.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

PROG_NAME = "heic2webp"


def _configure_logging(debug: bool) -> None:
    """Send library logs to stderr; DEBUG with ``--debug``, else WARNING."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    level = logging.DEBUG if debug else logging.WARNING
    logging.getLogger("heic2webp").setLevel(level)
    if debug:
        logging.getLogger().setLevel(level)


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"{type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


@app.command()
def convert_cmd(
    input_path: Path = typer.Argument(
        ...,
        metavar="INPUT",
        help="HEIC/HEIF file or directory containing HEIC/HEIF files.",
        show_default=False,
    ),
    output: Path | None = typer.Option(
        None,
        "-o",
        "--output",
        help="Output directory (default: alongside each input file).",
    ),
    quality: int = typer.Option(
        DEFAULT_QUALITY, "-q", "--quality", min=1, max=100, help="WebP quality 1-100."
    ),
    recursive: bool = typer.Option(
        False, "-r", "--recursive", help="Process directories recursively."
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Show dimensions and size reduction per file."
    ),
    codec: str = typer.Option(
        DEFAULT_CODEC, "-c", "--codec", help="Codec backend: libheif or pillow."
    ),
    jobs: int = typer.Option(
        1, "-j", "--jobs", min=1, help="Number of files to convert in parallel."
    ),
    debug: bool = typer.Option(False, "--debug", help="Debug logging and full tracebacks."),
) -> None:
    """Convert HEIC/HEIF images to WebP.

    Parameters
    ----------
    input_path : Path
        HEIC/HEIF file or directory.
    output : Path | None, default=None
        Output directory; each WebP lands next to its source when omitted.
    quality : int, default=85
        WebP quality.
    recursive : bool, default=False
        Descend into subdirectories of a directory input.
    verbose : bool, default=False
        Report dimensions and size reduction for every file.

    Notes
    -----
    Exit status is 1 when any file fails, even if others converted.
    """
    _configure_logging(debug)
    try:
        from heic2webp.api import convert_path_to_webp

        summary = convert_path_to_webp(
            input_path=input_path,
            output_directory=output,
            quality=quality,
            recursive=recursive,
            verbose=verbose,
            codec=codec,
            jobs=jobs,
            reporter=ConsoleReporter(),
        )
    except Heic2WebpError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))

    if not summary.ok:
        raise typer.Exit(code=1)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run the conversion and return the exit code.

    Usage errors (unknown flag, missing value, out-of-range quality, no
    input) are reported and mapped to exit code 1 instead of terminating
    the process.
    """
    command = typer.main.get_command(app)
    try:
        result = command.main(
            args=list(argv) if argv is not None else None,
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return 1
    except click.Abort:
        typer.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
