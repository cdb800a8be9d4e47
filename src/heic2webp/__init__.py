"""Top-level API for HEIC/HEIF to WebP conversion."""

from __future__ import annotations

from pathlib import Path

from heic2webp.application.results import RunSummary
from heic2webp.types import DEFAULT_CODEC, DEFAULT_QUALITY

__version__ = "0.1.0"


def convert_file(
    source_path: Path,
    output_path: Path | None = None,
    quality: int = DEFAULT_QUALITY,
    codec: str = DEFAULT_CODEC,
) -> Path:
    """Convert a single HEIC/HEIF file to WebP.

    Parameters
    ----------
    source_path : Path
        HEIC/HEIF input file.
    output_path : Path | None, default=None
        WebP destination. When omitted, defaults to
        ``source_path.with_suffix(".webp")``.
    quality : int, default=85
        WebP quality in ``[1, 100]``.
    codec : str, default="libheif"
        Codec backend name (``libheif`` or ``pillow``).

    Returns
    -------
    Path
        Path to the written WebP file.
    """
    from .api import convert_file_to_webp as _impl

    return _impl(
        source_path=source_path,
        output_path=output_path,
        quality=quality,
        codec=codec,
    )


def convert_path(
    input_path: Path,
    output_directory: Path | None = None,
    *,
    quality: int = DEFAULT_QUALITY,
    recursive: bool = False,
    codec: str = DEFAULT_CODEC,
    jobs: int = 1,
) -> RunSummary:
    """Convert a file or a directory of HEIC/HEIF files.

    Parameters
    ----------
    input_path : Path
        File or directory to convert.
    output_directory : Path | None, default=None
        Where to write ``.webp`` files; alongside each input when omitted.
    quality : int, default=85
        WebP quality in ``[1, 100]``.
    recursive : bool, default=False
        Include files in subdirectories.
    codec : str, default="libheif"
        Codec backend name.
    jobs : int, default=1
        Number of files converted in parallel.

    Returns
    -------
    RunSummary
        Per-file results and counts. Individual failures do not raise.
    """
    from .api import convert_path_to_webp as _impl

    return _impl(
        input_path=input_path,
        output_directory=output_directory,
        quality=quality,
        recursive=recursive,
        codec=codec,
        jobs=jobs,
    )


__all__ = ["convert_file", "convert_path"]
