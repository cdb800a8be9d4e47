"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from heic2webp.application.ports import ProgressReporter
from heic2webp.application.results import RunSummary
from heic2webp.application.use_cases import (
    build_run_configuration,
    convert_single_file,
    run_batch,
)
from heic2webp.types import DEFAULT_CODEC, DEFAULT_QUALITY


def convert_file_to_webp(
    source_path: Path,
    output_path: Optional[Path] = None,
    quality: int = DEFAULT_QUALITY,
    codec: str = DEFAULT_CODEC,
) -> Path:
    """Convert one HEIC/HEIF file and return the written WebP path."""
    out, _image = convert_single_file(
        source_path=source_path,
        destination_path=output_path,
        quality=quality,
        codec_name=codec,
    )
    return out


def convert_path_to_webp(
    input_path: Path,
    output_directory: Optional[Path] = None,
    quality: int = DEFAULT_QUALITY,
    recursive: bool = False,
    verbose: bool = False,
    codec: str = DEFAULT_CODEC,
    jobs: int = 1,
    reporter: Optional[ProgressReporter] = None,
) -> RunSummary:
    """Convert a file or every HEIC/HEIF file in a directory."""
    config = build_run_configuration(
        input_path=input_path,
        output_directory=output_directory,
        quality=quality,
        recursive=recursive,
        verbose=verbose,
        codec=codec,
        jobs=jobs,
    )
    return run_batch(config, reporter=reporter)
