"""Typed task objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from heic2webp.types import DEFAULT_QUALITY, WEBP_SUFFIX


def destination_for(source_path: Path, output_directory: Path | None = None) -> Path:
    """Return ``{output_directory or source dir}/{stem}.webp``."""
    directory = output_directory if output_directory is not None else source_path.parent
    return directory / f"{source_path.stem}{WEBP_SUFFIX}"


@dataclass(frozen=True)
class ConversionTask:
    """One source file and the WebP path it converts to."""

    source_path: Path
    destination_path: Path
    quality: int = DEFAULT_QUALITY

    @classmethod
    def for_source(
        cls,
        source_path: Path,
        output_directory: Path | None = None,
        quality: int = DEFAULT_QUALITY,
    ) -> ConversionTask:
        """Build a task with the default destination naming."""
        return cls(
            source_path=source_path,
            destination_path=destination_for(source_path, output_directory),
            quality=quality,
        )
