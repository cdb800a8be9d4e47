"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from heic2webp.application.results import ConversionResult, EncodedImage, RunSummary
from heic2webp.schemas import RunConfiguration


@runtime_checkable
class Codec(Protocol):
    """Decode a HEIC/HEIF file and write it out as WebP."""

    name: str

    def convert(
        self,
        source_path: Path,
        destination_path: Path,
        quality: int,
    ) -> EncodedImage:
        """Convert one file.

        Parameters
        ----------
        source_path : Path
            HEIC/HEIF input file.
        destination_path : Path
            WebP file to create or overwrite.
        quality : int
            WebP quality in ``[1, 100]``.

        Returns
        -------
        EncodedImage
            Dimensions and size of the written file.

        Raises
        ------
        ConversionError
            ``DecodeError``, ``EncodeError`` or ``WriteError``.
        """


class ProgressReporter(Protocol):
    """Receive progress notifications from a batch run."""

    def on_empty(self, root: Path) -> None:
        """No eligible files were found under ``root``."""

    def on_start(
        self, root: Path, files: Sequence[Path], config: RunConfiguration
    ) -> None:
        """Conversion of ``files`` is about to begin."""

    def on_result(self, result: ConversionResult, config: RunConfiguration) -> None:
        """One file finished, successfully or not."""

    def on_finish(self, summary: RunSummary) -> None:
        """Every file has been processed."""
