"""Exception hierarchy shared by the CLI, use-cases and codec adapters."""

from __future__ import annotations

from pathlib import Path

from heic2webp.types import DecodeStage


class Heic2WebpError(Exception):
    """Base class for all heic2webp errors.

    Attributes
    ----------
    exit_code : int
        Process exit code the CLI uses when this error aborts a run.
    """

    exit_code = 1


class InvalidArgumentError(Heic2WebpError):
    """Raised when run parameters are malformed (bad quality, empty input)."""


class NotFoundError(Heic2WebpError):
    """Raised when the input path does not exist."""


class InvalidInputError(Heic2WebpError):
    """Raised when the input path exists but cannot be converted."""


class BackendError(Heic2WebpError):
    """Raised when a codec backend is unknown or cannot be used."""


class ConversionError(Heic2WebpError):
    """Base class for per-file conversion failures.

    A batch run records these as failures and moves on to the next file.
    """

    label = "Conversion failed"

    def __str__(self) -> str:
        return f"{self.label}: {self.args[0] if self.args else ''}"


class DecodeError(ConversionError):
    """Raised when the HEIC/HEIF container cannot be read or decoded."""

    def __init__(self, stage: DecodeStage, message: str) -> None:
        super().__init__(message)
        self.stage = stage
        self.message = message
        self.label = f"Decode failed ({stage})"


class EncodeError(ConversionError):
    """Raised when the WebP encoder fails or produces no output."""

    label = "Encode failed"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class WriteError(ConversionError):
    """Raised when encoded bytes cannot be persisted."""

    label = "Write failed"

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message

    def __str__(self) -> str:
        return f"{self.label}: {self.path}: {self.message}"
