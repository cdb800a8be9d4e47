"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from heic2webp.types import DEFAULT_CODEC, DEFAULT_QUALITY


class RunConfiguration(BaseModel):
    """Validated, immutable configuration for one batch run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path
    output_directory: Path | None = None
    quality: int = Field(default=DEFAULT_QUALITY, ge=1, le=100)
    recursive: bool = False
    verbose: bool = False
    codec: str = DEFAULT_CODEC
    jobs: int = Field(default=1, ge=1)

    @field_validator("input_path", mode="before")
    @classmethod
    def _validate_input_path(cls, value: object) -> object:
        # Path("") collapses to ".", so reject blanks before coercion.
        if isinstance(value, str) and not value.strip():
            raise ValueError("input_path must not be empty.")
        return value

    @field_validator("codec")
    @classmethod
    def _validate_codec(cls, value: str) -> str:
        name = value.strip().lower()
        if not name:
            raise ValueError("codec must not be empty.")
        return name


class FileConversionConfig(BaseModel):
    """Validated input for a single-file conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_path: Path
    destination_path: Path | None = None
    quality: int = Field(default=DEFAULT_QUALITY, ge=1, le=100)
    codec: str = DEFAULT_CODEC
