"""Shared type aliases for heic2webp modules."""

from __future__ import annotations

from typing import Literal

type DecodeStage = Literal["open", "primary_image", "decode"]

HEIC_EXTENSIONS: frozenset[str] = frozenset({".heic", ".heif"})
WEBP_SUFFIX = ".webp"
DEFAULT_QUALITY = 85
DEFAULT_CODEC = "libheif"
