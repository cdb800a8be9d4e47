"""Fixtures producing real HEIC files through pillow-heif."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

type HeicFactory = Callable[..., Path]


@pytest.fixture
def heic_factory() -> HeicFactory:
    """Return a callable writing a small gradient HEIC image to ``path``."""
    pillow_heif = pytest.importorskip("pillow_heif")

    def _make(path: Path, size: tuple[int, int] = (64, 48), mode: str = "RGB") -> Path:
        image = Image.new(mode, size)
        width, height = size
        for x in range(width):
            for y in range(height):
                rgb = (x * 255 // width, y * 255 // height, 128)
                image.putpixel((x, y), rgb + (200,) if mode == "RGBA" else rgb)
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            pillow_heif.from_pillow(image).save(path, quality=90)
        except (RuntimeError, ValueError, OSError) as exc:
            pytest.skip(f"HEIF encoder unavailable: {exc}")
        return path

    return _make
