"""Unit tests for codec adapters with the HEIF decoder replaced by doubles."""

from __future__ import annotations

from pathlib import Path

import pillow_heif
import pytest
from PIL import Image

from heic2webp.adapters import codecs as codecs_module
from heic2webp.adapters.codecs import LibheifCodec, PillowCodec
from heic2webp.errors import DecodeError, EncodeError, WriteError


class _HeifImage:
    """Minimal stand-in for ``pillow_heif.HeifImage`` with a padded stride."""

    def __init__(self, image: Image.Image, padding: int = 0) -> None:
        self.mode = image.mode
        self.size = image.size
        width, height = image.size
        bands = len(image.getbands())
        row = width * bands
        self.stride = row + padding
        raw = image.tobytes()
        self.data = b"".join(
            raw[y * row : (y + 1) * row] + b"\x00" * padding for y in range(height)
        )


class _HeifFile:
    def __init__(self, images: list[_HeifImage], primary_index: int = 0) -> None:
        self._images = images
        self.primary_index = primary_index

    def __len__(self) -> int:
        return len(self._images)

    def __getitem__(self, index: int) -> _HeifImage:
        return self._images[index]


def _source(tmp_path: Path) -> Path:
    path = tmp_path / "photo.heic"
    path.write_bytes(b"\x00\x00\x00\x18ftypheic")
    return path


def test_libheif_codec_encodes_primary_image_with_stride(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Decoded raster with row padding is encoded to a WebP of the same size."""
    thumb = Image.new("RGB", (16, 8), (200, 10, 10))
    primary = Image.new("RGBA", (20, 12), (10, 200, 10, 255))
    fake = _HeifFile([_HeifImage(thumb), _HeifImage(primary, padding=16)], primary_index=1)
    monkeypatch.setattr(pillow_heif, "open_heif", lambda *_args, **_kwargs: fake)

    target = tmp_path / "photo.webp"
    image = LibheifCodec().convert(_source(tmp_path), target, quality=80)

    data = target.read_bytes()
    assert data[:4] == b"RIFF" and data[8:12] == b"WEBP"
    assert (image.width, image.height) == (20, 12)
    assert image.output_size == len(data)
    with Image.open(target) as written:
        assert written.size == (20, 12)
        assert written.mode == "RGB"


def test_libheif_open_failure_is_decode_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Unreadable containers raise ``DecodeError`` at the open stage."""

    def fail(*_args: object, **_kwargs: object) -> object:
        raise ValueError("Invalid input: No 'ftyp' box")

    monkeypatch.setattr(pillow_heif, "open_heif", fail)
    target = tmp_path / "photo.webp"

    with pytest.raises(DecodeError) as excinfo:
        LibheifCodec().convert(_source(tmp_path), target, quality=80)

    assert excinfo.value.stage == "open"
    assert "No 'ftyp' box" in str(excinfo.value)
    assert not target.exists()


def test_libheif_without_images_is_primary_image_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Containers without images fail at the primary-image stage."""
    monkeypatch.setattr(pillow_heif, "open_heif", lambda *_a, **_k: _HeifFile([]))
    with pytest.raises(DecodeError) as excinfo:
        LibheifCodec().convert(_source(tmp_path), tmp_path / "o.webp", quality=80)
    assert excinfo.value.stage == "primary_image"


def test_libheif_decode_failure_is_decode_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Errors raised while pixels are decoded map to the decode stage."""

    class _Broken(_HeifImage):
        @property
        def data(self) -> bytes:  # type: ignore[override]
            raise RuntimeError("Decoder plugin generated an error")

        @data.setter
        def data(self, value: bytes) -> None:
            del value

    broken = _Broken(Image.new("RGB", (4, 4)))
    monkeypatch.setattr(pillow_heif, "open_heif", lambda *_a, **_k: _HeifFile([broken]))
    target = tmp_path / "o.webp"

    with pytest.raises(DecodeError) as excinfo:
        LibheifCodec().convert(_source(tmp_path), target, quality=80)

    assert excinfo.value.stage == "decode"
    assert not target.exists()


def test_empty_encoder_output_is_encode_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """An encoder producing zero bytes raises ``EncodeError`` and writes nothing."""
    fake = _HeifFile([_HeifImage(Image.new("RGB", (4, 4)))])
    monkeypatch.setattr(pillow_heif, "open_heif", lambda *_a, **_k: fake)
    monkeypatch.setattr(Image.Image, "save", lambda self, fp, **kwargs: None)
    target = tmp_path / "o.webp"

    with pytest.raises(EncodeError, match="no output"):
        LibheifCodec().convert(_source(tmp_path), target, quality=80)

    assert not target.exists()


def test_write_failure_surfaces_as_write_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Missing destination directory yields ``WriteError`` with the path."""
    fake = _HeifFile([_HeifImage(Image.new("RGB", (4, 4)))])
    monkeypatch.setattr(pillow_heif, "open_heif", lambda *_a, **_k: fake)
    target = tmp_path / "missing" / "o.webp"

    with pytest.raises(WriteError) as excinfo:
        LibheifCodec().convert(_source(tmp_path), target, quality=80)

    assert excinfo.value.path == target


def test_pillow_codec_rejects_non_image(tmp_path: Path) -> None:
    """Pillow backend reports unidentifiable files as open-stage decode errors."""
    source = tmp_path / "junk.heic"
    source.write_bytes(b"definitely not an image")
    with pytest.raises(DecodeError) as excinfo:
        PillowCodec().convert(source, tmp_path / "junk.webp", quality=80)
    assert excinfo.value.stage == "open"
    assert not (tmp_path / "junk.webp").exists()


def test_pillow_codec_encodes_any_pillow_readable_image(tmp_path: Path) -> None:
    """Pillow backend encodes whatever Pillow can open, dropping alpha."""
    source = tmp_path / "img.heic"
    Image.new("RGBA", (9, 7), (1, 2, 3, 128)).save(source, format="PNG")

    image = PillowCodec().convert(source, tmp_path / "img.webp", quality=60)

    assert (image.width, image.height) == (9, 7)
    with Image.open(tmp_path / "img.webp") as written:
        assert written.format == "WEBP"
        assert written.mode == "RGB"


def test_missing_webp_support_is_backend_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Codecs refuse to start when Pillow lacks WebP."""
    from heic2webp.errors import BackendError

    monkeypatch.setattr(codecs_module.features, "check", lambda _name: False)
    with pytest.raises(BackendError, match="WebP"):
        LibheifCodec()
