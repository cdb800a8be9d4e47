"""HEIC/HEIF to WebP codecs implementing the ``Codec`` port."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from PIL import Image, features

from heic2webp.application.results import EncodedImage
from heic2webp.errors import BackendError, DecodeError, EncodeError
from heic2webp.infrastructure.files import write_bytes_atomic

logger = logging.getLogger(__name__)

# Exceptions raised by libheif bindings and Pillow for unreadable input.
_CODEC_ERRORS = (OSError, ValueError, RuntimeError, EOFError, SyntaxError)


def _require_webp() -> None:
    if not features.check("webp"):
        raise BackendError("Pillow was built without WebP support.")


def _encode_webp(image: Image.Image, quality: int) -> bytes:
    """Encode an RGB image to WebP bytes in memory."""
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="WEBP", quality=quality)
    except _CODEC_ERRORS as exc:
        raise EncodeError(str(exc) or type(exc).__name__) from exc
    data = buffer.getvalue()
    if not data:
        raise EncodeError("encoder produced no output")
    return data


def _finish(image: Image.Image, destination_path: Path, quality: int) -> EncodedImage:
    width, height = image.size
    logger.debug("encoding %dx%d WebP at quality %d", width, height, quality)
    data = _encode_webp(image, quality)
    written = write_bytes_atomic(destination_path, data)
    return EncodedImage(width=width, height=height, output_size=written)


class LibheifCodec:
    """Decode through libheif (``pillow_heif``) and encode through libwebp.

    The primary image is decoded to an interleaved raster and handed to the
    encoder together with its row stride.
    """

    name = "libheif"

    def __init__(self) -> None:
        _require_webp()

    def convert(
        self,
        source_path: Path,
        destination_path: Path,
        quality: int,
    ) -> EncodedImage:
        """Convert one HEIC/HEIF file to WebP.

        Parameters
        ----------
        source_path : Path
            Input container.
        destination_path : Path
            Output WebP path; overwritten when present.
        quality : int
            WebP quality in ``[1, 100]``.

        Returns
        -------
        EncodedImage
            Decoded dimensions and written byte count.
        """
        import pillow_heif

        logger.debug("decoding %s", source_path)
        try:
            heif_file = pillow_heif.open_heif(source_path, convert_hdr_to_8bit=True)
        except _CODEC_ERRORS as exc:
            raise DecodeError("open", str(exc)) from exc

        if len(heif_file) == 0:
            raise DecodeError("primary_image", "container has no images")
        try:
            primary = heif_file[heif_file.primary_index]
        except (IndexError, *_CODEC_ERRORS) as exc:
            raise DecodeError("primary_image", str(exc)) from exc

        try:
            raster = primary.data
            mode = primary.mode
            with Image.frombuffer(
                mode, primary.size, raster, "raw", mode, primary.stride, 1
            ) as decoded, decoded.convert("RGB") as rgb:
                return _finish(rgb, destination_path, quality)
        except _CODEC_ERRORS as exc:
            raise DecodeError("decode", str(exc)) from exc


class PillowCodec:
    """Let Pillow open and encode the file via the registered HEIF plugin."""

    name = "pillow"

    def __init__(self) -> None:
        from pillow_heif import register_heif_opener

        _require_webp()
        register_heif_opener()

    def convert(
        self,
        source_path: Path,
        destination_path: Path,
        quality: int,
    ) -> EncodedImage:
        """Convert one HEIC/HEIF file to WebP using Pillow's image API."""
        logger.debug("opening %s", source_path)
        try:
            image = Image.open(source_path)
        except _CODEC_ERRORS as exc:
            raise DecodeError("open", str(exc)) from exc

        with image:
            try:
                image.load()
                rgb = image.convert("RGB")
            except _CODEC_ERRORS as exc:
                raise DecodeError("decode", str(exc)) from exc
            with rgb:
                return _finish(rgb, destination_path, quality)
