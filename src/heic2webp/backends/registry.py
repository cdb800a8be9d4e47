"""Codec backend registry."""

from __future__ import annotations

from collections.abc import Callable

from heic2webp.application.ports import Codec
from heic2webp.errors import BackendError

CodecFactory = Callable[[], Codec]


class CodecRegistry:
    """Map backend names to codec factories.

    Factories are only called on :meth:`create`, so listing backends never
    imports native codec libraries.
    """

    def __init__(self) -> None:
        self._factories: dict[str, CodecFactory] = {}

    def register(self, name: str, factory: CodecFactory) -> None:
        """Register a codec factory under a unique name.

        Parameters
        ----------
        name : str
            Backend name used on the command line.
        factory : Callable[[], Codec]
            Zero-argument callable returning a codec instance.

        Raises
        ------
        BackendError
            If the name is empty.
        """
        key = name.strip().lower()
        if not key:
            raise BackendError("Codec backend must have a non-empty name.")
        self._factories[key] = factory

    def names(self) -> list[str]:
        """Return registered backend names, sorted."""
        return sorted(self._factories)

    def create(self, name: str) -> Codec:
        """Instantiate the backend registered under ``name``.

        Raises
        ------
        BackendError
            If the name is unknown or the backend cannot be initialized
            (for example a missing native library).
        """
        key = name.strip().lower()
        try:
            factory = self._factories[key]
        except KeyError as exc:
            raise BackendError(
                f"Unknown codec '{name}'. Available codecs: {', '.join(self.names())}"
            ) from exc
        try:
            return factory()
        except ImportError as exc:
            raise BackendError(f"Codec '{key}' is unavailable: {exc}") from exc


def _libheif() -> Codec:
    from heic2webp.adapters.codecs import LibheifCodec

    return LibheifCodec()


def _pillow() -> Codec:
    from heic2webp.adapters.codecs import PillowCodec

    return PillowCodec()


def create_default_registry() -> CodecRegistry:
    """Create a registry holding the built-in ``libheif`` and ``pillow`` codecs."""
    registry = CodecRegistry()
    registry.register("libheif", _libheif)
    registry.register("pillow", _pillow)
    return registry
