"""Codec backend selection."""

from .registry import CodecRegistry, create_default_registry

__all__ = ["CodecRegistry", "create_default_registry"]
