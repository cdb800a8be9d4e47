"""Concrete filesystem and codec adapters."""
