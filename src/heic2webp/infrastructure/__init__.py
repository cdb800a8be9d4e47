"""Infrastructure helpers (filesystem I/O)."""
