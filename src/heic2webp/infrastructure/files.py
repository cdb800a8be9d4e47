"""Filesystem helpers used by codec adapters."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from heic2webp.errors import WriteError

logger = logging.getLogger(__name__)


def file_size(path: Path) -> int:
    """Return the size of ``path`` in bytes, or 0 when it cannot be read."""
    try:
        return path.stat().st_size
    except OSError:
        return 0


def write_bytes_atomic(path: Path, data: bytes) -> int:
    """Write ``data`` to ``path`` without ever exposing a partial file.

    Bytes land in a hidden temporary file next to ``path`` which is then
    moved over the destination with :func:`os.replace`. An existing
    destination is overwritten.

    Parameters
    ----------
    path : Path
        Final destination.
    data : bytes
        Complete file payload.

    Returns
    -------
    int
        Number of bytes written.

    Raises
    ------
    WriteError
        If the temporary file cannot be created, written or renamed. The
        temporary file is removed before raising.
    """
    tmp_path: Path | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".part", dir=path.parent
        )
        tmp_path = Path(tmp_name)
        try:
            handle = os.fdopen(fd, "wb")
        except OSError:
            os.close(fd)
            raise
        with handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        # mkstemp creates 0600 files.
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise WriteError(path, exc.strerror or str(exc)) from exc
    logger.debug("wrote %d bytes to %s", len(data), path)
    return len(data)
