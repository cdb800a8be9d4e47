"""Locate HEIC/HEIF inputs on disk."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from heic2webp.errors import InvalidInputError, NotFoundError
from heic2webp.types import HEIC_EXTENSIONS

logger = logging.getLogger(__name__)


def is_eligible(path: Path) -> bool:
    """Return ``True`` for regular files with a ``.heic``/``.heif`` suffix.

    The suffix comparison is case-insensitive. Symlinks to regular files
    count as regular files.
    """
    return path.suffix.lower() in HEIC_EXTENSIONS and path.is_file()


def _iter_files(root: Path, recursive: bool) -> Iterator[Path]:
    def _on_error(exc: OSError) -> None:
        if exc.filename is not None and Path(exc.filename) == root:
            raise InvalidInputError(
                f"Cannot read directory {root}: {exc.strerror or exc}"
            ) from exc
        logger.warning("skipping unreadable directory %s: %s", exc.filename, exc.strerror)

    # os.walk does not descend into directory symlinks, so no cycles.
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        if not recursive:
            dirnames.clear()
        base = Path(dirpath)
        for name in filenames:
            yield base / name


def discover(root: Path, recursive: bool = False) -> list[Path]:
    """Return the eligible input files for ``root``.

    Parameters
    ----------
    root : Path
        A HEIC/HEIF file or a directory.
    recursive : bool, default=False
        Descend into subdirectories when ``root`` is a directory.

    Returns
    -------
    list[Path]
        ``[root]`` for a file; otherwise the eligible files sorted
        lexicographically by path.

    Raises
    ------
    NotFoundError
        If ``root`` does not exist.
    InvalidInputError
        If ``root`` is a non-HEIC file, not a file or directory, or an
        unreadable directory.
    """
    if not root.exists():
        raise NotFoundError(f"Input not found: {root}")
    if root.is_dir():
        files = sorted(path for path in _iter_files(root, recursive) if is_eligible(path))
        logger.debug("discovered %d file(s) under %s", len(files), root)
        return files
    if root.is_file():
        if not is_eligible(root):
            raise InvalidInputError(f"Input file must be a HEIC/HEIF file: {root}")
        return [root]
    raise InvalidInputError(f"Input must be a file or directory: {root}")
