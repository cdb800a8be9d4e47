"""Shared pytest configuration, marker assignment and filesystem fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def mixed_tree(tmp_path: Path) -> Path:
    """Directory holding ``a.heic``, ``b.HEIF``, ``c.jpg`` and ``sub/d.heic``.

    File contents are placeholders; only names matter to discovery.
    """
    root = tmp_path / "photos"
    (root / "sub").mkdir(parents=True)
    for rel in ("a.heic", "b.HEIF", "c.jpg", "sub/d.heic"):
        (root / rel).write_bytes(b"placeholder")
    return root
