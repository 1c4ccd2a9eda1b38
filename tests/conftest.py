"""Shared test fixtures."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

# PNG signature; loaders only check that the file exists
PNG_BYTES = b"\x89PNG\r\n\x1a\n"


@pytest.fixture
def tmp_dir():
    """Create a temporary directory."""
    return Path(tempfile.mkdtemp())


@pytest.fixture
def write_card(tmp_dir):
    """Write a markdown card into the temp directory and return its path."""

    def _write(name: str, contents: str) -> Path:
        path = tmp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_image(tmp_dir):
    """Write a tiny PNG into the temp directory and return its path."""

    def _write(name: str) -> Path:
        path = tmp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(PNG_BYTES)
        return path

    return _write
