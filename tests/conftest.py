"""
Shared pytest fixtures for the dirlist test suite.

Provides fixtures for:
- Isolated DIRLISTD_HOME storage
- A sample data directory with fixed sizes and timestamps
"""

import os
from collections.abc import Generator
from pathlib import Path

import pytest

# 2023-11-14 22:13:20 UTC
SAMPLE_MTIME_MS = 1_700_000_000_000


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove DIRLISTD_* variables and reset cached settings around each test."""
    from dirlistd.dependencies import get_settings

    for key in list(os.environ):
        if key.startswith("DIRLISTD_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_storage_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point DIRLISTD_HOME at a temporary directory.

    Returns:
        Path to temporary storage directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("DIRLISTD_HOME", str(home))
    return home


def _touch(path: Path, size: int) -> None:
    path.write_bytes(b"x" * size)
    os.utime(path, ns=(SAMPLE_MTIME_MS * 1_000_000, SAMPLE_MTIME_MS * 1_000_000))


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    """Create a data directory.

    Layout:
        data/
            beta/
                nested.txt  (10 bytes)
            alpha/
            b.txt       (1536 bytes)
            a.log       (1 byte)
            empty.bin   (0 bytes)
    """
    root = tmp_path / "data"
    root.mkdir()
    (root / "beta").mkdir()
    (root / "alpha").mkdir()
    _touch(root / "beta" / "nested.txt", 10)
    _touch(root / "b.txt", 1536)
    _touch(root / "a.log", 1)
    _touch(root / "empty.bin", 0)
    return root
