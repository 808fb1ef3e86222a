"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from store.local_file_store import LocalFileStore  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host LOCKBOX_* variables out of test runs."""
    monkeypatch.delenv("LOCKBOX_DATA_ROOT", raising=False)
    monkeypatch.delenv("LOCKBOX_DEFAULT_MODE", raising=False)


@pytest.fixture
def store(tmp_path: Path) -> LocalFileStore:
    """Return a store rooted in a fresh temporary directory."""
    return LocalFileStore(tmp_path / "data")
