# tests/conftest.py
# Shared fixtures: a throwaway sandbox root and quiet structured loggers.

from __future__ import annotations

from pathlib import Path

import pytest

from boundedfs import BoundedPath
from boundedfs import bounded_path as bounded_path_mod
from boundedfs import tree as tree_mod
from boundedfs.logging import StructuredLogger


@pytest.fixture(autouse=True)
def _quiet_loggers(monkeypatch):
    """Route library loggers to a silent instance for each test."""
    monkeypatch.setattr(
        bounded_path_mod, "_logger", StructuredLogger("bounded_path", enable_console=False)
    )
    monkeypatch.setattr(tree_mod, "_logger", StructuredLogger("tree", enable_console=False))


@pytest.fixture()
def sandbox_dir(tmp_path: Path) -> Path:
    root = (tmp_path / "testingFiles").resolve()
    root.mkdir()
    return root


@pytest.fixture()
def sandbox(sandbox_dir: Path) -> BoundedPath:
    return BoundedPath(str(sandbox_dir))
