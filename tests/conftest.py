"""Shared fixtures for the boilerkit test suite."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "frontend"
    root.mkdir()
    return root


@pytest.fixture
def tree() -> Callable[[Path], set[str]]:
    """Lists every file and directory under a root, as POSIX paths relative to it."""

    def _tree(root: Path) -> set[str]:
        return {p.relative_to(root).as_posix() for p in root.rglob("*")}

    return _tree
