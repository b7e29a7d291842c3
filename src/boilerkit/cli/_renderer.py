"""Writes boilerplate files to disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from boilerkit.cli._types import Boilerplate, Setup

SRC_DIR = "src"

OnWrite = Callable[[Boilerplate, Path], None]


def ensure_dir(path: Path) -> Path:
    """Create *path* and any missing parents. An existing directory is left as is."""
    if not path.exists():
        path.mkdir(parents=True)
    return path


def materialize(root: Path, boilerplate: Boilerplate) -> Path:
    """Write *boilerplate* under *root*, overwriting any existing file."""
    target = root / boilerplate.destination
    ensure_dir(target.parent)
    target.write_text(boilerplate.content, encoding="utf-8")
    return target


def render_setup(root: Path, setup: Setup, on_write: OnWrite | None = None) -> list[Path]:
    """Materialize every boilerplate of *setup*. Returns the written paths in order."""
    ensure_dir(root / SRC_DIR)

    written: list[Path] = []
    for boilerplate in setup.boilerplates:
        path = materialize(root, boilerplate)
        if on_write is not None:
            on_write(boilerplate, path)
        written.append(path)

    return written
