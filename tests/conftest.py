"""Shared pytest fixtures and configuration for the aidd test suite.

Guidelines
----------
* Every test works on throwaway trees under ``tmp_path``.
* Tests never write to the bundled ``ai/`` template.
* Fault injection happens at the infra boundary (``shutil``/``os``).
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

TEMPLATE_FILES: dict[str, str] = {
    "README.md": "# ai\n",
    "commands/help.md": "# /help\n",
    "rules/javascript/javascript.mdc": "# JavaScript\n",
    "rules/please.mdc": "# Aiden\n",
}

PREORDER: list[str] = [
    "ai",
    "ai/README.md",
    "ai/commands",
    "ai/commands/help.md",
    "ai/rules",
    "ai/rules/javascript",
    "ai/rules/javascript/javascript.mdc",
    "ai/rules/please.mdc",
]


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """A small ``ai/`` template tree outside the target directory."""
    root = tmp_path / "source" / "ai"
    for relative, content in TEMPLATE_FILES.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def target(tmp_path: Path) -> Path:
    """An empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project


def _snapshot(root: Path) -> dict[str, object]:
    tree: dict[str, object] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        base = Path(dirpath)
        for name in dirnames + filenames:
            path = base / name
            relative = path.relative_to(root).as_posix()
            if path.is_symlink():
                tree[relative] = ("symlink", os.readlink(path))
            elif path.is_dir():
                tree[relative] = ("dir",)
            else:
                tree[relative] = ("file", path.read_bytes(), path.stat().st_mtime_ns)
    return tree


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, object]]:
    """Return a function capturing every path, link, byte, and mtime under a root."""
    return _snapshot
