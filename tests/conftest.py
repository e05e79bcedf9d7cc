"""Shared fixtures: small directory trees under tmp_path."""

from pathlib import Path

import pytest


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """
    root/
      alpha/
        inner/
        notes.md
      beta/
      .secret/
      readme.txt
      .env
    """
    root = tmp_path / "root"
    (root / "alpha" / "inner").mkdir(parents=True)
    (root / "alpha" / "notes.md").write_text("x\n")
    (root / "beta").mkdir()
    (root / ".secret").mkdir()
    (root / "readme.txt").write_text("hello\n")
    (root / ".env").write_text("A=1\n")
    return root


@pytest.fixture
def in_tree(tree: Path, monkeypatch) -> Path:
    """Run with the working directory set to the tree root, restored afterwards."""
    monkeypatch.chdir(tree)
    return tree
