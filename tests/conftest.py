"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Build ``root/{sub/, sub/file.txt, link -> sub}`` and chdir next to it.

    Tests can then search the relative root ``"root"`` and compare
    against relative paths.
    """
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (sub / "file.txt").write_text("content")
    os.symlink("sub", root / "link")
    monkeypatch.chdir(tmp_path)
    return root


@pytest.fixture
def nested_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Build a deeper tree with mixed names for ordering and name tests.

    Layout::

        tree/
            a.txt
            b/
                module.py
                c/
                    notes.md
            dead -> missing
            z.log
    """
    root = tmp_path / "tree"
    (root / "b" / "c").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "z.log").write_text("z")
    (root / "b" / "module.py").write_text("pass\n")
    (root / "b" / "c" / "notes.md").write_text("# notes\n")
    os.symlink("missing", root / "dead")
    monkeypatch.chdir(tmp_path)
    return root
