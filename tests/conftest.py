"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from toolcommon.filesystem.sink import CollectingSink


@pytest.fixture
def sink() -> CollectingSink:
    """Message sink that records every warning."""
    return CollectingSink()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Directory tree with nested subdirectories and files.

    Layout:
        work/
            a.txt
            sub/
                b.txt
                deeper/
                    c.txt
            empty/
    """
    root = tmp_path / "work"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deeper" / "c.txt").write_text("c")
    return root
