"""Shared pytest fixtures and configuration for the aoc2019 test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Input files are written under ``tmp_path`` only.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes *content* to a fresh input file."""

    def _write(content: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
