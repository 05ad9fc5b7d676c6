"""Shared pytest fixtures for the slim-predict test suite.

Guidelines
----------
* Core tests use :class:`FakeFileChecker`; they never touch the disk.
* Tests that need real files create them under ``tmp_path``.
* Tests must not depend on the current working directory.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest


class FakeFileChecker:
    """In-memory ``FileChecker`` that records every probed path."""

    def __init__(self, missing: Iterable[str] = ()) -> None:
        self.missing: set[str] = set(missing)
        self.calls: list[str] = []

    def exists(self, path: str) -> bool:
        self.calls.append(path)
        return path not in self.missing


@pytest.fixture()
def checker() -> FakeFileChecker:
    return FakeFileChecker()


@pytest.fixture()
def input_files(tmp_path: Path) -> tuple[str, str, str]:
    """Create model, old, and test files and return their paths."""
    paths = []
    for name in ("model.bin", "old.csr", "test.csr"):
        path = tmp_path / name
        path.write_text("1 1.0\n")
        paths.append(str(path))
    return paths[0], paths[1], paths[2]
