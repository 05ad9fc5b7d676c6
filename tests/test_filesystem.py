"""Tests for the local-disk file checker (infra/filesystem.py)."""

from __future__ import annotations

from pathlib import Path

from slim_predict.infra.filesystem import LocalFileChecker


class TestLocalFileChecker:
    def test_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "model.bin"
        path.write_bytes(b"\x00")
        assert LocalFileChecker().exists(str(path)) is True

    def test_missing_file(self, tmp_path: Path) -> None:
        assert LocalFileChecker().exists(str(tmp_path / "missing.csr")) is False

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        assert LocalFileChecker().exists(str(tmp_path)) is False

    def test_empty_path(self) -> None:
        assert LocalFileChecker().exists("") is False

    def test_dangling_symlink(self, tmp_path: Path) -> None:
        link = tmp_path / "link"
        link.symlink_to(tmp_path / "gone")
        assert LocalFileChecker().exists(str(link)) is False
