"""Tests for write-if-absent / overwrite-if-forced file materialization."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from scaffold_tasks.core import file_writer
from scaffold_tasks.core.file_writer import WriteOutcome, write_file


class TestWriteFile:

    def test_creates_missing_file_and_parents(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "dir" / "Dockerfile"

        result = write_file(target, "FROM node:18\n")

        assert result is WriteOutcome.WRITTEN
        assert target.read_text(encoding="utf-8") == "FROM node:18\n"

    def test_writes_bytes_verbatim(self, tmp_path: Path) -> None:
        target = tmp_path / "payload.bin"
        payload = b"line one\r\nline two\x00\xff"

        write_file(target, payload)

        assert target.read_bytes() == payload

    def test_existing_file_is_left_alone_without_overwrite(self, tmp_path: Path) -> None:
        target = tmp_path / "Dockerfile"
        target.write_text("custom\n", encoding="utf-8")
        before = target.stat().st_mtime_ns

        result = write_file(target, "template\n", overwrite=False)

        assert result is WriteOutcome.ALREADY_EXISTS
        assert target.read_text(encoding="utf-8") == "custom\n"
        assert target.stat().st_mtime_ns == before

    def test_existing_file_is_replaced_with_overwrite(self, tmp_path: Path) -> None:
        target = tmp_path / "Dockerfile"
        target.write_text("a much longer custom file body\n", encoding="utf-8")

        result = write_file(target, "short\n", overwrite=True)

        assert result is WriteOutcome.WRITTEN
        assert target.read_text(encoding="utf-8") == "short\n"

    def test_overwrite_keeps_existing_file_mode(self, tmp_path: Path) -> None:
        target = tmp_path / "entrypoint.sh"
        target.write_text("#!/bin/sh\n", encoding="utf-8")
        target.chmod(0o755)

        write_file(target, "#!/bin/sh\necho hi\n", overwrite=True)

        assert stat.S_IMODE(target.stat().st_mode) == 0o755

    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        write_file(tmp_path / "Dockerfile", "FROM node:18\n")
        write_file(tmp_path / "Dockerfile", "FROM node:20\n", overwrite=True)

        assert sorted(p.name for p in tmp_path.iterdir()) == ["Dockerfile"]

    def test_failed_replace_leaves_original_and_cleans_temp(self, tmp_path: Path) -> None:
        target = tmp_path / "Dockerfile"
        target.write_text("original\n", encoding="utf-8")

        with patch.object(file_writer.os, "replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                write_file(target, "new\n", overwrite=True)

        assert target.read_text(encoding="utf-8") == "original\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["Dockerfile"]

    def test_directory_at_target_is_not_treated_as_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "Dockerfile"
        target.mkdir()

        with pytest.raises(IsADirectoryError):
            write_file(target, "FROM node:18\n")

        assert target.is_dir()
        assert sorted(p.name for p in tmp_path.iterdir()) == ["Dockerfile"]

    @pytest.mark.skipif(
        hasattr(os, "geteuid") and os.geteuid() == 0,
        reason="root ignores directory permissions",
    )
    def test_unwritable_directory_raises(self, tmp_path: Path) -> None:
        locked = tmp_path / "locked"
        locked.mkdir()
        locked.chmod(0o500)
        try:
            with pytest.raises(OSError):
                write_file(locked / "Dockerfile", "FROM node:18\n")
        finally:
            locked.chmod(0o700)

        assert not (locked / "Dockerfile").exists()
