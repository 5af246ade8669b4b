"""Tests for the directory and barrel file primitives."""

from pathlib import Path

import pytest

from fsdgen.domain.errors import FilesystemError
from fsdgen.infrastructure.filesystem import (
    BARREL_FILENAME,
    append_export,
    barrel_path,
    create_barrel,
    ensure_dir,
)


class TestEnsureDir:
    def test_creates_ancestors(self, tmp_path: Path) -> None:
        target = tmp_path / "pages" / "login" / "ui"
        assert ensure_dir(target) == target
        assert target.is_dir()

    def test_idempotent(self, tmp_path: Path) -> None:
        target = tmp_path / "widgets" / "button"
        ensure_dir(target)
        (target / "keep.txt").write_text("x")
        before = sorted(p.name for p in tmp_path.rglob("*"))
        ensure_dir(target)
        after = sorted(p.name for p in tmp_path.rglob("*"))
        assert before == after
        assert (target / "keep.txt").read_text() == "x"

    def test_file_in_the_way(self, tmp_path: Path) -> None:
        blocker = tmp_path / "entities"
        blocker.write_text("not a dir")
        with pytest.raises(FilesystemError) as exc_info:
            ensure_dir(blocker / "user")
        assert exc_info.value.path == blocker / "user"
        assert isinstance(exc_info.value.cause, OSError)

    def test_target_is_a_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "shared"
        blocker.write_text("")
        with pytest.raises(FilesystemError, match="failed to create directory"):
            ensure_dir(blocker)


class TestBarrel:
    def test_barrel_filename(self, tmp_path: Path) -> None:
        assert BARREL_FILENAME == "index.ts"
        assert barrel_path(tmp_path) == tmp_path / "index.ts"

    def test_creates_empty_file(self, tmp_path: Path) -> None:
        with create_barrel(tmp_path):
            pass
        path = tmp_path / "index.ts"
        assert path.is_file()
        assert path.stat().st_size == 0

    def test_append_export_line(self, tmp_path: Path) -> None:
        with create_barrel(tmp_path) as handle:
            append_export(handle, "ui")
            append_export(handle, "model")
        content = (tmp_path / "index.ts").read_bytes()
        assert content == b"export {} from './ui'\nexport {} from './model'\n"

    def test_duplicate_exports_not_collapsed(self, tmp_path: Path) -> None:
        with create_barrel(tmp_path) as handle:
            append_export(handle, "api")
            append_export(handle, "api")
        lines = (tmp_path / "index.ts").read_text().splitlines()
        assert lines == ["export {} from './api'", "export {} from './api'"]

    def test_existing_content_kept(self, tmp_path: Path) -> None:
        (tmp_path / "index.ts").write_text("export * from './custom'\n")
        with create_barrel(tmp_path) as handle:
            append_export(handle, "lib")
        assert (tmp_path / "index.ts").read_text() == (
            "export * from './custom'\nexport {} from './lib'\n"
        )

    def test_handle_closed_on_error(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError), create_barrel(tmp_path) as handle:
            raise RuntimeError("boom")
        assert handle.closed

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(FilesystemError) as exc_info, create_barrel(tmp_path / "nope"):
            pass
        assert exc_info.value.path == tmp_path / "nope" / "index.ts"

    def test_barrel_path_is_a_directory(self, tmp_path: Path) -> None:
        (tmp_path / "index.ts").mkdir()
        with pytest.raises(FilesystemError, match="failed to create barrel file"):
            with create_barrel(tmp_path):
                pass
