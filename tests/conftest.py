"""Shared pytest fixtures for fsdgen tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty frontend project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project so the CLI writes slices there.

    Also unsets config env vars so a developer's own settings don't leak in.
    """
    monkeypatch.chdir(project_root)
    for var in ("FSDGEN_CONFIG", "FSDGEN_JSON_OUTPUT", "FSDGEN_QUIET", "FSDGEN_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fsd = logging.getLogger("fsdgen")
    fsd_level = fsd.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fsd.setLevel(fsd_level)
    structlog.reset_defaults()


def tree(root: Path) -> tuple[list[str], list[str]]:
    """Return ``(directories, files)`` under *root* as sorted relative POSIX paths."""
    dirs = sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_dir())
    files = sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())
    return dirs, files
