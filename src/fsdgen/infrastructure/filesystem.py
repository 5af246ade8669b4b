"""Filesystem primitives for slice generation.

Two mutation primitives: :func:`ensure_dir` for directories and
:func:`create_barrel` / :func:`append_export` for barrel files.
Any ``OSError`` is re-raised as :class:`FilesystemError` carrying the
offending path; nothing is retried or swallowed here.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from fsdgen.domain.errors import FilesystemError

logger = logging.getLogger(__name__)

BARREL_FILENAME = "index.ts"

EXPORT_LINE = "export {{}} from './{segment}'\n"


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------


def ensure_dir(path: Path) -> Path:
    """Create *path* and any missing ancestors. Existing directories are a no-op."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError("failed to create directory", path=path, cause=exc) from exc
    logger.debug("dir.ensure %s", path)
    return path


# ---------------------------------------------------------------------------
# Barrel files
# ---------------------------------------------------------------------------


def barrel_path(directory: Path) -> Path:
    """Return the barrel file location inside *directory*."""
    return directory / BARREL_FILENAME


@contextmanager
def create_barrel(directory: Path) -> Generator[TextIO]:
    """Open the barrel file in *directory* for appending, creating it if missing.

    An existing barrel is not truncated: its content is kept and new
    exports land after it, so re-running generation duplicates lines.
    The handle is closed when the block exits, including on error.
    """
    path = barrel_path(directory)
    try:
        handle = path.open("a", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise FilesystemError("failed to create barrel file", path=path, cause=exc) from exc
    logger.debug("barrel.create %s", path)
    try:
        yield handle
    finally:
        try:
            handle.close()
        except OSError as exc:
            raise FilesystemError("failed to write barrel file", path=path, cause=exc) from exc


def append_export(handle: TextIO, segment: str) -> None:
    """Append one ``export {} from './<segment>'`` line. No deduplication."""
    try:
        handle.write(EXPORT_LINE.format(segment=segment))
    except OSError as exc:
        raise FilesystemError(
            "failed to write barrel file", path=getattr(handle, "name", ""), cause=exc
        ) from exc
