"""SliceService — end-to-end slice generation.

Pipeline: RESOLVE → ROOT DIR → SEGMENT DIRS + BARRELS → SLICE BARREL → RESPOND

The first failure stops the pipeline. Nothing already written is removed;
the failed result lists every path this run created so the caller can
decide what to do with the partial tree.
"""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import PurePosixPath
from typing import Any, TextIO

import structlog

from fsdgen.domain.errors import FilesystemError, ValidationError
from fsdgen.domain.layers import LayerKind, ResolvedSlice, resolve
from fsdgen.infrastructure.filesystem import (
    BARREL_FILENAME,
    append_export,
    barrel_path,
    create_barrel,
    ensure_dir,
)
from fsdgen.services.base import BaseService
from fsdgen.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

OP = "create_slice"


class SliceService(BaseService):
    """Generates slice directory trees and their barrel files."""

    def create_slice(self, kind: LayerKind | str, name: str | None) -> ServiceResult:
        """Create the slice *name* in layer *kind* under the project root.

        Success data: ``name``, ``layer``, ``path``, ``segments``,
        ``directories``, ``files``, ``created``, ``message``.
        """
        try:
            target = resolve(kind, name)
        except ValidationError as exc:
            log.warning("slice.invalid", kind=str(kind), name=name, error=str(exc))
            return _failure(
                "VALIDATION_ERROR", str(exc), step="resolve", path=None, cause=str(exc), created=[]
            )

        log.debug("slice.resolve", layer=target.spec.display_name, path=target.root)
        progress = _Progress()
        try:
            self._generate(target, progress)
        except FilesystemError as exc:
            log.warning(
                "slice.failed",
                step=progress.step,
                path=str(exc.path),
                created=len(progress.created),
            )
            return _failure(
                "FILESYSTEM_ERROR",
                str(exc),
                step=progress.step,
                path=str(exc.path),
                cause=str(exc.cause),
                created=progress.created,
            )

        log.debug("slice.created", path=target.root, created=len(progress.created))
        return ServiceResult(
            ok=True,
            op=OP,
            data={
                "name": target.name,
                "layer": target.spec.display_name,
                "path": target.root,
                "segments": list(target.segments),
                "directories": progress.directories,
                "files": progress.files,
                "created": progress.created,
                "message": (
                    f'Created new slice "{target.name}" for layer "{target.spec.display_name}"'
                ),
            },
        )

    # ------------------------------------------------------------------
    # Pipeline stages
    # ------------------------------------------------------------------

    def _generate(self, target: ResolvedSlice, progress: _Progress) -> None:
        progress.step = "root_dir"
        self._ensure_dir(target.root, progress)

        for segment in target.segments:
            relative = target.segment_path(segment)
            progress.step = f"segment_dir:{segment}"
            self._ensure_dir(relative, progress)
            progress.step = f"segment_barrel:{segment}"
            # Segment barrels stay empty.
            with self._open_barrel(relative, progress):
                pass

        progress.step = "slice_barrel"
        with self._open_barrel(target.root, progress) as barrel:
            for segment in target.segments:
                progress.step = f"export:{segment}"
                append_export(barrel, segment)

    def _ensure_dir(self, relative: str, progress: _Progress) -> None:
        path = self._abs(relative)
        # mkdir(parents=True) also creates missing ancestors below the project root.
        missing = [p for p in _prefixes(relative) if not self._abs(p).exists()]
        try:
            ensure_dir(path)
        finally:
            progress.created.extend(p for p in missing if self._abs(p).is_dir())
        progress.directories.append(relative)

    @contextmanager
    def _open_barrel(self, relative: str, progress: _Progress) -> Generator[TextIO]:
        directory = self._abs(relative)
        existed = barrel_path(directory).exists()
        with create_barrel(directory) as handle:
            file_path = f"{relative}/{BARREL_FILENAME}"
            progress.files.append(file_path)
            if not existed:
                progress.created.append(file_path)
            yield handle


class _Progress:
    """Mutable record of how far a generation run got."""

    def __init__(self) -> None:
        self.step = "resolve"
        self.directories: list[str] = []
        self.files: list[str] = []
        self.created: list[str] = []


def _prefixes(relative: str) -> list[str]:
    """Return ``./a``, ``./a/b``, ... for ``./a/b``, top-down."""
    parts = PurePosixPath(relative).parts
    return ["./" + "/".join(parts[: i + 1]) for i in range(len(parts))]


def _failure(code: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP,
        error=ServiceError(code=code, message=message, detail=detail),
    )
