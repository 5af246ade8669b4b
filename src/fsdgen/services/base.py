"""BaseService — shared foundation for fsdgen services."""

from __future__ import annotations

from pathlib import Path


class BaseService:
    """Base for service classes operating on a project directory.

    All generated paths are relative to ``project_root``, which defaults
    to the current working directory at construction time.
    """

    def __init__(self, project_root: Path | None = None) -> None:
        self._root = project_root if project_root is not None else Path.cwd()

    @property
    def project_root(self) -> Path:
        return self._root

    def _abs(self, relative: str) -> Path:
        """Map a ``./``-prefixed project path onto the project root."""
        return self._root / relative
