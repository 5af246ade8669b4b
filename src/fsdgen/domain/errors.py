"""Typed errors raised by the domain and infrastructure layers.

Services catch these and convert them into a failed ServiceResult;
they must never escape to the process boundary.
"""

from __future__ import annotations

from pathlib import Path


class FsdError(Exception):
    """Base class for all fsdgen errors."""


class ValidationError(FsdError, ValueError):
    """Slice input rejected before any filesystem mutation."""


class FilesystemError(FsdError):
    """A directory or barrel file could not be created or written.

    Attributes:
        path: The path the failing operation targeted.
        cause: The underlying ``OSError``.
    """

    def __init__(self, message: str, *, path: Path | str, cause: OSError) -> None:
        super().__init__(f"{message}: {path}: {cause.strerror or cause}")
        self.path = Path(path)
        self.cause = cause
