"""Route-level error taxonomy raised by the compiler"""

from pathlib import Path
from typing import Optional


class CwrapError(Exception):
    """Base error; carries the offending path when one is known."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        msg = super().__str__()
        return f"{self.path}: {msg}" if self.path is not None else msg


class MissingSkeleton(CwrapError):
    """Route directory has no skeleton.json; the route is skipped."""


class MalformedJson(CwrapError):
    """skeleton.json is not valid JSON or its root fields have the wrong shape."""


class MalformedTemplate(CwrapError):
    """A blueprint could not be expanded into concrete nodes."""


class WriteFailure(CwrapError):
    """An output file could not be written."""
