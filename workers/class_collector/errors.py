"""
Errors raised by the collector.

Every error carries the offending ``path`` so callers can report it
without parsing the message.
"""
from __future__ import annotations

from pathlib import Path


class CollectorError(Exception):
    """Base class for every collector failure."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class TraversalError(CollectorError):
    """A directory could not be enumerated."""


class MissingRoot(TraversalError):
    """A source or class root does not exist."""


class UnresolvedUnit(CollectorError):
    """A source unit has no compiled artifact in the class tree."""


class CopyError(CollectorError):
    """Copying a file into the output tree failed."""


class HeaderError(CollectorError):
    """An artifact header could not be decoded."""


class MalformedArtifact(HeaderError):
    """The artifact is shorter than its fixed header, or unreadable."""


class InvalidMagicNumber(HeaderError):
    """The artifact does not start with the class-file magic number."""
