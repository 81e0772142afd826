"""
Summary: Closed set of failures a track numbering run can report.
Why: Callers branch on the kind of failure instead of matching message text.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class TaggingErrorKind(StrEnum):
    """Identifiers for the failures surfaced on results and in logs."""

    DIRECTORY_UNREADABLE = "directory_unreadable"
    TAG_READ_FAILED = "tag_read_failed"
    TAG_WRITE_FAILED = "tag_write_failed"


class TaggingError(Exception):
    """Base class for track numbering failures."""

    kind: TaggingErrorKind

    def __init__(self, path: Path, cause: BaseException | str) -> None:
        self.path: Path = path
        self.cause: str = str(cause)
        super().__init__(f"{self.describe()}: {path}: {self.cause}")

    def describe(self) -> str:
        return self.kind.value.replace("_", " ")


class DirectoryUnreadableError(TaggingError):
    """Raised when the target directory cannot be opened or listed."""

    kind = TaggingErrorKind.DIRECTORY_UNREADABLE


class TagReadError(TaggingError):
    """Raised when an existing ID3 tag cannot be read or parsed."""

    kind = TaggingErrorKind.TAG_READ_FAILED


class TagWriteError(TaggingError):
    """Raised when saving the ID3 tag back into the file fails."""

    kind = TaggingErrorKind.TAG_WRITE_FAILED


__all__ = [
    "DirectoryUnreadableError",
    "TagReadError",
    "TagWriteError",
    "TaggingError",
    "TaggingErrorKind",
]
