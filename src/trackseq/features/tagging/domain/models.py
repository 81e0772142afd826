"""
Summary: Value objects passed between the scanner, tag writer and runner.
Why: Keep the runner lean by centralising type definitions.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from trackseq.config.settings import TARGET_DIR_NAME, TARGET_EXTENSION

from .errors import TaggingErrorKind


class TaggingEvent(StrEnum):
    """Structured event identifiers for tagging run logs."""

    DIRECTORY_START = "tagging.directory.start"
    DIRECTORY_COMPLETE = "tagging.directory.complete"
    DIRECTORY_ERROR = "tagging.directory.error"
    DIRECTORY_NO_FILES = "tagging.directory.no_files"
    ENTRY_ERROR = "tagging.entry.error"
    FILE_SUCCESS = "tagging.file.success"
    FILE_ERROR = "tagging.file.error"


@dataclass(slots=True, frozen=True)
class RunConfig:
    """Where to look and which files to number."""

    target_dir: Path
    extension: str = TARGET_EXTENSION

    @classmethod
    def from_working_directory(cls, cwd: Path | None = None) -> "RunConfig":
        """Build the default configuration: ``<cwd>/audio_files``."""
        base = cwd if cwd is not None else Path.cwd()
        return cls(target_dir=base / TARGET_DIR_NAME)


@dataclass(slots=True)
class ScanResult:
    """Matching files from one directory listing, in listing order."""

    files: list[Path] = field(default_factory=list)
    entry_errors: list[str] = field(default_factory=list)


@dataclass
class TagResult:
    """Outcome of numbering a single file."""

    source_path: Path
    track_number: int
    total_tracks: int
    success: bool = False
    created_tag: bool = False
    error_kind: TaggingErrorKind | None = None
    error_message: str | None = None


@dataclass
class RunSummary:
    """Everything a finished run produced."""

    directory: Path
    results: list[TagResult] = field(default_factory=list)
    entry_errors: list[str] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    def duration_seconds(self) -> float:
        """Return the elapsed run time in seconds."""

        end = self.end_time if self.end_time is not None else time.perf_counter()
        return end - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "directory": str(self.directory),
            "total_files": self.total,
            "processed": self.succeeded,
            "failed": self.failed,
            "duration_seconds": round(self.duration_seconds(), 4),
        }


__all__ = [
    "RunConfig",
    "RunSummary",
    "ScanResult",
    "TagResult",
    "TaggingEvent",
]
