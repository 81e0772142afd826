"""
Summary: Sequential track numbering for a directory of MP3 files.
Why: Present the feature's public surface without reaching into submodules.
"""

from .domain import (
    DirectoryUnreadableError,
    RunConfig,
    RunSummary,
    TagReadError,
    TagResult,
    TagWriteError,
    TaggingError,
    TaggingErrorKind,
    TaggingEvent,
)
from .usecases import TaggingObserver, TrackNumberingRunner, number_tracks

__all__ = [
    "DirectoryUnreadableError",
    "RunConfig",
    "RunSummary",
    "TagReadError",
    "TagResult",
    "TagWriteError",
    "TaggingError",
    "TaggingErrorKind",
    "TaggingEvent",
    "TaggingObserver",
    "TrackNumberingRunner",
    "number_tracks",
]
