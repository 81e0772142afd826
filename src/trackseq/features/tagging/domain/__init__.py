"""
Summary: Domain types for track numbering.
Why: Give usecases and the CLI one import path for errors, models and ordering.
"""

from .errors import (
    DirectoryUnreadableError,
    TagReadError,
    TagWriteError,
    TaggingError,
    TaggingErrorKind,
)
from .models import RunConfig, RunSummary, ScanResult, TagResult, TaggingEvent
from .natural_order import natural_compare, natural_sort, natural_sort_key, sort_paths_naturally

__all__ = [
    "DirectoryUnreadableError",
    "RunConfig",
    "RunSummary",
    "ScanResult",
    "TagReadError",
    "TagResult",
    "TagWriteError",
    "TaggingError",
    "TaggingErrorKind",
    "TaggingEvent",
    "natural_compare",
    "natural_sort",
    "natural_sort_key",
    "sort_paths_naturally",
]
