"""
Summary: Usecases for scanning, tagging and running a numbering pass.
Why: Expose one import path for the CLI and tests.
"""

from .runner import TaggingObserver, TrackNumberingRunner, number_tracks
from .scanner import has_extension, scan_directory
from .tag_writer import format_track_number, load_tag, write_track_number

__all__ = [
    "TaggingObserver",
    "TrackNumberingRunner",
    "format_track_number",
    "has_extension",
    "load_tag",
    "number_tracks",
    "scan_directory",
    "write_track_number",
]
