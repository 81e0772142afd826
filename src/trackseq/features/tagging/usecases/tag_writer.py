"""
Summary: Read, update and save the track number in one file's ID3 tag.
Why: Isolate the mutagen calls behind one function with typed failures.
"""

from __future__ import annotations

from pathlib import Path

from mutagen._util import MutagenError
from mutagen.easyid3 import EasyID3
from mutagen.id3 import ID3NoHeaderError

from trackseq.config.settings import ID3_WRITE_VERSION
from trackseq.platform.logging import logger

from ..domain.errors import TagReadError, TagWriteError

TRACK_NUMBER_KEY = "tracknumber"


def format_track_number(track: int, total: int) -> str:
    """Render the ID3 ``TRCK`` value, e.g. ``"3/12"``."""
    return f"{track}/{total}"


def load_tag(path: Path) -> tuple[EasyID3, bool]:
    """Load the ID3 tag of ``path`` or start an empty one.

    Returns:
        The tag and whether it was newly created because the file had none.

    Raises:
        TagReadError: If the file cannot be read or its tag cannot be parsed.
    """
    try:
        return EasyID3(path), False
    except ID3NoHeaderError:
        logger.debug("No ID3 tag in %s; starting an empty one", path)
        return EasyID3(), True
    except (MutagenError, OSError) as exc:
        raise TagReadError(path, exc) from exc


def write_track_number(path: Path, track: int, total: int) -> bool:
    """Set ``track/total`` on ``path`` and save the tag as ID3v2.4.

    Every other frame already in the tag is kept as is.

    Returns:
        True when the file had no ID3 tag and one was created.

    Raises:
        ValueError: If ``track`` is not within ``1..total``.
        TagReadError: If the existing tag cannot be loaded.
        TagWriteError: If saving the tag fails.
    """
    if track < 1 or total < track:
        raise ValueError(f"Track {track} is outside 1..{total}")

    tag, created = load_tag(path)
    tag[TRACK_NUMBER_KEY] = format_track_number(track, total)

    try:
        tag.save(path, v2_version=ID3_WRITE_VERSION)
    except (MutagenError, OSError) as exc:
        raise TagWriteError(path, exc) from exc

    return created


__all__ = ["TRACK_NUMBER_KEY", "format_track_number", "load_tag", "write_track_number"]
