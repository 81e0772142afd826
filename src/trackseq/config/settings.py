"""Where: src/trackseq/config/settings.py
What: Fixed runtime constants for the track numbering run.
Why: Keep the scan target and tag format in one place instead of scattering literals.
"""

from __future__ import annotations

from typing import Final

# Subdirectory of the working directory that holds the files to number.
TARGET_DIR_NAME: Final[str] = "audio_files"

# Compared against ``Path.suffix.lower()``.
TARGET_EXTENSION: Final[str] = ".mp3"

# ID3v2 minor version used when saving tags.
ID3_WRITE_VERSION: Final[int] = 4


__all__ = [
    "TARGET_DIR_NAME",
    "TARGET_EXTENSION",
    "ID3_WRITE_VERSION",
]
