"""
Summary: List the target directory and keep files with the wanted extension.
Why: Separate filesystem enumeration from numbering so each can be tested alone.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from trackseq.config.settings import TARGET_EXTENSION
from trackseq.platform.logging import logger

from ..domain.errors import DirectoryUnreadableError
from ..domain.models import ScanResult, TaggingEvent


def has_extension(name: str, extension: str = TARGET_EXTENSION) -> bool:
    """Return whether ``name`` ends in ``extension``, ignoring case.

    Dotfiles such as ``.mp3`` have no suffix and never match.
    """
    return Path(name).suffix.lower() == extension.lower()


def scan_directory(directory: Path, extension: str = TARGET_EXTENSION) -> ScanResult:
    """Collect regular files directly inside ``directory`` matching ``extension``.

    Symlinks are followed when deciding whether an entry is a file. An entry
    that cannot be inspected is logged and skipped.

    Raises:
        DirectoryUnreadableError: If the directory cannot be opened or listed.
    """
    result = ScanResult()
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if not entry.is_file():
                        continue
                except OSError as exc:
                    message = f"{entry.name}: {exc}"
                    result.entry_errors.append(message)
                    logger.log(
                        logging.ERROR,
                        "Could not inspect directory entry %s: %s",
                        entry.path,
                        exc,
                        extra={
                            "processing_event": TaggingEvent.ENTRY_ERROR.value,
                            "source_path": entry.path,
                            "source_base_path": str(directory),
                            "error_message": str(exc),
                        },
                    )
                    continue

                if has_extension(entry.name, extension):
                    result.files.append(Path(entry.path))
    except OSError as exc:
        raise DirectoryUnreadableError(directory, exc) from exc

    logger.debug(
        "Scanned %s: %d matching file(s), %d entry error(s)",
        directory,
        len(result.files),
        len(result.entry_errors),
    )
    return result


__all__ = ["has_extension", "scan_directory"]
