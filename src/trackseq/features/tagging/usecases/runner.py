"""
Summary: Number every matching file in the target directory, one at a time.
Why: Tie scanning, ordering and tag writing together with per-file error isolation.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Protocol, runtime_checkable

from trackseq.platform.logging import logger

from ..domain.errors import DirectoryUnreadableError, TaggingError
from ..domain.models import RunConfig, RunSummary, TagResult, TaggingEvent
from ..domain.natural_order import sort_paths_naturally
from .scanner import scan_directory
from .tag_writer import write_track_number


@runtime_checkable
class TaggingObserver(Protocol):
    """Receives progress notifications while a run is in flight."""

    def run_started(self, directory: Path, total: int) -> None:
        ...

    def file_started(self, sequence: int, total: int, path: Path) -> None:
        ...

    def file_finished(self, result: TagResult) -> None:
        ...

    def run_finished(self, summary: RunSummary) -> None:
        ...


class TrackNumberingRunner:
    """Scan, sort and number the files of a single directory."""

    config: RunConfig
    observer: TaggingObserver | None

    def __init__(self, config: RunConfig, observer: TaggingObserver | None = None) -> None:
        self.config = config
        self.observer = observer

    def log_processing(
        self,
        level: int,
        event: TaggingEvent,
        message: str,
        *message_args: object,
        **context: object,
    ) -> None:
        """Emit a log record tagged with ``event`` and structured extras."""

        extra: dict[str, object] = {"processing_event": event.value}
        extra.update(context)
        logger.log(level, message, *message_args, extra=extra)

    def run(self) -> RunSummary:
        """Execute the run.

        Raises:
            DirectoryUnreadableError: If the target directory cannot be listed.
                No file is modified in that case.
        """
        directory = self.config.target_dir
        try:
            scan = scan_directory(directory, self.config.extension)
        except DirectoryUnreadableError as exc:
            self.log_processing(
                logging.ERROR,
                TaggingEvent.DIRECTORY_ERROR,
                "Cannot list %s: %s",
                directory,
                exc.cause,
                directory=str(directory),
                error_message=exc.cause,
            )
            raise

        files = sort_paths_naturally(scan.files)
        total = len(files)
        summary = RunSummary(directory=directory, entry_errors=list(scan.entry_errors))

        if total == 0:
            self.log_processing(
                logging.WARNING,
                TaggingEvent.DIRECTORY_NO_FILES,
                "No %s files found in %s",
                self.config.extension,
                directory,
                directory=str(directory),
                total_files=0,
            )
        else:
            self.log_processing(
                logging.DEBUG,
                TaggingEvent.DIRECTORY_START,
                "Numbering %d file(s) in %s",
                total,
                directory,
                directory=str(directory),
                total_files=total,
            )

        if self.observer is not None:
            self.observer.run_started(directory, total)

        for sequence, path in enumerate(files, start=1):
            if self.observer is not None:
                self.observer.file_started(sequence, total, path)
            result = self.process_file(path, sequence, total)
            summary.results.append(result)
            if self.observer is not None:
                self.observer.file_finished(result)
            self.log_file_outcome(result)

        summary.end_time = time.perf_counter()
        self.log_processing(
            logging.DEBUG,
            TaggingEvent.DIRECTORY_COMPLETE,
            "Numbering finished [processed=%d, failed=%d, path=%s]",
            summary.succeeded,
            summary.failed,
            directory,
            **summary.summary_extra(),
        )
        if self.observer is not None:
            self.observer.run_finished(summary)
        return summary

    def process_file(self, path: Path, sequence: int, total: int) -> TagResult:
        """Write ``sequence/total`` into ``path``; failures become a failed result.

        Nothing is logged here; ``log_file_outcome`` reports the result once
        the observer has closed the progress line.
        """

        result = TagResult(source_path=path, track_number=sequence, total_tracks=total)
        try:
            result.created_tag = write_track_number(path, sequence, total)
        except TaggingError as exc:
            result.error_kind = exc.kind
            result.error_message = f"{exc.describe()}: {exc.cause}"
            return result

        result.success = True
        return result

    def log_file_outcome(self, result: TagResult) -> None:
        """Emit the ``tagging.file.success`` or ``tagging.file.error`` record."""

        path = result.source_path
        context: dict[str, object] = {
            "sequence": result.track_number,
            "total_files": result.total_tracks,
            "source_path": str(path),
            "source_base_path": str(self.config.target_dir),
        }
        if not result.success:
            self.log_processing(
                logging.ERROR,
                TaggingEvent.FILE_ERROR,
                "Failed to number %s: %s",
                path.name,
                result.error_message,
                error_message=result.error_message,
                **context,
            )
            return

        self.log_processing(
            logging.DEBUG,
            TaggingEvent.FILE_SUCCESS,
            "Numbered %s as %d/%d",
            path.name,
            result.track_number,
            result.total_tracks,
            track_number=result.track_number,
            total_tracks=result.total_tracks,
            created_tag=result.created_tag,
            **context,
        )


def number_tracks(
    config: RunConfig | None = None,
    observer: TaggingObserver | None = None,
) -> RunSummary:
    """Run track numbering on ``config`` (default ``<cwd>/audio_files``)."""

    return TrackNumberingRunner(config or RunConfig.from_working_directory(), observer).run()


__all__ = ["TaggingObserver", "TrackNumberingRunner", "number_tracks"]
