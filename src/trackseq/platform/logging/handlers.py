"""Rich console handler for tagging run diagnostics.

Where: platform/logging/handlers.py
What: Render structured ``processing_event`` log records with icons and compact paths.
Why: Keep record formatting out of logger setup so both stay small.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TaggingRichHandler(RichHandler):
    """Rich handler that renders tagging events with dedicated styling."""

    _PROCESSING_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "tagging.directory.start": ("🚀", "cyan"),
        "tagging.directory.complete": ("✅", "green"),
        "tagging.directory.no_files": ("ℹ️", "yellow"),
        "tagging.directory.error": ("❌", "red"),
        "tagging.entry.error": ("⚠️", "red"),
        "tagging.file.success": ("🎉", "green"),
        "tagging.file.error": ("⛔", "red"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Format a path with colored separators and compact rendering.

        Args:
            path: Absolute or relative path string to format.
            base: Optional base path used to relativize ``path`` when possible.

        Returns:
            Text: Formatted path with colored separators and ellipsis truncation.
        """
        pure_path = self._to_pure_path(path)
        base_path = self._to_pure_path(base) if base else None

        display_path: PurePath = pure_path
        if base_path is not None and pure_path.is_relative_to(base_path):
            relative_path = pure_path.relative_to(base_path)
            if str(relative_path) not in {"", "."}:
                display_path = relative_path

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        anchor = display_path.anchor
        body_parts = [part for part in display_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = anchor.rstrip("\\/") + separator if anchor else ""
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)

        return self._style_path_string(display_string or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_directory_event(self, event: str, record: logging.LogRecord, body: Text) -> None:
        directory = getattr(record, "directory", None)
        if event == "tagging.directory.start":
            total_files = getattr(record, "total_files", None)
            _ = body.append("Numbering tracks")
            if isinstance(total_files, int):
                _ = body.append(f" [total={total_files}]")
        elif event == "tagging.directory.complete":
            _ = body.append("Numbering complete")
            metrics: list[str] = []
            for name in ("processed", "failed"):
                value = getattr(record, name, None)
                if isinstance(value, int):
                    metrics.append(f"{name}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
            if metrics:
                _ = body.append(" [" + ", ".join(metrics) + "]")
        elif event == "tagging.directory.no_files":
            _ = body.append("No matching files")
        else:
            _ = body.append("Directory unreadable")
            error = getattr(record, "error_message", None)
            if error:
                _ = body.append(f" ({error})")
        if directory:
            _ = body.append(" @ ")
            _ = body.append_text(self._format_path(str(directory)))

    def _render_file_event(self, event: str, record: logging.LogRecord, body: Text) -> None:
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        prefix = {
            "tagging.file.success": "Tagged ",
            "tagging.file.error": "Failed ",
            "tagging.entry.error": "Skipped entry ",
        }.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(
                self._format_path(
                    str(source_path),
                    base=getattr(record, "source_base_path", None),
                )
            )

        details: list[str] = []
        if event == "tagging.file.success":
            track_number = getattr(record, "track_number", None)
            total_tracks = getattr(record, "total_tracks", None)
            if isinstance(track_number, int) and isinstance(total_tracks, int):
                details.append(f"track {track_number}/{total_tracks}")
            if getattr(record, "created_tag", False):
                details.append("new tag")
        else:
            error_message = getattr(record, "error_message", None)
            if error_message:
                details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

    def _render_processing_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured tagging events with dedicated styling."""

        event = getattr(record, "processing_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._PROCESSING_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event.startswith("tagging.directory"):
            self._render_directory_event(event, record, body)
        else:
            self._render_file_event(event, record, body)

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for tagging events."""

        processing_text = self._render_processing_message(record)
        if processing_text is not None:
            return processing_text

        return super().render_message(record, message)


__all__ = ["TaggingRichHandler"]
