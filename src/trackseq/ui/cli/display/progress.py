"""Progress display functionality for CLI."""

from pathlib import Path
from typing import final

from rich.console import Console
from rich.text import Text

from trackseq.features.tagging import RunSummary, TagResult
from trackseq.ui.cli.display.result import ResultDisplay


@final
class ProgressDisplay:
    """Prints one ``[i/N] "name" ... OK`` line per file to stdout."""

    console: Console
    quiet: bool
    _line_open: bool

    def __init__(self, console: Console | None = None, quiet: bool = False) -> None:
        """Initialize progress display.

        Args:
            console: Console to print to. Defaults to stdout.
            quiet: Whether to suppress progress and summary output.
        """
        self.console = console or Console(soft_wrap=True, highlight=False)
        self.quiet = quiet
        self._line_open = False

    def run_started(self, directory: Path, total: int) -> None:
        """Announce how many files are about to be numbered."""
        if self.quiet or total == 0:
            return
        self.console.print(Text(f"Writing track numbers to {total} file(s) in {directory}..."))

    def file_started(self, sequence: int, total: int, path: Path) -> None:
        """Open the progress line for one file; ``file_finished`` closes it."""
        if self.quiet:
            return
        self.console.print(Text(f'[{sequence}/{total}] "{path.name}" ... '), end="")
        self._line_open = True

    def file_finished(self, result: TagResult) -> None:
        """Close the progress line with ``OK`` or ``FAILED``."""
        if self.quiet:
            return
        if result.success:
            self.console.print(Text("OK", style="green"))
        else:
            self.console.print(Text("FAILED", style="bold red"))
        self._line_open = False

    def run_finished(self, summary: RunSummary) -> None:
        """Render the end-of-run summary on the same console."""
        ResultDisplay(self.console).show_summary(summary, quiet=self.quiet)

    def interrupted(self) -> None:
        """Terminate a progress line left open by Ctrl-C."""
        if not self._line_open:
            return
        self.console.print(Text("INTERRUPTED", style="yellow"))
        self._line_open = False
