"""src/trackseq/ui/cli/display/result.py
What: Render the end-of-run summary for a numbering pass.
Why: Keep console output formatting out of the command processor.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.text import Text

from trackseq.features.tagging import RunSummary


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display."""
        self.console = console or Console(soft_wrap=True, highlight=False)

    def show_summary(self, summary: RunSummary, quiet: bool = False) -> None:
        """Display the outcome of a run.

        Args:
            summary: Finished run.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        if summary.total == 0:
            self.console.print(Text(f"No files to number in {summary.directory}."))
            return

        self.console.print()
        self.console.print(Text("Done.", style="bold"))
        self.console.print(Text(f"Total files: {summary.total}"))
        self.console.print(Text(f"Numbered: {summary.succeeded}", style="green"))

        if summary.entry_errors:
            self.console.print(
                Text(f"Unreadable directory entries: {len(summary.entry_errors)}", style="yellow")
            )

        if not summary.failed:
            return

        self.console.print(Text(f"Failed: {summary.failed}", style="red"))
        for result in summary.results:
            if result.success:
                continue
            self.console.print(
                Text(f"  • {result.source_path.name}: {result.error_message}", style="red")
            )
