"""Display management for CLI interface."""

from trackseq.ui.cli.display.progress import ProgressDisplay
from trackseq.ui.cli.display.result import ResultDisplay

__all__ = ["ProgressDisplay", "ResultDisplay"]
