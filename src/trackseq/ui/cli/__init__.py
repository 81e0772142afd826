"""Command line interface package."""

from trackseq.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
