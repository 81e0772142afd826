"""Command line argument handling package."""

from trackseq.ui.cli.args.parser import ArgumentParser
from trackseq.ui.cli.args.options import TagArgs

__all__ = ["ArgumentParser", "TagArgs"]
