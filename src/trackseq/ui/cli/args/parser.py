"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from trackseq.config.config import Config
from trackseq.config.settings import TARGET_DIR_NAME, TARGET_EXTENSION
from trackseq.platform.logging import DEFAULT_LOG_FILE, setup_logger
from trackseq.ui.cli.args.options import TagArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="trackseq",
            description=(
                f"Number the {TARGET_EXTENSION} files in ./{TARGET_DIR_NAME} "
                "in natural filename order and write track/total into their ID3 tags."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "--log-file",
            type=Path,
            help="Write the debug log here instead of the configured location",
            metavar="LOG_FILE",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> TagArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            TagArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        log_file_path: Path = parsed_args.log_file or Config.load().log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        return TagArgs(
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            log_file=log_file_path,
        )
