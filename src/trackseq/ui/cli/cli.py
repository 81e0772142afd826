"""Command line interface for trackseq."""

from typing import final

from trackseq.features.tagging import DirectoryUnreadableError, RunConfig, TrackNumberingRunner
from trackseq.platform.logging import logger
from trackseq.ui.cli.args import ArgumentParser
from trackseq.ui.cli.display import ProgressDisplay

EXIT_OK = 0
EXIT_DIRECTORY_UNREADABLE = 1
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments and run one numbering pass.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code. Per-file failures still exit 0.
        """
        args = ArgumentParser.process_args(args_list)
        config = RunConfig.from_working_directory()
        progress = ProgressDisplay(quiet=args.quiet)
        runner = TrackNumberingRunner(config, observer=progress)

        try:
            _ = runner.run()
        except DirectoryUnreadableError:
            return EXIT_DIRECTORY_UNREADABLE
        except KeyboardInterrupt:
            progress.interrupted()
            logger.info("Operation cancelled by user")
            return EXIT_INTERRUPTED

        return EXIT_OK


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
