"""Command line interface for setting-path."""

import sys
from typing import final

from settingpath.platform.logging import logger
from settingpath.ui.cli.args import ArgumentParser
from settingpath.ui.cli.args.options import CLIArgs, ResolveArgs
from settingpath.ui.cli.commands import ResolveCommand, SeparatorsCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ResolveArgs):
                path = ResolveCommand(args).execute()
                if path is None:
                    sys.exit(1)
                return

            SeparatorsCommand().execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
