"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from settingpath.config.config import Config
from settingpath.config.paths import locate_snapshot
from settingpath.config.settings import PATH_SEPARATOR_STYLE
from settingpath.platform.logging import DEFAULT_LOG_FILE, console_level_for, logger, setup_logger
from settingpath.shared.geometry import Point
from settingpath.shared.separators import PathSeparator
from settingpath.ui.cli.args.options import CLIArgs, ResolveArgs, SeparatorsArgs


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
            description="setting-path - Copy the breadcrumb path of an IDE setting.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        resolve_parser = subparsers.add_parser(
            "resolve",
            help="Resolve the path of a component recorded in a UI snapshot",
        )
        _ = resolve_parser.add_argument(
            "snapshot",
            type=str,
            help="JSON snapshot of the UI tree",
            metavar="SNAPSHOT",
        )
        _ = resolve_parser.add_argument(
            "--target",
            type=str,
            required=True,
            help="Id of the component the user interacted with",
            metavar="ID",
        )
        _ = resolve_parser.add_argument(
            "--at",
            type=int,
            nargs=2,
            help="Pointer location in screen coordinates",
            metavar=("X", "Y"),
        )
        _ = resolve_parser.add_argument(
            "--separator",
            type=str,
            default=PATH_SEPARATOR_STYLE.value,
            metavar="STYLE",
            help="Separator style (pipe, arrow, unicode_arrow, guillemet, triangle)",
        )
        _ = resolve_parser.add_argument(
            "--no-copy",
            action="store_true",
            help="Print the path without touching the clipboard",
        )
        _ = resolve_parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed resolution information",
        )
        _ = resolve_parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        _ = subparsers.add_parser(
            "separators",
            help="List the available separator styles",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the snapshot does not exist or other validation fails.
            ValueError: If the separator style is unknown.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        log_level = console_level_for(
            quiet=bool(getattr(parsed_args, "quiet", False)),
            verbose=bool(getattr(parsed_args, "verbose", False)),
        )

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "resolve":
            return ArgumentParser._process_resolve(parsed_args)

        if command == "separators":
            return SeparatorsArgs(command="separators")

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_resolve(parsed_args: argparse.Namespace) -> ResolveArgs:
        snapshot_path = locate_snapshot(Path(parsed_args.snapshot))
        if not snapshot_path.is_file():
            logger.error("Snapshot file does not exist: %s", snapshot_path)
            sys.exit(1)

        point = Point(*parsed_args.at) if parsed_args.at else None
        separator = PathSeparator.from_user_input(parsed_args.separator)

        return ResolveArgs(
            command="resolve",
            snapshot_path=snapshot_path.resolve(),
            target_id=parsed_args.target,
            point=point,
            separator=separator,
            copy=not parsed_args.no_copy,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
