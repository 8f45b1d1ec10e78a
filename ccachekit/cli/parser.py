"""
ccachekit CLI argument parser.

This module implements the command-line interface for ccachekit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ccachekit import __version__
from ccachekit.caching.tool import SUPPORTED_VARIANTS
from ccachekit.core.workflow_log import configure_logging

logger = logging.getLogger(__name__)


class CLI:
    """ccachekit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="ccachekit",
            description="ccachekit - save ccache/sccache caches at the end of CI jobs",
            epilog='Use "ccachekit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"ccachekit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="YAML file with job state and inputs (default: read environment)",
        )
        parser.add_argument(
            "--project-root",
            type=Path,
            metavar="PATH",
            default=Path.cwd(),
            help="Workspace holding the cache directory (default: current directory)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_save_command(subparsers)
        self._add_stats_command(subparsers)

        return parser

    def _add_save_command(self, subparsers):
        """Add 'save' subcommand."""
        parser = subparsers.add_parser(
            "save",
            help="Clean, report and save the compiler cache",
            description=(
                "Run the post-job save flow: optionally evict entries unused "
                "during this job, print stats and store the cache directory"
            ),
        )
        parser.add_argument(
            "--store-dir",
            type=Path,
            metavar="PATH",
            help=(
                "Cache store directory "
                "(default: $CCACHEKIT_STORE_DIR or .ccachekit-store)"
            ),
        )
        parser.add_argument(
            "--early-exit",
            action=argparse.BooleanOptionalAction,
            default=True,
            help="Terminate the process as soon as the cache work is done",
        )

    def _add_stats_command(self, subparsers):
        """Add 'stats' subcommand."""
        parser = subparsers.add_parser(
            "stats",
            help="Show cache size and emptiness",
            description="Print cache size lines and whether the cache is empty",
        )
        parser.add_argument(
            "--variant",
            choices=list(SUPPORTED_VARIANTS),
            default="ccache",
            help="Cache tool to query (default: ccache)",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        configure_logging(verbose=parsed_args.verbose, quiet=parsed_args.quiet)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "save": "ccachekit.cli.commands.save",
            "stats": "ccachekit.cli.commands.stats",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
