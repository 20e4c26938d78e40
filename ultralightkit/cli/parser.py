"""
UltralightKit CLI argument parser.

This module implements the command-line interface for UltralightKit using argparse.
Build directives go to stdout; logging goes to stderr.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("ultralightkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)

PLATFORM_CHOICES = ["windows", "linux", "macos"]


def positive_float(value: str) -> float:
    """Argparse type for strictly positive numbers (timeouts)."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got: {value}")
    return number


class CLI:
    """UltralightKit command-line interface."""

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
            prog="ultralightkit",
            description="UltralightKit - fetch and materialize the Ultralight SDK",
            epilog='Use "ultralightkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"UltralightKit {__version__}"
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
            help="Path to configuration file (default: ./ultralight.yaml if present)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_fetch_command(subparsers)
        self._add_url_command(subparsers)
        self._add_bindings_command(subparsers)

        return parser

    def _add_sdk_options(self, parser: argparse.ArgumentParser):
        """Add the SDK version/platform options shared by subcommands."""
        parser.add_argument(
            "--sdk-version",
            dest="sdk_version",
            metavar="VERSION",
            help="SDK version to fetch (default: latest)",
        )
        parser.add_argument(
            "--platform",
            choices=PLATFORM_CHOICES,
            metavar="PLATFORM",
            help="Target platform (windows|linux|macos) [default: host]",
        )

    def _add_fetch_command(self, subparsers):
        """Add 'fetch' subcommand."""
        parser = subparsers.add_parser(
            "fetch",
            help="Materialize SDK categories",
            description=(
                "Download the Ultralight SDK if any wanted category is missing "
                "files, copy the categories into their output directories and "
                "print link directives"
            ),
        )
        self._add_sdk_options(parser)
        parser.add_argument(
            "--out-dir",
            type=Path,
            metavar="PATH",
            help="Base output root (default: $OUT_DIR)",
        )
        parser.add_argument(
            "--timeout",
            type=positive_float,
            metavar="SECONDS",
            help="HTTP timeout in seconds (default: none)",
        )
        parser.add_argument(
            "--all",
            action="store_true",
            help="Materialize every category",
        )
        for category in ("headers", "resources", "binaries", "libs"):
            parser.add_argument(
                f"--{category}",
                action="store_true",
                help=f"Materialize {category}",
            )
            parser.add_argument(
                f"--{category}-dir",
                type=Path,
                metavar="PATH",
                help=f"Output directory for {category} (default: OUT_DIR/{category})",
            )

    def _add_url_command(self, subparsers):
        """Add 'url' subcommand."""
        parser = subparsers.add_parser(
            "url",
            help="Print the SDK download URL",
            description="Print the SDK archive URL for a platform and version",
        )
        self._add_sdk_options(parser)

    def _add_bindings_command(self, subparsers):
        """Add 'bindings' subcommand."""
        parser = subparsers.add_parser(
            "bindings",
            help="Generate bindings from SDK headers",
            description=(
                "Materialize SDK headers (or use bundled headers for documentation "
                "builds) and run the binding generator over a wrapper header"
            ),
        )
        self._add_sdk_options(parser)
        parser.add_argument(
            "header",
            type=Path,
            help="Wrapper header including the SDK C API",
        )
        parser.add_argument(
            "--output",
            "-o",
            type=Path,
            metavar="PATH",
            help="Generated module path (default: OUT_DIR/bindings.py)",
        )
        parser.add_argument(
            "--bundled-headers",
            type=Path,
            metavar="PATH",
            help="Headers used for documentation builds (default: MANIFEST_DIR/Ultralight-API)",
        )
        parser.add_argument(
            "--out-dir",
            type=Path,
            metavar="PATH",
            help="Base output root (default: $OUT_DIR)",
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

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            stream=sys.stderr,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "fetch": "ultralightkit.cli.commands.fetch",
            "url": "ultralightkit.cli.commands.url",
            "bindings": "ultralightkit.cli.commands.bindings",
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
