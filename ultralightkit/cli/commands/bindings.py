"""
Bindings command implementation.

Materializes SDK headers and runs the binding generator.
"""

import logging

from ultralightkit.bindings.generator import build_bindings
from ultralightkit.cli.utils import load_config, log_progress
from ultralightkit.core.platform import Platform
from ultralightkit.sdk.fetcher import ArchiveFetcher

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the bindings command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_config(args)
    request = config.request

    platform = Platform.parse(args.platform) if args.platform else request.platform
    fetcher = ArchiveFetcher(timeout=config.timeout, progress_callback=log_progress)

    output = build_bindings(
        args.header,
        output=args.output,
        bundled_headers=args.bundled_headers,
        version=args.sdk_version or request.version,
        platform=platform,
        fetcher=fetcher,
        out_dir=args.out_dir or request.out_dir,
    )

    logger.info(f"Generated {output}")
    return 0
