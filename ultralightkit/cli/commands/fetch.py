"""
Fetch command implementation.

Materializes the requested SDK categories and prints link directives.
"""

import logging

from ultralightkit.cli.utils import build_request, load_config, log_progress
from ultralightkit.sdk.fetcher import ArchiveFetcher
from ultralightkit.sdk.materializer import AssetMaterializer

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the fetch command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    config = load_config(args)
    request = build_request(args, config)

    if not request.wanted_categories():
        logger.warning(
            "No categories selected; use --headers, --resources, --binaries, "
            "--libs or --all"
        )

    timeout = args.timeout if args.timeout is not None else config.timeout
    fetcher = ArchiveFetcher(timeout=timeout, progress_callback=log_progress)

    result = AssetMaterializer(request, fetcher=fetcher).materialize()

    if result.downloaded:
        logger.info(
            f"Fetched {result.fetch.url} "
            f"({result.fetch.size_bytes / 1024 / 1024:.1f} MB)"
        )
    for category, path in result.output_dirs.items():
        logger.info(f"  {category.value}: {path}")

    return 0
