"""
URL command implementation.

Prints the SDK archive URL without downloading anything.
"""

from ultralightkit.cli.utils import load_config
from ultralightkit.core.platform import resolve_platform
from ultralightkit.sdk.fetcher import build_download_url


def run(args) -> int:
    """
    Run the url command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    request = load_config(args).request
    platform = resolve_platform(args.platform or request.platform)
    version = args.sdk_version or request.version

    print(build_download_url(platform, version))
    return 0
