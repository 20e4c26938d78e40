"""
Shared utilities for CLI commands.

Loads the optional configuration file and merges command-line overrides into
a MaterializeRequest.
"""

import dataclasses
import logging
from pathlib import Path
from typing import Optional

from ultralightkit.config.parser import (
    DEFAULT_CONFIG_NAME,
    UltralightKitConfig,
    parse_config,
)
from ultralightkit.core.platform import Platform
from ultralightkit.core.download import DownloadProgress
from ultralightkit.sdk.categories import AssetCategory
from ultralightkit.sdk.materializer import CategoryConfig, MaterializeRequest

logger = logging.getLogger(__name__)


def load_config(args, cwd: Optional[Path] = None) -> UltralightKitConfig:
    """
    Load configuration from --config, or ./ultralight.yaml if present.

    Args:
        args: Parsed arguments (uses args.config)
        cwd: Directory searched for the default file (default: current directory)

    Returns:
        Parsed configuration (defaults if no file is found)

    Raises:
        ConfigError: If the file is invalid, or --config names a missing file
    """
    config_file = getattr(args, "config", None)
    if config_file is None:
        default_config = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
        if not default_config.exists():
            logger.debug("No config file found, using defaults")
            return UltralightKitConfig()
        config_file = default_config

    logger.debug(f"Loading configuration from {config_file}")
    return parse_config(Path(config_file))


def build_request(args, config: UltralightKitConfig) -> MaterializeRequest:
    """
    Merge command-line overrides into the configured request.

    Flags only ever turn categories on; per-category directories, version,
    platform and output root replace the configured values when given.
    """
    request = config.request
    changes = {}

    if getattr(args, "sdk_version", None):
        changes["version"] = args.sdk_version
    if getattr(args, "platform", None):
        changes["platform"] = Platform.parse(args.platform)
    if getattr(args, "out_dir", None) is not None:
        changes["out_dir"] = args.out_dir

    select_all = getattr(args, "all", False)
    for category in AssetCategory:
        current = request.category(category)
        wanted = (
            current.wanted
            or select_all
            or getattr(args, category.value, False)
        )
        out_dir = getattr(args, f"{category.value}_dir", None) or current.out_dir
        changes[category.value] = CategoryConfig(wanted=wanted, out_dir=out_dir)

    return dataclasses.replace(request, **changes)


def log_progress(progress: DownloadProgress) -> None:
    """Progress callback that logs download progress."""
    logger.info(f"  {progress}")
