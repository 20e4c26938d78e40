"""YAML configuration parser for UltralightKit.

This module parses ultralight.yaml files into a MaterializeRequest.

Example file:

    version: "1.3.0"        # SDK version (default: latest)
    platform: linux         # windows | linux | macos (default: host)
    out_dir: build/sdk      # base output root (default: $OUT_DIR)
    timeout: 120            # HTTP timeout in seconds (default: none)
    categories:
      headers: true
      binaries:
        wanted: true
        out_dir: build/bin
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from ultralightkit.core.exceptions import ConfigError, UnsupportedPlatformError
from ultralightkit.core.platform import Platform
from ultralightkit.sdk.categories import AssetCategory
from ultralightkit.sdk.materializer import CategoryConfig, MaterializeRequest

DEFAULT_CONFIG_NAME = "ultralight.yaml"


@dataclass
class UltralightKitConfig:
    """Complete UltralightKit configuration."""

    request: MaterializeRequest = field(default_factory=MaterializeRequest)
    timeout: Optional[float] = None


def parse_config(config_path: Path) -> UltralightKitConfig:
    """
    Parse ultralight.yaml configuration file.

    Relative paths in the file are resolved against the file's directory.

    Args:
        config_path: Path to ultralight.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

    if data is None:
        return UltralightKitConfig()

    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")

    return parse_config_data(data, base_dir=config_path.parent)


def parse_config_data(
    data: dict, base_dir: Optional[Path] = None
) -> UltralightKitConfig:
    """Parse and validate configuration data."""
    version = data.get("version")
    if version is not None:
        version = str(version)

    platform = None
    if data.get("platform") is not None:
        try:
            platform = Platform.parse(str(data["platform"]))
        except UnsupportedPlatformError as e:
            raise ConfigError(str(e)) from e

    out_dir = _parse_path(data.get("out_dir"), base_dir)

    timeout = data.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            raise ConfigError(f"timeout must be a number, got: {timeout!r}")
        if timeout <= 0:
            raise ConfigError(f"timeout must be positive, got: {timeout}")
        timeout = float(timeout)

    categories = data.get("categories") or {}
    if not isinstance(categories, dict):
        raise ConfigError("categories must be a dictionary")

    known = {c.value for c in AssetCategory}
    for name in categories:
        if name not in known:
            raise ConfigError(
                f"Unknown category: {name} (expected one of {sorted(known)})"
            )

    category_configs = {
        c.value: _parse_category(c.value, categories.get(c.value), base_dir)
        for c in AssetCategory
    }

    request = MaterializeRequest(
        version=version,
        platform=platform,
        out_dir=out_dir,
        **category_configs,
    )
    return UltralightKitConfig(request=request, timeout=timeout)


def _parse_category(
    name: str, data, base_dir: Optional[Path]
) -> CategoryConfig:
    """Parse one category entry (a bool or a mapping)."""
    if data is None:
        return CategoryConfig()

    if isinstance(data, bool):
        return CategoryConfig(wanted=data)

    if not isinstance(data, dict):
        raise ConfigError(f"categories.{name} must be a boolean or a dictionary")

    wanted = data.get("wanted", True)
    if not isinstance(wanted, bool):
        raise ConfigError(f"categories.{name}.wanted must be a boolean")

    return CategoryConfig(
        wanted=wanted,
        out_dir=_parse_path(data.get("out_dir"), base_dir),
    )


def _parse_path(value, base_dir: Optional[Path]) -> Optional[Path]:
    """Parse an optional path, resolving relative paths against base_dir."""
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Expected a path string, got: {value!r}")

    path = Path(value).expanduser()
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return path
