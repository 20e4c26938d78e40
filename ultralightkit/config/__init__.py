"""Configuration file support for UltralightKit."""

from .parser import (
    DEFAULT_CONFIG_NAME,
    UltralightKitConfig,
    parse_config,
    parse_config_data,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "UltralightKitConfig",
    "parse_config",
    "parse_config_data",
]
