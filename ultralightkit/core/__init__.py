"""
Core functionality for UltralightKit.

This package contains the foundational modules that other components depend on.
"""

from .platform import (
    Platform,
    detect_host_platform,
    resolve_platform,
    clear_platform_cache,
)

from .signals import (
    BuildSignals,
)

from .exceptions import (
    UltralightKitError,
    TransportError,
    DecompressionError,
    InsecureArchiveError,
    ConfigurationMissingError,
    FilesystemError,
    UnsupportedPlatformError,
    ConfigError,
    BindingGenerationError,
)

__all__ = [
    "Platform",
    "detect_host_platform",
    "resolve_platform",
    "clear_platform_cache",
    "BuildSignals",
    "UltralightKitError",
    "TransportError",
    "DecompressionError",
    "InsecureArchiveError",
    "ConfigurationMissingError",
    "FilesystemError",
    "UnsupportedPlatformError",
    "ConfigError",
    "BindingGenerationError",
]
