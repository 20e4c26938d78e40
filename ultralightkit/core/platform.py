"""
Platform resolution for UltralightKit.

The Ultralight SDK is published for three desktop platforms only. This module
maps the host (or an explicit override) onto that closed set and carries the
per-platform naming conventions used to build download URLs and to know which
binary files a materialized SDK must contain.

Usage:
    from ultralightkit.core.platform import Platform, resolve_platform

    platform = resolve_platform()           # host platform
    platform = resolve_platform("mac")      # explicit override
    print(platform.url_token)               # 'mac'
"""

import enum
import functools
import platform as _platform
from typing import Optional, Union

from ultralightkit.core.exceptions import UnsupportedPlatformError


class Platform(enum.Enum):
    """Platforms the Ultralight SDK is distributed for."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"

    @property
    def url_token(self) -> str:
        """
        Platform segment used in SDK archive names.

        Example:
            >>> Platform.MACOS.url_token
            'mac'
        """
        return _URL_TOKENS[self]

    def shared_library_name(self, name: str) -> str:
        """
        Get the shared library filename for a library on this platform.

        Example:
            >>> Platform.LINUX.shared_library_name("Ultralight")
            'libUltralight.so'
        """
        if self is Platform.WINDOWS:
            return f"{name}.dll"
        if self is Platform.LINUX:
            return f"lib{name}.so"
        return f"lib{name}.dylib"

    def import_library_name(self, name: str) -> Optional[str]:
        """
        Get the import library filename, or None where none exists.

        Import libraries only ship with the Windows SDK package.
        """
        if self is Platform.WINDOWS:
            return f"{name}.lib"
        return None

    @property
    def has_import_libraries(self) -> bool:
        """Whether the SDK package for this platform carries import libraries."""
        return self is Platform.WINDOWS

    @classmethod
    def parse(cls, text: str) -> "Platform":
        """
        Parse a platform name or alias.

        Args:
            text: Name such as 'windows', 'win', 'linux', 'macos', 'mac', 'darwin'

        Returns:
            Matching Platform

        Raises:
            UnsupportedPlatformError: If the name matches no platform
        """
        key = text.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise UnsupportedPlatformError(text) from None

    def __str__(self) -> str:
        return self.value


_URL_TOKENS = {
    Platform.WINDOWS: "win",
    Platform.LINUX: "linux",
    Platform.MACOS: "mac",
}

_ALIASES = {
    "windows": Platform.WINDOWS,
    "win": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "linux": Platform.LINUX,
    "macos": Platform.MACOS,
    "mac": Platform.MACOS,
    "darwin": Platform.MACOS,
    "osx": Platform.MACOS,
}


@functools.lru_cache(maxsize=1)
def detect_host_platform() -> Platform:
    """
    Detect the platform of the running host.

    This function is cached - it only runs detection once per process.

    Returns:
        Detected Platform

    Raises:
        UnsupportedPlatformError: If the host OS is not Windows, Linux or macOS
    """
    system = _platform.system().lower()

    if system == "windows":
        return Platform.WINDOWS
    elif system == "linux":
        return Platform.LINUX
    elif system == "darwin":
        return Platform.MACOS
    else:
        raise UnsupportedPlatformError(system or "unknown")


def resolve_platform(explicit: Optional[Union[Platform, str]] = None) -> Platform:
    """
    Resolve the platform to fetch for.

    An explicit value always wins; otherwise the host platform is inferred.

    Args:
        explicit: Platform or platform name, or None to infer from the host

    Returns:
        Resolved Platform

    Raises:
        UnsupportedPlatformError: If the value (or the host) is not supported
    """
    if explicit is None:
        return detect_host_platform()
    if isinstance(explicit, Platform):
        return explicit
    return Platform.parse(explicit)


def clear_platform_cache():
    """
    Clear the host platform detection cache.

    Useful for testing when platform.system() is patched.
    """
    detect_host_platform.cache_clear()


__all__ = [
    "Platform",
    "detect_host_platform",
    "resolve_platform",
    "clear_platform_cache",
]
