"""
Centralized exception hierarchy for UltralightKit.

Every failure raised by the fetch-and-materialize pipeline belongs to one of
the kinds below. Nothing is retried or recovered internally; callers (the
CLI, or a build script) abort the build with the message.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class UltralightKitError(Exception):
    """Base exception for all UltralightKit errors."""

    pass


# ============================================================================
# Pipeline Exceptions
# ============================================================================


class TransportError(UltralightKitError):
    """Raised when the SDK archive could not be fetched over the network."""

    pass


class DecompressionError(UltralightKitError):
    """Raised when archive bytes are malformed or extraction fails."""

    pass


class InsecureArchiveError(DecompressionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


class ConfigurationMissingError(UltralightKitError):
    """Raised when a required environment value is not set."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Required environment variable is not set: {variable}")


class FilesystemError(UltralightKitError):
    """Raised when a directory creation, copy or read operation fails."""

    pass


class UnsupportedPlatformError(UltralightKitError):
    """Raised when a platform cannot be mapped to Windows, Linux or macOS."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name
        super().__init__(
            f"Unsupported platform: {platform_name!r} "
            "(expected one of: windows, linux, macos)"
        )


# ============================================================================
# Configuration and Binding Exceptions
# ============================================================================


class ConfigError(UltralightKitError):
    """Configuration file parsing or validation error."""

    pass


class BindingGenerationError(UltralightKitError):
    """Raised when the external binding generator fails."""

    pass
