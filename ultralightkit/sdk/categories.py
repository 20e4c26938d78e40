"""
Asset categories of the Ultralight SDK package.

The SDK archive is laid out as include/, resources/, bin/ and lib/. Each
category maps one of those folders to an output directory and names the files
that must be present for the category to count as materialized.
"""

import enum
from typing import Tuple

from ultralightkit.core.platform import Platform

# Libraries emitted as link directives on every build.
LINK_LIBRARIES = ("Ultralight", "UltralightCore", "WebCore", "AppCore")

# Shared libraries shipped in bin/ (and import libraries in lib/ on Windows).
SDK_LIBRARIES = ("Ultralight", "UltralightCore", "AppCore", "WebCore")

HEADER_FILES = (
    "AppCore/CAPI.h",
    "Ultralight/CAPI.h",
    "Ultralight/CAPI/CAPI_Defines.h",
    "Ultralight/CAPI/CAPI_Bitmap.h",
    "Ultralight/CAPI/CAPI_Buffer.h",
    "Ultralight/CAPI/CAPI_Clipboard.h",
    "Ultralight/CAPI/CAPI_Config.h",
    "Ultralight/CAPI/CAPI_FileSystem.h",
    "Ultralight/CAPI/CAPI_FontFile.h",
    "Ultralight/CAPI/CAPI_FontLoader.h",
    "Ultralight/CAPI/CAPI_Geometry.h",
    "Ultralight/CAPI/CAPI_GPUDriver.h",
    "Ultralight/CAPI/CAPI_KeyEvent.h",
    "Ultralight/CAPI/CAPI_Logger.h",
    "Ultralight/CAPI/CAPI_MouseEvent.h",
    "Ultralight/CAPI/CAPI_Platform.h",
    "Ultralight/CAPI/CAPI_Renderer.h",
    "Ultralight/CAPI/CAPI_ScrollEvent.h",
    "Ultralight/CAPI/CAPI_GamepadEvent.h",
    "Ultralight/CAPI/CAPI_Session.h",
    "Ultralight/CAPI/CAPI_String.h",
    "Ultralight/CAPI/CAPI_Surface.h",
    "Ultralight/CAPI/CAPI_View.h",
)

RESOURCE_FILES = ("cacert.pem", "icudt67l.dat")


class AssetCategory(enum.Enum):
    """A subset of the SDK a project can opt into independently."""

    HEADERS = "headers"
    RESOURCES = "resources"
    BINARIES = "binaries"
    LIBS = "libs"

    @property
    def default_subdir(self) -> str:
        """Subfolder of the base output root used when no override is given."""
        return self.value

    @property
    def archive_subdir(self) -> str:
        """Folder inside the extracted SDK archive holding this category."""
        return _ARCHIVE_SUBDIRS[self]

    def applies_to(self, platform: Platform) -> bool:
        """
        Whether this category exists in the SDK package for a platform.

        Import libraries only ship in the Windows package.
        """
        if self is AssetCategory.LIBS:
            return platform.has_import_libraries
        return True

    def required_paths(self, platform: Platform) -> Tuple[str, ...]:
        """
        Relative paths that must exist for the category to be materialized.

        Returns an empty tuple where the category does not apply, so such a
        category is always considered materialized.
        """
        if self is AssetCategory.HEADERS:
            return HEADER_FILES
        if self is AssetCategory.RESOURCES:
            return RESOURCE_FILES
        if self is AssetCategory.BINARIES:
            return tuple(platform.shared_library_name(lib) for lib in SDK_LIBRARIES)
        if not self.applies_to(platform):
            return ()
        return tuple(platform.import_library_name(lib) for lib in SDK_LIBRARIES)


_ARCHIVE_SUBDIRS = {
    AssetCategory.HEADERS: "include",
    AssetCategory.RESOURCES: "resources",
    AssetCategory.BINARIES: "bin",
    AssetCategory.LIBS: "lib",
}
