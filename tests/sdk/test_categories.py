"""
Unit tests for SDK asset categories.
"""

import pytest

from ultralightkit.core.platform import Platform
from ultralightkit.sdk.categories import (
    HEADER_FILES,
    LINK_LIBRARIES,
    RESOURCE_FILES,
    AssetCategory,
)


class TestAssetCategory:
    """Tests for AssetCategory."""

    @pytest.mark.parametrize(
        "category,subdir",
        [
            (AssetCategory.HEADERS, "include"),
            (AssetCategory.RESOURCES, "resources"),
            (AssetCategory.BINARIES, "bin"),
            (AssetCategory.LIBS, "lib"),
        ],
    )
    def test_archive_subdir(self, category, subdir):
        """Test each category maps to its folder in the SDK archive."""
        assert category.archive_subdir == subdir

    def test_default_subdir(self):
        """Test default output subfolders are the category names."""
        assert [c.default_subdir for c in AssetCategory] == [
            "headers",
            "resources",
            "binaries",
            "libs",
        ]

    def test_libs_only_apply_to_windows(self):
        """Test import libraries are Windows-only."""
        assert AssetCategory.LIBS.applies_to(Platform.WINDOWS)
        assert not AssetCategory.LIBS.applies_to(Platform.LINUX)
        assert not AssetCategory.LIBS.applies_to(Platform.MACOS)
        assert AssetCategory.HEADERS.applies_to(Platform.MACOS)


class TestRequiredPaths:
    """Tests for per-category required file lists."""

    def test_headers(self):
        """Test headers list the C API headers on every platform."""
        paths = AssetCategory.HEADERS.required_paths(Platform.LINUX)
        assert paths == HEADER_FILES
        assert "AppCore/CAPI.h" in paths
        assert "Ultralight/CAPI/CAPI_View.h" in paths
        assert len(set(paths)) == len(paths)

    def test_resources(self):
        """Test resources list the certificate bundle and ICU data."""
        assert AssetCategory.RESOURCES.required_paths(Platform.WINDOWS) == (
            RESOURCE_FILES
        )
        assert set(RESOURCE_FILES) == {"cacert.pem", "icudt67l.dat"}

    @pytest.mark.parametrize(
        "platform,expected",
        [
            (Platform.WINDOWS, "WebCore.dll"),
            (Platform.LINUX, "libWebCore.so"),
            (Platform.MACOS, "libWebCore.dylib"),
        ],
    )
    def test_binaries_follow_platform_naming(self, platform, expected):
        """Test binaries use the platform's shared library naming."""
        paths = AssetCategory.BINARIES.required_paths(platform)
        assert expected in paths
        assert len(paths) == 4

    def test_libs_on_windows(self):
        """Test Windows import libraries."""
        assert set(AssetCategory.LIBS.required_paths(Platform.WINDOWS)) == {
            "Ultralight.lib",
            "UltralightCore.lib",
            "AppCore.lib",
            "WebCore.lib",
        }

    def test_libs_elsewhere_empty(self):
        """Test libs require nothing where they do not apply."""
        assert AssetCategory.LIBS.required_paths(Platform.LINUX) == ()
        assert AssetCategory.LIBS.required_paths(Platform.MACOS) == ()


def test_link_libraries():
    """Test the four libraries linked into every build."""
    assert LINK_LIBRARIES == ("Ultralight", "UltralightCore", "WebCore", "AppCore")
