"""
Pytest configuration and shared fixtures for UltralightKit tests.
"""

import pytest
import tempfile
from pathlib import Path
from typing import Generator

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.sdk import (
    linux_sdk_archive,
    windows_sdk_archive,
    out_dir,
)


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests that require network access",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is provided."""
    if not config.getoption("--integration"):
        skip_integration = pytest.mark.skip(reason="need --integration option to run")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip_integration)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (requires --integration)",
    )


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_yaml(temp_dir: Path) -> Path:
    """Create sample ultralight.yaml configuration."""
    config_content = """version: "1.3.0"
platform: linux
out_dir: build
timeout: 60
categories:
  headers: true
  resources:
    wanted: true
    out_dir: assets/resources
  binaries: false
"""
    config_file = temp_dir / "ultralight.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture(autouse=True)
def reset_caches():
    """Reset any module-level caches between tests."""
    from ultralightkit.core import platform

    platform.clear_platform_cache()
    yield
    platform.clear_platform_cache()
