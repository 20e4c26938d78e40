"""Test fixtures for UltralightKit tests.

This package provides reusable pytest fixtures for testing UltralightKit components:

- sdk: Fake SDK trees, 7z archives of them, and a recording fetcher

Import fixtures in your tests using:
    from tests.fixtures.sdk import linux_sdk_archive, RecordingFetcher
"""

__all__ = [
    "sdk",
]
