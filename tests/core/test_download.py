"""
Unit tests for download module.

Tests download functionality with mocked network requests.
"""

import pytest
import requests
import responses

from ultralightkit.core.download import (
    download_bytes,
    format_progress,
    DownloadProgress,
)
from ultralightkit.core.exceptions import TransportError

URL = "https://example.com/sdk.7z"


class TestDownloadProgress:
    """Test DownloadProgress dataclass."""

    def test_progress_to_string(self):
        """Test progress string representation."""
        progress = DownloadProgress(
            bytes_downloaded=52428800,  # 50 MB
            total_bytes=104857600,  # 100 MB
            percentage=50.0,
            speed_bps=1048576,  # 1 MB/s
            eta_seconds=50,
        )

        result = str(progress)

        assert "50.0/100.0 MB" in result
        assert "50.0%" in result
        assert "1.0 MB/s" in result
        assert "ETA: 50s" in result


class TestFormatProgress:
    """Test format_progress function."""

    def test_format_with_unknown_size(self):
        """Test formatting progress with unknown total size."""
        progress = DownloadProgress(
            bytes_downloaded=10485760,  # 10 MB
            total_bytes=0,
            percentage=0.0,
            speed_bps=1048576,
            eta_seconds=0,
        )

        result = format_progress(progress)

        assert result == "10.0 MB at 1.0 MB/s"


class TestDownloadBytes:
    """Test download_bytes function."""

    @responses.activate
    def test_successful_download(self):
        """Test downloading returns the full body."""
        content = b"7z archive bytes" * 1000
        responses.add(responses.GET, URL, body=content, status=200)

        result = download_bytes(URL)

        assert result == content
        assert len(responses.calls) == 1

    @responses.activate
    def test_http_error_is_transport_error(self):
        """Test non-success status raises TransportError."""
        responses.add(responses.GET, URL, status=404)

        with pytest.raises(TransportError, match="404"):
            download_bytes(URL)

    @responses.activate
    def test_no_retry_on_failure(self):
        """Test a failed request is not retried."""
        responses.add(responses.GET, URL, status=500)

        with pytest.raises(TransportError):
            download_bytes(URL)

        assert len(responses.calls) == 1

    @responses.activate
    def test_connection_error_is_transport_error(self):
        """Test connection failures raise TransportError with the cause."""
        responses.add(
            responses.GET, URL, body=requests.exceptions.ConnectionError("refused")
        )

        with pytest.raises(TransportError) as exc_info:
            download_bytes(URL)

        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)

    @responses.activate
    def test_progress_callback(self):
        """Test progress callback receives final progress."""
        content = b"x" * 20000
        responses.add(
            responses.GET,
            URL,
            body=content,
            status=200,
            headers={"content-length": str(len(content))},
        )
        updates = []

        download_bytes(URL, progress_callback=updates.append)

        assert updates
        assert updates[-1].bytes_downloaded == len(content)
        assert updates[-1].percentage == pytest.approx(100.0)

    def test_empty_url(self):
        """Test empty URL raises ValueError."""
        with pytest.raises(ValueError, match="URL cannot be empty"):
            download_bytes("")
