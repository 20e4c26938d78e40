"""
HTTP transport for SDK archives.

This module fetches a remote archive into memory with:
- A single blocking HTTP/HTTPS GET (TLS verification, default redirects)
- Streaming reads with optional progress reporting
- No retries: any transport failure is fatal for the call

Archives are kept in memory because they are handed straight to the
decompressor; nothing is written to disk here.
"""

import io
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import requests
from requests.exceptions import RequestException

from ultralightkit.core.exceptions import TransportError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192


@dataclass
class DownloadProgress:
    """Progress information for a download."""

    bytes_downloaded: int
    total_bytes: int
    percentage: float
    speed_bps: float  # bytes per second
    eta_seconds: float  # estimated time remaining

    def __str__(self) -> str:
        """Format progress for display."""
        return format_progress(self)


def download_bytes(
    url: str,
    timeout: Optional[float] = None,
    progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
) -> bytes:
    """
    Download a URL fully into memory.

    Args:
        url: URL to download from
        timeout: Request timeout in seconds (None keeps the transport default)
        progress_callback: Optional callback for progress updates

    Returns:
        Complete response body

    Raises:
        TransportError: If the request fails or returns a non-success status
        ValueError: If URL is empty

    Example:
        >>> from ultralightkit.core.download import download_bytes
        >>> data = download_bytes("https://example.com/sdk.7z")
    """
    if not url:
        raise ValueError("URL cannot be empty")

    logger.info(f"Downloading from {url}")

    try:
        response = requests.get(url, stream=True, timeout=timeout)
        response.raise_for_status()
        data = _read_with_progress(response, progress_callback)
    except RequestException as e:
        raise TransportError(f"Failed to download {url}: {e}") from e

    logger.info(f"Download complete: {len(data)} bytes")
    return data


def _read_with_progress(
    response: requests.Response,
    progress_callback: Optional[Callable[[DownloadProgress], None]],
) -> bytes:
    """
    Drain a streamed response into a buffer, reporting progress.

    This is an internal function called by download_bytes().
    """
    content_length = response.headers.get("content-length")
    total_size = int(content_length) if content_length else 0

    buffer = io.BytesIO()
    downloaded = 0
    start_time = time.time()
    last_progress_time = start_time

    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
        if not chunk:
            continue
        buffer.write(chunk)
        downloaded += len(chunk)

        # Report progress (max once per 0.5 seconds to avoid spam)
        current_time = time.time()
        if progress_callback and (
            current_time - last_progress_time >= 0.5 or downloaded == total_size
        ):
            elapsed = current_time - start_time
            speed = downloaded / elapsed if elapsed > 0 else 0
            remaining = total_size - downloaded if total_size > 0 else 0
            eta = remaining / speed if speed > 0 else 0

            progress_callback(
                DownloadProgress(
                    bytes_downloaded=downloaded,
                    total_bytes=total_size if total_size > 0 else downloaded,
                    percentage=(downloaded / total_size * 100)
                    if total_size > 0
                    else 0,
                    speed_bps=speed,
                    eta_seconds=eta,
                )
            )
            last_progress_time = current_time

    return buffer.getvalue()


def format_progress(progress: DownloadProgress) -> str:
    """
    Format progress for display.

    Args:
        progress: Download progress information

    Returns:
        Formatted progress string

    Example:
        >>> progress = DownloadProgress(52428800, 104857600, 50.0, 1048576, 50)
        >>> print(format_progress(progress))
        50.0/100.0 MB (50.0%) at 1.0 MB/s ETA: 50s
    """
    mb_downloaded = progress.bytes_downloaded / 1024 / 1024
    mb_total = progress.total_bytes / 1024 / 1024
    speed_mbps = progress.speed_bps / 1024 / 1024

    if progress.total_bytes > 0:
        return (
            f"{mb_downloaded:.1f}/{mb_total:.1f} MB "
            f"({progress.percentage:.1f}%) "
            f"at {speed_mbps:.1f} MB/s "
            f"ETA: {progress.eta_seconds:.0f}s"
        )
    else:
        # Unknown total size
        return f"{mb_downloaded:.1f} MB at {speed_mbps:.1f} MB/s"


__all__ = [
    "DownloadProgress",
    "download_bytes",
    "format_progress",
]
