"""
SDK archive fetching.

Builds the CDN URL for a platform/version pair, downloads the 7z archive into
memory and extracts it. The extracted tree keeps the SDK's own layout
(include/, resources/, bin/, lib/).
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from ultralightkit.core.download import DownloadProgress, download_bytes
from ultralightkit.core.filesystem import extract_7z_bytes
from ultralightkit.core.platform import Platform

logger = logging.getLogger(__name__)

SDK_HOST = "https://ultralight-sdk.sfo2.cdn.digitaloceanspaces.com"
LATEST_VERSION = "latest"


def build_download_url(platform: Platform, version: Optional[str] = None) -> str:
    """
    Build the SDK archive URL.

    Args:
        platform: Target platform
        version: SDK version, or None for the latest release

    Returns:
        Archive URL

    Example:
        >>> build_download_url(Platform.LINUX)
        'https://ultralight-sdk.sfo2.cdn.digitaloceanspaces.com/ultralight-sdk-latest-linux-x64.7z'
    """
    return (
        f"{SDK_HOST}/ultralight-sdk-{version or LATEST_VERSION}"
        f"-{platform.url_token}-x64.7z"
    )


@dataclass(frozen=True)
class DownloadDescriptor:
    """Where an archive comes from and where it is extracted to."""

    url: str
    destination: Path

    @classmethod
    def create(
        cls,
        platform: Platform,
        version: Optional[str],
        destination: Union[str, Path],
    ) -> "DownloadDescriptor":
        return cls(build_download_url(platform, version), Path(destination))


@dataclass
class FetchResult:
    """Result of a single fetch."""

    url: str
    destination: Path
    size_bytes: int
    download_time: float
    extraction_time: float


class ArchiveFetcher:
    """
    Downloads and extracts an SDK archive.

    Every call performs a full network fetch; nothing is cached here.

    Example:
        >>> fetcher = ArchiveFetcher()
        >>> fetcher.fetch(Platform.LINUX, None, Path("build/ultralight-download"))
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        progress_callback: Optional[Callable[[DownloadProgress], None]] = None,
    ):
        """
        Initialize fetcher.

        Args:
            timeout: HTTP timeout in seconds (None keeps the transport default)
            progress_callback: Optional callback for download progress
        """
        self.timeout = timeout
        self.progress_callback = progress_callback

    def fetch(
        self,
        platform: Platform,
        version: Optional[str],
        destination: Union[str, Path],
    ) -> FetchResult:
        """
        Download the SDK archive and extract it into destination.

        Args:
            platform: Target platform
            version: SDK version, or None for the latest release
            destination: Extraction directory

        Returns:
            FetchResult with timing and size information

        Raises:
            TransportError: If the download fails
            DecompressionError: If the archive cannot be extracted
        """
        descriptor = DownloadDescriptor.create(platform, version, destination)

        download_start = time.time()
        data = download_bytes(
            descriptor.url,
            timeout=self.timeout,
            progress_callback=self.progress_callback,
        )
        download_time = time.time() - download_start
        logger.info(f"Download complete in {download_time:.2f}s")

        extraction_start = time.time()
        extract_7z_bytes(data, descriptor.destination)
        extraction_time = time.time() - extraction_start
        logger.info(f"Extraction complete in {extraction_time:.2f}s")

        return FetchResult(
            url=descriptor.url,
            destination=descriptor.destination,
            size_bytes=len(data),
            download_time=download_time,
            extraction_time=extraction_time,
        )
