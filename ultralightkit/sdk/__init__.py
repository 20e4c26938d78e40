"""
Ultralight SDK acquisition.

Provides the directory validator, the archive fetcher and the asset
materializer that ties them together.
"""

from .categories import (
    AssetCategory,
    LINK_LIBRARIES,
)

from .validate import (
    is_materialized,
)

from .fetcher import (
    ArchiveFetcher,
    DownloadDescriptor,
    FetchResult,
    build_download_url,
    LATEST_VERSION,
    SDK_HOST,
)

from .materializer import (
    AssetMaterializer,
    CategoryConfig,
    MaterializeRequest,
    MaterializeResult,
    materialize,
)

__all__ = [
    "AssetCategory",
    "LINK_LIBRARIES",
    "is_materialized",
    "ArchiveFetcher",
    "DownloadDescriptor",
    "FetchResult",
    "build_download_url",
    "LATEST_VERSION",
    "SDK_HOST",
    "AssetMaterializer",
    "CategoryConfig",
    "MaterializeRequest",
    "MaterializeResult",
    "materialize",
]
