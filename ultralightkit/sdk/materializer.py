"""
SDK asset materialization.

This module orchestrates getting the wanted parts of the Ultralight SDK into
their output directories, coordinating the directory validator, the archive
fetcher and the directory copier:

1. Resolve platform, version and the base output root
2. Resolve each wanted category's output directory
3. Check every wanted category for its required files
4. If any category is stale, fetch the archive once and copy every wanted
   category out of it
5. Emit the library search path and link directives

Freshness is checked per category, but a refresh always covers all wanted
categories.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from ultralightkit.core.exceptions import ConfigurationMissingError
from ultralightkit.core.filesystem import copy_tree, ensure_directory, safe_rmtree
from ultralightkit.core.platform import Platform, resolve_platform
from ultralightkit.core.signals import BuildSignals
from ultralightkit.sdk.categories import LINK_LIBRARIES, AssetCategory
from ultralightkit.sdk.fetcher import (
    LATEST_VERSION,
    ArchiveFetcher,
    FetchResult,
)
from ultralightkit.sdk.validate import is_materialized

logger = logging.getLogger(__name__)

OUT_DIR_ENV = "OUT_DIR"
DOWNLOAD_DIR_NAME = "ultralight-download"


@dataclass(frozen=True)
class CategoryConfig:
    """Whether a category is wanted and where it should land."""

    wanted: bool = False
    out_dir: Optional[Path] = None


@dataclass(frozen=True)
class MaterializeRequest:
    """
    What to materialize for one build invocation.

    Attributes:
        version: SDK version, or None for the latest release
        platform: Target platform, or None to infer from the host
        out_dir: Base output root, or None to read OUT_DIR from the environment
        headers: Headers category configuration
        resources: Resources category configuration
        binaries: Binaries category configuration
        libs: Import library category configuration (Windows only)
    """

    version: Optional[str] = None
    platform: Optional[Platform] = None
    out_dir: Optional[Path] = None
    headers: CategoryConfig = field(default_factory=CategoryConfig)
    resources: CategoryConfig = field(default_factory=CategoryConfig)
    binaries: CategoryConfig = field(default_factory=CategoryConfig)
    libs: CategoryConfig = field(default_factory=CategoryConfig)

    def category(self, category: AssetCategory) -> CategoryConfig:
        """Get the configuration of one category."""
        return getattr(self, category.value)

    def wanted_categories(self) -> List[AssetCategory]:
        """Wanted categories, in canonical order."""
        return [c for c in AssetCategory if self.category(c).wanted]


@dataclass
class MaterializeResult:
    """Result of a materialization run."""

    platform: Platform
    """Resolved platform"""

    version: str
    """Resolved version ('latest' when none was given)"""

    out_dir: Path
    """Base output root"""

    output_dirs: Dict[AssetCategory, Path]
    """Resolved output directory of every wanted category"""

    stale: List[AssetCategory]
    """Wanted categories that were missing files"""

    fetch: Optional[FetchResult] = None
    """Fetch details, or None when no download was needed"""

    @property
    def downloaded(self) -> bool:
        """Whether the archive was fetched during this run."""
        return self.fetch is not None


class AssetMaterializer:
    """
    Materializes wanted SDK categories into their output directories.

    Example:
        >>> request = MaterializeRequest(
        ...     platform=Platform.LINUX,
        ...     headers=CategoryConfig(wanted=True),
        ... )
        >>> result = AssetMaterializer(request).materialize()
        >>> print(result.output_dirs[AssetCategory.HEADERS])
    """

    def __init__(
        self,
        request: MaterializeRequest,
        fetcher: Optional[ArchiveFetcher] = None,
        signals: Optional[BuildSignals] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize materializer.

        Args:
            request: What to materialize
            fetcher: Archive fetcher (default: a new ArchiveFetcher)
            signals: Directive emitter (default: stdout)
            environ: Environment to read OUT_DIR from (default: os.environ)
        """
        self.request = request
        self.fetcher = fetcher or ArchiveFetcher()
        self.signals = signals or BuildSignals()
        self.environ = os.environ if environ is None else environ

    def materialize(self) -> MaterializeResult:
        """
        Bring every wanted category up to date and emit link directives.

        Returns:
            MaterializeResult describing what was resolved and fetched

        Raises:
            UnsupportedPlatformError: If no platform is given and the host is unsupported
            ConfigurationMissingError: If no output root is given and OUT_DIR is unset
            TransportError: If the archive download fails
            DecompressionError: If the archive cannot be extracted
            FilesystemError: If preparing or copying directories fails
        """
        platform = resolve_platform(self.request.platform)
        version = self.request.version or LATEST_VERSION
        out_dir = self._resolve_out_dir()

        wanted = self.request.wanted_categories()
        output_dirs = {c: self._resolve_category_dir(c, out_dir) for c in wanted}

        logger.info(
            f"Materializing Ultralight SDK {version} for {platform}: "
            f"{', '.join(c.value for c in wanted) or 'no categories'}"
        )

        stale = [
            c
            for c in wanted
            if not is_materialized(
                output_dirs[c], c.required_paths(platform), self.signals
            )
        ]

        fetch_result = None
        if stale:
            logger.info(f"Stale categories: {', '.join(c.value for c in stale)}")
            fetch_result = self._refresh(platform, version, out_dir, output_dirs)
        else:
            logger.info("All wanted categories are up to date, skipping download")

        self._emit_link_directives(out_dir)

        return MaterializeResult(
            platform=platform,
            version=version,
            out_dir=out_dir,
            output_dirs=output_dirs,
            stale=stale,
            fetch=fetch_result,
        )

    def _resolve_out_dir(self) -> Path:
        """Get the base output root from the request or the environment."""
        if self.request.out_dir is not None:
            return Path(self.request.out_dir)

        value = self.environ.get(OUT_DIR_ENV)
        if not value:
            raise ConfigurationMissingError(OUT_DIR_ENV)
        return Path(value)

    def _resolve_category_dir(self, category: AssetCategory, out_dir: Path) -> Path:
        """Get a category's output directory (override or default subfolder)."""
        override = self.request.category(category).out_dir
        if override is not None:
            return Path(override)
        return out_dir / category.default_subdir

    def _refresh(
        self,
        platform: Platform,
        version: str,
        out_dir: Path,
        output_dirs: Dict[AssetCategory, Path],
    ) -> FetchResult:
        """
        Fetch the archive once and copy every wanted category out of it.

        Args:
            platform: Resolved platform
            version: Resolved version
            out_dir: Base output root holding the extraction root
            output_dirs: Output directory per wanted category

        Returns:
            FetchResult of the single download
        """
        extract_root = out_dir / DOWNLOAD_DIR_NAME
        safe_rmtree(extract_root, require_prefix=out_dir)
        ensure_directory(extract_root)

        fetch_result = self.fetcher.fetch(platform, version, extract_root)

        for category, destination in output_dirs.items():
            if not category.applies_to(platform):
                logger.debug(f"Skipping {category.value}: not shipped for {platform}")
                continue

            source = extract_root / category.archive_subdir
            logger.info(f"Copying {category.value} to {destination}")
            copy_tree(source, destination)

        return fetch_result

    def _emit_link_directives(self, out_dir: Path) -> None:
        """Emit search path and link library directives."""
        self.signals.link_search(out_dir)
        for library in LINK_LIBRARIES:
            self.signals.link_lib(library)


def materialize(
    request: MaterializeRequest,
    fetcher: Optional[ArchiveFetcher] = None,
    signals: Optional[BuildSignals] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> MaterializeResult:
    """
    Convenience function to materialize SDK assets.

    Args:
        request: What to materialize
        fetcher: Archive fetcher (default: a new ArchiveFetcher)
        signals: Directive emitter (default: stdout)
        environ: Environment to read OUT_DIR from (default: os.environ)

    Returns:
        MaterializeResult

    Example:
        >>> from ultralightkit.sdk import materialize, MaterializeRequest, CategoryConfig
        >>> materialize(MaterializeRequest(headers=CategoryConfig(wanted=True)))
    """
    materializer = AssetMaterializer(
        request, fetcher=fetcher, signals=signals, environ=environ
    )
    return materializer.materialize()
