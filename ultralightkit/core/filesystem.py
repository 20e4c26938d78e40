"""
File system utilities for UltralightKit.

This module provides the file operations the materialization pipeline needs:
- In-memory 7z archive extraction (via py7zr) with path traversal checks
- Recursive directory mirroring
- Safe directory removal and creation

Failures are reported as FilesystemError or DecompressionError; partially
written trees are left on disk for the next validation pass to detect.
"""

import io
import logging
import shutil
from pathlib import Path
from typing import Callable, Optional, Union

import py7zr

from ultralightkit.core.exceptions import (
    DecompressionError,
    FilesystemError,
    InsecureArchiveError,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Path Utilities
# ============================================================================


def is_relative_to(path: Path, parent: Path) -> bool:
    """
    Check if path is relative to (under) parent directory.

    Example:
        >>> is_relative_to(Path("/home/user/project/file.txt"), Path("/home/user"))
        True
    """
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


# ============================================================================
# Archive Extraction
# ============================================================================


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Prevents directory traversal attacks (e.g., paths containing '../').

    Args:
        path: Member path from archive
        destination: Extraction destination

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not is_relative_to(member_path, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def extract_7z_bytes(
    data: bytes,
    destination: Union[str, Path],
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> None:
    """
    Extract an in-memory 7z archive to a destination directory.

    The archive's internal directory structure is preserved, so every member
    ends up at destination/<member path>.

    Args:
        data: Raw 7z archive bytes
        destination: Directory to extract to (created if missing)
        progress_callback: Optional callback(current, total) for progress

    Raises:
        DecompressionError: If the bytes are not a valid archive or extraction fails
        InsecureArchiveError: If archive contains malicious paths

    Example:
        >>> extract_7z_bytes(Path("sdk.7z").read_bytes(), "/tmp/sdk")
    """
    destination = Path(destination)

    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DecompressionError(
            f"Failed to create extraction directory {destination}: {e}"
        ) from e

    logger.info(f"Extracting archive ({len(data)} bytes) to {destination}")

    try:
        with py7zr.SevenZipFile(io.BytesIO(data), "r") as archive:
            members = archive.getnames()
            total = len(members)

            # Validate all paths first
            for member in members:
                _validate_archive_path(member, destination)

            archive.extractall(path=destination)

            if progress_callback:
                progress_callback(total, total)
    except InsecureArchiveError:
        raise
    except Exception as e:
        raise DecompressionError(f"Failed to extract 7z archive: {e}") from e

    logger.debug(f"Extracted {total} archive members")


# ============================================================================
# Directory Operations
# ============================================================================


def copy_tree(source: Union[str, Path], destination: Union[str, Path]) -> None:
    """
    Recursively mirror a directory tree into destination.

    Destination and every subdirectory are created as needed. Regular files
    are copied byte-for-byte, overwriting existing ones. Symbolic links are
    followed. The copy stops at the first I/O error and the partially copied
    tree is left in place.

    Args:
        source: Source directory
        destination: Destination directory

    Raises:
        FilesystemError: If any directory or file operation fails

    Example:
        >>> copy_tree('/tmp/sdk/include', 'build/headers')
    """
    source = Path(source)
    destination = Path(destination)

    try:
        destination.mkdir(parents=True, exist_ok=True)
        entries = sorted(source.iterdir())
    except OSError as e:
        raise FilesystemError(f"Failed to copy {source} to {destination}: {e}") from e

    for entry in entries:
        target = destination / entry.name
        if entry.is_dir():
            copy_tree(entry, target)
            continue
        try:
            shutil.copy(entry, target)
        except OSError as e:
            raise FilesystemError(f"Failed to copy {entry} to {target}: {e}") from e


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists (idempotent).

    Raises:
        FilesystemError: If the directory cannot be created
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Failed to create directory '{path}': {e}") from e
    return path


def safe_rmtree(
    path: Union[str, Path], require_prefix: Optional[Union[str, Path]] = None
) -> None:
    """
    Safely remove a directory tree with safeguards.

    Args:
        path: Directory to remove
        require_prefix: If specified, path must be under this directory

    Raises:
        ValueError: If path is not under require_prefix
        FilesystemError: If deletion fails

    Example:
        >>> safe_rmtree('/tmp/build/ultralight-download', require_prefix='/tmp/build')
    """
    path = Path(path).resolve()

    if require_prefix is not None:
        require_prefix = Path(require_prefix).resolve()
        if not is_relative_to(path, require_prefix):
            raise ValueError(
                f"Refusing to delete '{path}': not under required prefix '{require_prefix}'"
            )

    if not path.exists():
        return

    if not path.is_dir():
        raise FilesystemError(f"Path is not a directory: {path}")

    try:
        shutil.rmtree(path)
    except OSError as e:
        raise FilesystemError(f"Failed to remove directory '{path}': {e}") from e


__all__ = [
    "is_relative_to",
    "extract_7z_bytes",
    "copy_tree",
    "ensure_directory",
    "safe_rmtree",
]
