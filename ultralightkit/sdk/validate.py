"""Checks whether a directory already holds a set of expected files."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ultralightkit.core.signals import BuildSignals

logger = logging.getLogger(__name__)


def is_materialized(
    directory: Union[str, Path],
    required_relative_paths: Iterable[str],
    signals: Optional[BuildSignals] = None,
) -> bool:
    """
    Check that every required path exists under directory.

    Each checked path is registered with the build orchestrator as a rerun
    dependency. Checking stops at the first missing path, which is reported
    as a build warning. A missing directory behaves like a missing file.

    Args:
        directory: Directory to check
        required_relative_paths: Paths relative to directory
        signals: Directive emitter (default: a stdout emitter)

    Returns:
        True if all paths exist, False on the first missing one
    """
    directory = Path(directory)
    signals = signals or BuildSignals()

    for relative in required_relative_paths:
        path = directory / relative
        signals.rerun_if_changed(path)
        if not path.exists():
            logger.warning(f"{path} does not exist, will redownload")
            signals.warning(f"{path} does not exist, will redownload")
            return False

    return True
