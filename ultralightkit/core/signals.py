"""
Build-system directives.

The invoking build orchestrator reads line-oriented directives from the build
helper's standard output. Four kinds are emitted:

    cargo:rerun-if-changed=<path>
    cargo:warning=<message>
    cargo:rustc-link-search=<kind>=<path>
    cargo:rustc-link-lib=<name>
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple, Union

logger = logging.getLogger(__name__)

RERUN_IF_CHANGED = "rerun-if-changed"
WARNING = "warning"
LINK_SEARCH = "rustc-link-search"
LINK_LIB = "rustc-link-lib"


class BuildSignals:
    """
    Emit build directives to a stream.

    Every directive is also kept in ``emitted`` as a ``(kind, value)`` pair,
    in emission order.

    Example:
        >>> signals = BuildSignals()
        >>> signals.link_lib("Ultralight")
        cargo:rustc-link-lib=Ultralight
    """

    def __init__(self, stream: Optional[TextIO] = None, prefix: str = "cargo"):
        """
        Initialize the emitter.

        Args:
            stream: Output stream (default: sys.stdout at emission time)
            prefix: Directive prefix understood by the build orchestrator
        """
        self._stream = stream
        self.prefix = prefix
        self.emitted: List[Tuple[str, str]] = []

    def emit(self, kind: str, value: str) -> None:
        """Write a single directive line."""
        stream = self._stream if self._stream is not None else sys.stdout
        line = f"{self.prefix}:{kind}={value}"
        print(line, file=stream)
        self.emitted.append((kind, value))
        logger.debug(f"Emitted directive: {line}")

    def rerun_if_changed(self, path: Union[str, Path]) -> None:
        """Ask the build orchestrator to rerun when path changes."""
        self.emit(RERUN_IF_CHANGED, str(path))

    def warning(self, message: str) -> None:
        """Surface a warning in the build output."""
        self.emit(WARNING, message)

    def link_search(self, path: Union[str, Path], kind: str = "native") -> None:
        """Add a native library search path."""
        self.emit(LINK_SEARCH, f"{kind}={path}")

    def link_lib(self, name: str) -> None:
        """Link against a library by name."""
        self.emit(LINK_LIB, name)

    def values(self, kind: str) -> List[str]:
        """Get every emitted value of one directive kind, in order."""
        return [value for emitted_kind, value in self.emitted if emitted_kind == kind]


__all__ = [
    "BuildSignals",
    "RERUN_IF_CHANGED",
    "WARNING",
    "LINK_SEARCH",
    "LINK_LIB",
]
