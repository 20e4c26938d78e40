"""
Binding generation against the materialized SDK headers.

Runs the external ctypesgen generator over a wrapper header that includes the
Ultralight C API, restricted to the SDK's symbol prefixes. The generator is an
external tool; this module only prepares its inputs and invokes it.

Usage:
    from ultralightkit.bindings import build_bindings

    output = build_bindings(Path("src/wrapper.h"))
"""

import importlib.util
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, Union

from ultralightkit.core.exceptions import (
    BindingGenerationError,
    ConfigurationMissingError,
)
from ultralightkit.core.filesystem import ensure_directory
from ultralightkit.core.platform import Platform
from ultralightkit.core.signals import BuildSignals
from ultralightkit.sdk.categories import LINK_LIBRARIES, AssetCategory
from ultralightkit.sdk.fetcher import ArchiveFetcher
from ultralightkit.sdk.materializer import (
    OUT_DIR_ENV,
    AssetMaterializer,
    CategoryConfig,
    MaterializeRequest,
)

logger = logging.getLogger(__name__)

# Symbol name prefixes exposed by the Ultralight, AppCore and JavaScriptCore C APIs.
TYPE_FUNCTION_PREFIXES = ("UL", "JS", "ul", "WK")
# kJS* names are JavaScriptCore constants, kept for variables only.
VARIABLE_PREFIXES = TYPE_FUNCTION_PREFIXES + ("kJS",)
ALLOWLIST_PATTERNS = VARIABLE_PREFIXES


def _prefix_pattern(prefixes) -> str:
    return "^" + "|".join(f"{prefix}.*" for prefix in prefixes)


TYPE_FUNCTION_PATTERN = _prefix_pattern(TYPE_FUNCTION_PREFIXES)
VARIABLE_PATTERN = _prefix_pattern(VARIABLE_PREFIXES)

# ctypesgen takes a single include filter for every symbol kind.
SYMBOL_PATTERN = VARIABLE_PATTERN

DOCS_BUILD_ENV_VARS = ("DOCS_RS", "ULTRALIGHT_DOCS_BUILD")
MANIFEST_DIR_ENV = "MANIFEST_DIR"
BUNDLED_HEADERS_DIR_NAME = "Ultralight-API"
BINDINGS_FILE_NAME = "bindings.py"


def is_docs_build(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Whether this is an offline documentation build."""
    environ = os.environ if environ is None else environ
    return any(name in environ for name in DOCS_BUILD_ENV_VARS)


def require_generator() -> None:
    """
    Check that the binding generator is installed.

    Raises:
        BindingGenerationError: If ctypesgen cannot be imported
    """
    if importlib.util.find_spec("ctypesgen") is None:
        raise BindingGenerationError(
            "Binding generation requires the 'ctypesgen' package. "
            "Install it with: pip install ctypesgen"
        )


def _resolve_out_dir(
    out_dir: Optional[Union[str, Path]], environ: Mapping[str, str]
) -> Path:
    """Get the base output root from the argument or OUT_DIR."""
    if out_dir is not None:
        return Path(out_dir)
    value = environ.get(OUT_DIR_ENV)
    if not value:
        raise ConfigurationMissingError(OUT_DIR_ENV)
    return Path(value)


def resolve_headers_dir(
    environ: Optional[Mapping[str, str]] = None,
    bundled_headers: Optional[Path] = None,
    version: Optional[str] = None,
    platform: Optional[Platform] = None,
    fetcher: Optional[ArchiveFetcher] = None,
    signals: Optional[BuildSignals] = None,
    out_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Get a directory holding the SDK headers.

    Documentation builds use headers bundled with the source tree and never
    touch the network. Otherwise the Headers category is materialized into
    <out_dir>/headers.

    Args:
        environ: Environment (default: os.environ)
        bundled_headers: Bundled headers directory for documentation builds
            (default: <MANIFEST_DIR>/Ultralight-API)
        version: SDK version, or None for the latest release
        platform: Target platform, or None to infer from the host
        fetcher: Archive fetcher passed to the materializer
        signals: Directive emitter passed to the materializer
        out_dir: Base output root (default: $OUT_DIR)

    Returns:
        Headers directory

    Raises:
        ConfigurationMissingError: If a required environment variable is unset
    """
    environ = os.environ if environ is None else environ

    if is_docs_build(environ):
        if bundled_headers is not None:
            headers_dir = Path(bundled_headers)
        else:
            manifest_dir = environ.get(MANIFEST_DIR_ENV)
            if not manifest_dir:
                raise ConfigurationMissingError(MANIFEST_DIR_ENV)
            headers_dir = Path(manifest_dir) / BUNDLED_HEADERS_DIR_NAME
        logger.info(f"Documentation build, using bundled headers: {headers_dir}")
        return headers_dir

    out_dir = _resolve_out_dir(out_dir, environ)

    headers_dir = out_dir / AssetCategory.HEADERS.default_subdir
    request = MaterializeRequest(
        version=version,
        platform=platform,
        out_dir=out_dir,
        headers=CategoryConfig(wanted=True, out_dir=headers_dir),
    )
    AssetMaterializer(
        request, fetcher=fetcher, signals=signals, environ=environ
    ).materialize()
    return headers_dir


def build_generator_command(
    header: Path,
    include_dirs: Sequence[Path],
    output: Path,
    libraries: Sequence[str] = (),
    symbol_pattern: str = SYMBOL_PATTERN,
) -> List[str]:
    """
    Build the ctypesgen command line.

    Example:
        >>> build_generator_command(Path("wrapper.h"), [Path("inc")], Path("out.py"))
        [..., '-m', 'ctypesgen', '--all-headers', '--include-symbols', ...]
    """
    cmd = [
        sys.executable,
        "-m",
        "ctypesgen",
        "--all-headers",
        "--include-symbols",
        symbol_pattern,
    ]
    for include_dir in include_dirs:
        cmd.extend(["-I", str(include_dir)])
    for library in libraries:
        cmd.extend(["-l", library])
    cmd.extend(["-o", str(output), str(header)])
    return cmd


def generate_bindings(
    header: Union[str, Path],
    include_dirs: Sequence[Union[str, Path]],
    output: Union[str, Path],
    libraries: Sequence[str] = LINK_LIBRARIES,
    symbol_pattern: str = SYMBOL_PATTERN,
    signals: Optional[BuildSignals] = None,
) -> Path:
    """
    Run the binding generator over a wrapper header.

    Args:
        header: Wrapper header including the SDK C API
        include_dirs: Include directories (the materialized headers)
        output: Generated Python module path
        libraries: Libraries the generated module loads
        symbol_pattern: Regular expression of symbols to keep
        signals: Directive emitter (default: stdout)

    Returns:
        Path to generated bindings

    Raises:
        BindingGenerationError: If the generator is missing or fails
    """
    header = Path(header)
    output = Path(output)
    signals = signals or BuildSignals()

    signals.rerun_if_changed(header)

    require_generator()

    ensure_directory(output.parent)
    cmd = build_generator_command(
        header, [Path(d) for d in include_dirs], output, libraries, symbol_pattern
    )

    logger.info(f"Generating bindings for {header} into {output}")
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as e:
        raise BindingGenerationError(
            f"Binding generator failed with exit code {e.returncode}: {e.stderr}"
        ) from e
    except OSError as e:
        raise BindingGenerationError(f"Failed to run binding generator: {e}") from e

    if not output.exists():
        raise BindingGenerationError(f"Binding generator produced no output: {output}")

    logger.info(f"Bindings written to {output}")
    return output


def build_bindings(
    header: Union[str, Path],
    output: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    bundled_headers: Optional[Path] = None,
    version: Optional[str] = None,
    platform: Optional[Platform] = None,
    fetcher: Optional[ArchiveFetcher] = None,
    signals: Optional[BuildSignals] = None,
    out_dir: Optional[Union[str, Path]] = None,
) -> Path:
    """
    Materialize headers (unless documenting) and generate bindings.

    The generator is checked before any header is materialized, so a missing
    generator never costs a download.

    Args:
        header: Wrapper header including the SDK C API
        output: Generated module path (default: <out_dir>/bindings.py)
        environ: Environment (default: os.environ)
        bundled_headers: Bundled headers directory for documentation builds
        version: SDK version, or None for the latest release
        platform: Target platform, or None to infer from the host
        fetcher: Archive fetcher passed to the materializer
        signals: Directive emitter (default: stdout)
        out_dir: Base output root (default: $OUT_DIR)

    Returns:
        Path to generated bindings

    Raises:
        ConfigurationMissingError: If an output root is needed and unset
        BindingGenerationError: If the generator is missing or fails
    """
    environ = os.environ if environ is None else environ
    signals = signals or BuildSignals()

    require_generator()

    headers_dir = resolve_headers_dir(
        environ,
        bundled_headers=bundled_headers,
        version=version,
        platform=platform,
        fetcher=fetcher,
        signals=signals,
        out_dir=out_dir,
    )

    if output is None:
        output = _resolve_out_dir(out_dir, environ) / BINDINGS_FILE_NAME

    return generate_bindings(header, [headers_dir], output, signals=signals)
