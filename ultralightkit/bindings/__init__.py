"""Binding generation for the Ultralight C API."""

from .generator import (
    ALLOWLIST_PATTERNS,
    SYMBOL_PATTERN,
    TYPE_FUNCTION_PATTERN,
    VARIABLE_PATTERN,
    build_bindings,
    build_generator_command,
    generate_bindings,
    is_docs_build,
    require_generator,
    resolve_headers_dir,
)

__all__ = [
    "ALLOWLIST_PATTERNS",
    "SYMBOL_PATTERN",
    "TYPE_FUNCTION_PATTERN",
    "VARIABLE_PATTERN",
    "build_bindings",
    "build_generator_command",
    "generate_bindings",
    "is_docs_build",
    "require_generator",
    "resolve_headers_dir",
]
