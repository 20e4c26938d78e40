"""
UltralightKit command-line interface.

Provides the 'ultralightkit' command for fetching the SDK and generating bindings.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
