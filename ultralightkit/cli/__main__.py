"""
Entry point for running UltralightKit CLI as a module.

Usage: python -m ultralightkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
