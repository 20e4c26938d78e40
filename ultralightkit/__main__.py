"""
Entry point for running UltralightKit CLI as a module.

Usage: python -m ultralightkit [command] [options]
"""

from ultralightkit.cli.parser import main

if __name__ == "__main__":
    main()
