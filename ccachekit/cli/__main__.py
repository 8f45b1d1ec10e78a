"""
Entry point for running ccachekit CLI as a module.

Usage: python -m ccachekit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
