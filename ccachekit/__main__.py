"""
Entry point for running ccachekit as a module.

Usage: python -m ccachekit [command] [options]
"""

from ccachekit.cli.parser import main

if __name__ == "__main__":
    main()
