"""
Entry point for running Quotes as a module.

This allows users to run the CLI using:
    python -m quotes [command] [options]
"""

from quotes.cli.app import main

if __name__ == "__main__":
    main()
