"""
Command-line interface for the Quotes client.
"""

from .app import app, main

__all__ = ["app", "main"]
