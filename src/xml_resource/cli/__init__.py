"""Command-line interface for XML Resource.

Provides the load / edit / save driver and span listing tools over single
XML files.
"""

from .main import main

__all__ = ["main"]
