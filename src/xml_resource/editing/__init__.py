"""Locate and edit operations anchored on tag cursors."""

from .operations import add, erase, find

__all__ = ["add", "erase", "find"]
