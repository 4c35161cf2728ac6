"""Tag-boundary cursor navigation."""

from .cursor import CursorState, TagCursor

__all__ = ["CursorState", "TagCursor"]
