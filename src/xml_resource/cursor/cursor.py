"""Tag-boundary cursor over an XML buffer.

A cursor moves between ``<...>`` spans by literal character search. It makes
no distinction between open, close and self-closing tags, and a ``>`` inside
an attribute value or text content ends a span just like a real tag close.
"""

from enum import Enum, auto
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from xml_resource.buffer.buffer import XMLBuffer

TAG_OPEN = "<"
TAG_CLOSE = ">"
NOT_FOUND = -1


class CursorState(Enum):
    """Whether the cursor currently holds a tag span."""

    UNLOCATED = auto()  # Last scan found no span
    ON_SPAN = auto()    # current_span holds a tag


class TagCursor:
    """Bidirectional iterator over tag spans of a buffer it does not own.

    ``next()`` leaves ``position`` one past the span's ``>``; ``previous()``
    leaves it on the span's ``<``. The cursor is not adjusted when the buffer
    is edited: check ``is_stale`` and re-derive the cursor after an edit.

    Examples:
        >>> from xml_resource.buffer import XMLBuffer
        >>> cursor = TagCursor(XMLBuffer.from_text("<a><b/></a>"))
        >>> cursor.current_span, cursor.position
        ('<a>', 3)
        >>> cursor.next()
        '<b/>'
        >>> cursor.previous(), cursor.position
        ('<b/>', 3)
    """

    def __init__(self, buffer: "XMLBuffer") -> None:
        self.buffer = buffer
        self.position = 0
        self.current_span = ""
        self.version = buffer.version
        self.next()

    @property
    def state(self) -> CursorState:
        return CursorState.ON_SPAN if self.current_span else CursorState.UNLOCATED

    @property
    def is_stale(self) -> bool:
        """True if the buffer changed since this cursor last moved."""
        return self.version != self.buffer.version

    def has_next(self) -> bool:
        """True while there is buffer text after the cursor.

        This does not promise that ``next()`` will locate a span.
        """
        return self.position < len(self.buffer)

    def has_previous(self) -> bool:
        return self.position > 0

    def next(self) -> str:
        """Move to the next span and return it ("" if none was found)."""
        text = self.buffer.text
        self.version = self.buffer.version
        start = text.find(TAG_OPEN, self.position)
        end = text.find(TAG_CLOSE, start) if start != NOT_FOUND else NOT_FOUND
        if end == NOT_FOUND:
            self.current_span = ""
            return self.current_span

        self.current_span = text[start:end + 1]
        self.position = end + 1
        return self.current_span

    def previous(self) -> str:
        """Move to the nearest span starting before the cursor and return it.

        The span is searched from ``position - 1`` backwards; its closing
        ``>`` is the first one after that ``<``.
        """
        text = self.buffer.text
        self.version = self.buffer.version
        start = text.rfind(TAG_OPEN, 0, self.position) if self.position > 0 else NOT_FOUND
        end = text.find(TAG_CLOSE, start) if start != NOT_FOUND else NOT_FOUND
        if end == NOT_FOUND:
            self.current_span = ""
            return self.current_span

        self.current_span = text[start:end + 1]
        self.position = start
        return self.current_span

    def copy(self) -> "TagCursor":
        """Return an independent cursor at the same place on the same buffer."""
        clone = TagCursor.__new__(TagCursor)
        clone.buffer = self.buffer
        clone.position = self.position
        clone.current_span = self.current_span
        clone.version = self.version
        return clone

    def __iter__(self) -> Iterator[str]:
        """Yield the current span, then every span ``next()`` finds.

        Iteration advances this cursor; it ends unlocated.
        """
        while self.current_span:
            yield self.current_span
            self.next()

    def __repr__(self) -> str:
        return (
            f"TagCursor(position={self.position}, span={self.current_span!r}, "
            f"state={self.state.name})"
        )
