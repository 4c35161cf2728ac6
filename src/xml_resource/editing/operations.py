"""Locate-by-name and text-anchored insert/erase.

``add`` and ``erase`` relocate their edit point by searching the buffer for
the anchor's span text rather than trusting the anchor's stored offset. When
the same tag text occurs more than once, the first occurrence is edited.
Neither operation updates other cursors over the buffer; they become stale.
"""

from xml_resource.buffer.buffer import XMLBuffer
from xml_resource.cursor.cursor import NOT_FOUND, TAG_OPEN, TagCursor
from xml_resource.shared.logging import get_logger

logger = get_logger(__name__, component="editing")


def find(name: str, buffer: XMLBuffer) -> TagCursor:
    """Return a cursor on the first span containing ``"<" + name``.

    The match is a plain substring test, so ``find("li", ...)`` also stops at
    ``<list>``. When nothing matches, the returned cursor is unlocated
    (empty ``current_span``); no exception is raised.

    Examples:
        >>> buffer = XMLBuffer.from_text("<list>x</list><li>y</li>")
        >>> find("li", buffer).current_span
        '<list>'
        >>> find("table", buffer).current_span
        ''
    """
    marker = TAG_OPEN + name
    cursor = TagCursor(buffer)
    while cursor.current_span:
        if marker in cursor.current_span:
            logger.debug(
                "Element located",
                extra={"element": name, "span": cursor.current_span, "offset": cursor.position},
            )
            return cursor
        cursor.next()

    logger.debug("Element not found", extra={"element": name})
    return cursor


def _anchor_offset(anchor: TagCursor) -> int:
    if not anchor.current_span:
        return NOT_FOUND
    return anchor.buffer.index(anchor.current_span)


def add(new_text: str, anchor: TagCursor) -> bool:
    """Insert ``new_text`` just before the first occurrence of the anchor's span.

    Returns:
        False, with the buffer unchanged, if the anchor is unlocated or its
        span text no longer occurs in the buffer
    """
    offset = _anchor_offset(anchor)
    if offset == NOT_FOUND:
        logger.debug("Insert anchor not found", extra={"span": anchor.current_span})
        return False

    anchor.buffer.insert(offset, new_text)
    logger.debug("Text inserted", extra={"offset": offset, "inserted": len(new_text)})
    return True


def erase(anchor: TagCursor) -> bool:
    """Remove the first occurrence of the anchor's span text.

    Only the span itself is removed; a matching close tag is left in place.

    Returns:
        False, with the buffer unchanged, if the anchor is unlocated or its
        span text no longer occurs in the buffer
    """
    offset = _anchor_offset(anchor)
    if offset == NOT_FOUND:
        logger.debug("Erase anchor not found", extra={"span": anchor.current_span})
        return False

    anchor.buffer.delete(offset, len(anchor.current_span))
    logger.debug("Span erased", extra={"offset": offset, "removed": len(anchor.current_span)})
    return True
