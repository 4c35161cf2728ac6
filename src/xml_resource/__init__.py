"""XML Resource.

Edit XML documents held as raw text. A ``TagCursor`` walks the ``<...>``
spans of an ``XMLBuffer``; ``find``, ``add`` and ``erase`` locate elements by
name and insert or remove text anchored on a cursor. No tree is built and the
input is never validated.

Typical session:
- ``XMLBuffer.from_file()`` or ``XMLBuffer().load()`` to read a document
- ``find()`` to position a cursor on an element
- ``add()`` / ``erase()`` to edit around it
- ``XMLBuffer.save()`` to write the result
"""

__version__ = "0.1.0"
__author__ = "XML Resource Team"

from .buffer import XMLBuffer
from .cursor import CursorState, TagCursor
from .editing import add, erase, find
from .shared.config import EditConfig, IOConfig, ResourceConfig
from .shared.errors import IOErrorKind, ResourceIOError
from .shared.result import IOResult

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Core types
    "XMLBuffer",
    "TagCursor",
    "CursorState",

    # Edit operations
    "find",
    "add",
    "erase",

    # Results and errors
    "IOResult",
    "IOErrorKind",
    "ResourceIOError",

    # Configuration
    "IOConfig",
    "EditConfig",
    "ResourceConfig",
]
