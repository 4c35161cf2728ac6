"""Error types for XML resource I/O.

Not-found conditions during navigation and editing are reported as values
(an empty span or a ``False`` return), never as exceptions. Only storage
access failures have an exception form, and even those are raised only when
a caller explicitly unwraps a failed ``IOResult``.
"""

from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union


class IOErrorKind(Enum):
    """Reasons a load or save can fail."""

    NOT_FOUND = auto()       # Source missing or not a regular file
    READ_DENIED = auto()     # Source exists but could not be opened or read
    WRITE_DENIED = auto()    # Sink could not be opened or written
    ENCODING_ERROR = auto()  # Codec rejected the content (strict handlers only)


class ResourceIOError(OSError):
    """Raised when a failed load or save result is unwrapped."""

    def __init__(
        self,
        kind: IOErrorKind,
        path: Optional[Union[str, Path]],
        message: str,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.path = str(path) if path is not None else None
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"
