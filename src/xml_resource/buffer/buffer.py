"""XML text buffer with whole-file load and save.

The buffer holds the document as one flat string. There is no tree, token
list or index alongside it: cursors and edit operations work directly on the
text by substring search.
"""

import time
from pathlib import Path
from typing import Optional, Union

from xml_resource.shared.config import IOConfig
from xml_resource.shared.errors import IOErrorKind
from xml_resource.shared.logging import get_logger
from xml_resource.shared.result import DiagnosticSeverity, IOResult

MS_PER_SECOND = 1000.0

PathType = Union[str, Path]


class XMLBuffer:
    """Mutable raw XML text.

    ``version`` increases on every change to the text. Cursors record the
    version they last observed, which is how a cursor left behind by an edit
    reports itself as stale.

    Examples:
        >>> buffer = XMLBuffer.from_text("<ul><li>A</li></ul>")
        >>> buffer.index("<li>")
        4
        >>> buffer.insert(4, "<new/>")
        >>> buffer.text
        '<ul><new/><li>A</li></ul>'
    """

    def __init__(
        self,
        text: str = "",
        config: Optional[IOConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self._text = text
        self.version = 0
        self.source: Optional[Path] = None
        self.config = config or IOConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "buffer")

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "XMLBuffer":
        return cls(text, **kwargs)

    @classmethod
    def from_file(
        cls,
        path: PathType,
        config: Optional[IOConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> "XMLBuffer":
        """Create a buffer from a file, raising if it cannot be loaded.

        Raises:
            ResourceIOError: If the file is missing, unreadable or undecodable
        """
        buffer = cls(config=config, correlation_id=correlation_id)
        buffer.load(path).raise_for_error()
        return buffer

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._set_text(value)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"XMLBuffer(length={len(self._text)}, version={self.version})"

    def _set_text(self, value: str) -> None:
        self._text = value
        self.version += 1

    def index(self, substring: str, start: int = 0) -> int:
        """Return the offset of the first occurrence of ``substring``, or -1."""
        return self._text.find(substring, start)

    def insert(self, offset: int, text: str) -> None:
        """Insert ``text`` before the character at ``offset``.

        Raises:
            IndexError: If offset is outside ``0..len(buffer)``
        """
        if not 0 <= offset <= len(self._text):
            raise IndexError(f"Insert offset {offset} out of range 0..{len(self._text)}")
        self._set_text(self._text[:offset] + text + self._text[offset:])

    def delete(self, offset: int, length: int) -> None:
        """Remove ``length`` characters starting at ``offset``.

        Raises:
            IndexError: If the range does not lie inside the buffer
        """
        if length < 0:
            raise IndexError(f"Delete length must be >= 0, got {length}")
        if offset < 0 or offset + length > len(self._text):
            raise IndexError(
                f"Delete range {offset}..{offset + length} out of range 0..{len(self._text)}"
            )
        self._set_text(self._text[:offset] + self._text[offset + length:])

    def load(self, source: PathType) -> IOResult:
        """Replace the buffer text with the whole content of ``source``.

        Prior text is kept untouched when the load fails.

        Args:
            source: Path of the file to read

        Returns:
            IOResult describing the outcome; never raises for access failures
        """
        start_time = time.time()
        path_obj = Path(source)
        logger = self.logger.bind(source=str(path_obj))
        logger.debug("Starting load", extra={"encoding": self.config.encoding})

        def _fail(kind: IOErrorKind, message: str) -> IOResult:
            logger.warning(message, extra={"error_kind": kind.name})
            return IOResult.failure(
                "load", path_obj, kind, message, _elapsed_ms(start_time), self.correlation_id
            )

        if not path_obj.exists():
            return _fail(IOErrorKind.NOT_FOUND, f"File not found: {path_obj}")
        if not path_obj.is_file():
            return _fail(IOErrorKind.NOT_FOUND, f"Path is not a file: {path_obj}")

        try:
            with path_obj.open("rb") as handle:
                raw_data = handle.read()
        except FileNotFoundError:
            return _fail(IOErrorKind.NOT_FOUND, f"File not found: {path_obj}")
        except OSError as e:
            return _fail(IOErrorKind.READ_DENIED, f"Cannot read {path_obj}: {e}")

        try:
            content = raw_data.decode(self.config.encoding, self.config.errors)
        except UnicodeDecodeError as e:
            return _fail(
                IOErrorKind.ENCODING_ERROR,
                f"Cannot decode {path_obj} as {self.config.encoding}: {e}",
            )

        self._set_text(content)
        self.source = path_obj
        result = IOResult.ok(
            "load", path_obj, len(content), _elapsed_ms(start_time), self.correlation_id
        )
        result.add_diagnostic(
            DiagnosticSeverity.INFO,
            f"File loaded with encoding: {self.config.encoding}",
            "buffer",
            details={"bytes": len(raw_data)},
        )
        logger.info("XML loaded", extra={"characters": len(content)})
        return result

    def save(self, sink: PathType) -> IOResult:
        """Write the whole buffer text to ``sink``.

        The text is encoded before the file is opened, so a codec failure
        leaves the sink untouched.

        Args:
            sink: Path of the file to write

        Returns:
            IOResult describing the outcome; never raises for access failures
        """
        start_time = time.time()
        path_obj = Path(sink)
        logger = self.logger.bind(sink=str(path_obj))

        def _fail(kind: IOErrorKind, message: str) -> IOResult:
            logger.warning(message, extra={"error_kind": kind.name})
            return IOResult.failure(
                "save", path_obj, kind, message, _elapsed_ms(start_time), self.correlation_id
            )

        try:
            raw_data = self._text.encode(self.config.encoding, self.config.errors)
        except UnicodeEncodeError as e:
            return _fail(
                IOErrorKind.ENCODING_ERROR,
                f"Cannot encode buffer as {self.config.encoding}: {e}",
            )

        try:
            with path_obj.open("wb") as handle:
                handle.write(raw_data)
        except OSError as e:
            return _fail(IOErrorKind.WRITE_DENIED, f"Cannot write {path_obj}: {e}")

        logger.info("XML saved", extra={"characters": len(self._text)})
        return IOResult.ok(
            "save", path_obj, len(self._text), _elapsed_ms(start_time), self.correlation_id
        )


def _elapsed_ms(start_time: float) -> float:
    return (time.time() - start_time) * MS_PER_SECOND
