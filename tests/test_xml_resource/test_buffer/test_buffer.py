"""Tests for the raw XML text buffer."""

import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from xml_resource.buffer import XMLBuffer
from xml_resource.shared.config import IOConfig
from xml_resource.shared.errors import IOErrorKind, ResourceIOError
from xml_resource.shared.result import DiagnosticSeverity


def _write_temp(data: bytes, suffix: str = ".xml") -> Path:
    with tempfile.NamedTemporaryFile(suffix=suffix, delete=False) as f:
        f.write(data)
        return Path(f.name)


class TestBufferBasics:
    """Tests for construction and in-place editing."""

    def test_created_empty(self):
        """Test a new buffer is empty."""
        buffer = XMLBuffer()
        assert buffer.text == ""
        assert len(buffer) == 0
        assert buffer.version == 0
        assert buffer.source is None

    def test_from_text(self):
        """Test construction from a literal."""
        buffer = XMLBuffer.from_text("<a/>", correlation_id="req-1")
        assert str(buffer) == "<a/>"
        assert len(buffer) == 4
        assert buffer.correlation_id == "req-1"

    def test_text_setter_bumps_version(self):
        """Test that replacing the text bumps the version."""
        buffer = XMLBuffer()
        buffer.text = "<root/>"
        assert buffer.text == "<root/>"
        assert buffer.version == 1

    def test_index(self):
        """Test first-occurrence search."""
        buffer = XMLBuffer.from_text("<li>a</li><li>b</li>")
        assert buffer.index("<li>") == 0
        assert buffer.index("<li>", 1) == 10
        assert buffer.index("<ul>") == -1

    def test_insert(self):
        """Test insertion at start, middle and end."""
        buffer = XMLBuffer.from_text("<a></a>")
        buffer.insert(3, "x")
        buffer.insert(0, "<r>")
        buffer.insert(len(buffer), "</r>")
        assert buffer.text == "<r><a>x</a></r>"
        assert buffer.version == 3

    def test_insert_out_of_range(self):
        """Test insertion offsets outside the text are rejected."""
        buffer = XMLBuffer.from_text("<a/>")
        with pytest.raises(IndexError):
            buffer.insert(5, "x")
        with pytest.raises(IndexError):
            buffer.insert(-1, "x")
        assert buffer.text == "<a/>"
        assert buffer.version == 0

    def test_delete(self):
        """Test deletion of a range."""
        buffer = XMLBuffer.from_text("<ul><li>A</li></ul>")
        buffer.delete(4, 4)
        assert buffer.text == "<ul>A</li></ul>"
        assert buffer.version == 1

    def test_delete_out_of_range(self):
        """Test deletion ranges outside the text are rejected."""
        buffer = XMLBuffer.from_text("<a/>")
        with pytest.raises(IndexError):
            buffer.delete(2, 5)
        with pytest.raises(IndexError):
            buffer.delete(-1, 1)
        with pytest.raises(IndexError):
            buffer.delete(0, -1)
        assert buffer.text == "<a/>"

    def test_repr(self):
        """Test repr shows length and version."""
        assert repr(XMLBuffer.from_text("<a/>")) == "XMLBuffer(length=4, version=0)"


class TestBufferLoad:
    """Tests for loading from files."""

    def test_load_replaces_content(self):
        """Test that load replaces prior text."""
        path = _write_temp(b"<root><item>test</item></root>")
        try:
            buffer = XMLBuffer.from_text("<old/>")
            result = buffer.load(path)

            assert result.success is True
            assert result.operation == "load"
            assert result.characters == len("<root><item>test</item></root>")
            assert buffer.text == "<root><item>test</item></root>"
            assert buffer.source == path
            assert buffer.version == 1
            assert any(d.severity == DiagnosticSeverity.INFO for d in result.diagnostics)
        finally:
            path.unlink()

    def test_load_accepts_string_path(self):
        """Test loading with a str path."""
        path = _write_temp(b"<a/>")
        try:
            buffer = XMLBuffer()
            assert buffer.load(str(path)).success is True
            assert buffer.text == "<a/>"
        finally:
            path.unlink()

    def test_load_empty_file(self):
        """Test loading an empty file yields an empty buffer."""
        path = _write_temp(b"")
        try:
            buffer = XMLBuffer.from_text("<old/>")
            result = buffer.load(path)
            assert result.success is True
            assert buffer.text == ""
        finally:
            path.unlink()

    def test_load_missing_file_keeps_prior_text(self):
        """Test that a missing source fails with NOT_FOUND and changes nothing."""
        buffer = XMLBuffer.from_text("<keep/>")
        result = buffer.load(Path("nonexistent_dir") / "missing.xml")

        assert result.success is False
        assert result.error_kind == IOErrorKind.NOT_FOUND
        assert "not found" in result.message.lower()
        assert buffer.text == "<keep/>"
        assert buffer.version == 0
        assert buffer.source is None

    def test_load_directory(self):
        """Test that a directory is reported as NOT_FOUND."""
        with tempfile.TemporaryDirectory() as tmpdir:
            buffer = XMLBuffer()
            result = buffer.load(tmpdir)
            assert result.error_kind == IOErrorKind.NOT_FOUND
            assert "not a file" in result.message

    def test_load_permission_denied(self):
        """Test that an unreadable file is reported as READ_DENIED."""
        path = _write_temp(b"<a/>")
        try:
            buffer = XMLBuffer.from_text("<keep/>")
            with patch.object(Path, "open", side_effect=PermissionError("denied")):
                result = buffer.load(path)

            assert result.success is False
            assert result.error_kind == IOErrorKind.READ_DENIED
            assert buffer.text == "<keep/>"
        finally:
            path.unlink()

    def test_load_strict_rejects_invalid_bytes(self):
        """Test that strict decoding reports ENCODING_ERROR."""
        path = _write_temp(b"<a>\xff</a>")
        try:
            buffer = XMLBuffer(config=IOConfig.strict())
            result = buffer.load(path)
            assert result.success is False
            assert result.error_kind == IOErrorKind.ENCODING_ERROR
            assert buffer.text == ""
        finally:
            path.unlink()

    def test_from_file(self):
        """Test load-or-raise construction."""
        path = _write_temp(b"<a/>")
        try:
            buffer = XMLBuffer.from_file(path, correlation_id="req-3")
            assert buffer.text == "<a/>"
            assert buffer.correlation_id == "req-3"
        finally:
            path.unlink()

    def test_from_file_missing_raises(self):
        """Test that from_file raises ResourceIOError for a missing file."""
        with pytest.raises(ResourceIOError) as exc_info:
            XMLBuffer.from_file("missing_file.xml")
        assert exc_info.value.kind == IOErrorKind.NOT_FOUND


class TestBufferSave:
    """Tests for saving to files."""

    def test_round_trip_is_byte_exact(self):
        """Test save(load(X)) reproduces X byte for byte."""
        original = (
            b'<?xml version="1.0" encoding="utf-8"?>\r\n'
            b"<root>\n  <item a=\"1\">caf\xc3\xa9</item>\r\n"
            b"  <raw>\xff\xfe</raw>\n</root>\n"
        )
        source = _write_temp(original)
        with tempfile.TemporaryDirectory() as tmpdir:
            sink = Path(tmpdir) / "copy.xml"
            try:
                buffer = XMLBuffer()
                assert buffer.load(source).success is True
                result = buffer.save(sink)

                assert result.success is True
                assert result.operation == "save"
                assert sink.read_bytes() == original
            finally:
                source.unlink()

    def test_save_writes_edits(self):
        """Test that in-place edits are written."""
        with tempfile.TemporaryDirectory() as tmpdir:
            sink = Path(tmpdir) / "out.xml"
            buffer = XMLBuffer.from_text("<a></a>")
            buffer.insert(3, "text")
            assert buffer.save(sink).characters == len("<a>text</a>")
            assert sink.read_text(encoding="utf-8") == "<a>text</a>"

    def test_save_does_not_change_buffer(self):
        """Test that saving leaves text and version alone."""
        with tempfile.TemporaryDirectory() as tmpdir:
            buffer = XMLBuffer.from_text("<a/>")
            buffer.save(Path(tmpdir) / "out.xml")
            assert buffer.text == "<a/>"
            assert buffer.version == 0

    def test_save_to_missing_directory(self):
        """Test that an unopenable sink is reported as WRITE_DENIED."""
        buffer = XMLBuffer.from_text("<a/>")
        result = buffer.save(Path("nonexistent_dir") / "sub" / "out.xml")

        assert result.success is False
        assert result.error_kind == IOErrorKind.WRITE_DENIED
        assert result.characters == 0

    def test_save_permission_denied(self):
        """Test that a permission failure is reported as WRITE_DENIED."""
        buffer = XMLBuffer.from_text("<a/>")
        with patch.object(Path, "open", side_effect=PermissionError("denied")):
            result = buffer.save("out.xml")
        assert result.error_kind == IOErrorKind.WRITE_DENIED
        with pytest.raises(ResourceIOError):
            result.raise_for_error()

    def test_save_strict_encoding_error_leaves_sink_untouched(self):
        """Test that an encoding failure writes nothing."""
        with tempfile.TemporaryDirectory() as tmpdir:
            sink = Path(tmpdir) / "out.xml"
            buffer = XMLBuffer("<a>\udcff</a>", config=IOConfig.strict())
            result = buffer.save(sink)

            assert result.error_kind == IOErrorKind.ENCODING_ERROR
            assert not sink.exists()
