"""Tests for domain value objects."""

from __future__ import annotations

import io

import pytest
from pydantic import ValidationError as PydanticValidationError

from domain.exceptions import ValidationError
from domain.value_objects.blob_pointer import StoredBlobPointer
from domain.value_objects.complex_data import (
    BytePayload,
    ComplexData,
    PayloadKind,
    StreamPayload,
)
from domain.value_objects.complex_view import ComplexView
from domain.value_objects.mime_type import MimeType


class TestMimeType:
    """Test MimeType enum."""

    def test_octet_stream_value(self) -> None:
        assert MimeType.OCTET_STREAM == "application/octet-stream"


class TestComplexView:
    """Test ComplexView enum."""

    def test_view_values(self) -> None:
        """Test that view identifiers match the host's constants."""
        assert ComplexView.RAW == "RAW_VIEW"
        assert ComplexView.TEXT == "TEXT_VIEW"
        assert ComplexView.TITLE == "TITLE_VIEW"
        assert ComplexView.URI == "URI_VIEW"
        assert ComplexView.HTML == "HTML_VIEW"
        assert ComplexView.PREVIEW == "PREVIEW_VIEW"

    def test_view_lookup_by_value(self) -> None:
        assert ComplexView("RAW_VIEW") is ComplexView.RAW


class TestStoredBlobPointer:
    """Test StoredBlobPointer value object."""

    def test_for_filename_renders_wire_format(self) -> None:
        """Test that a new pointer uses the '<name> file |<name>' format."""
        pointer = StoredBlobPointer.for_filename("scan_1.pdf")

        assert pointer.value == "scan_1.pdf file |scan_1.pdf"
        assert pointer.filename == "scan_1.pdf"

    def test_parse_pointer_written_by_handler(self) -> None:
        pointer = StoredBlobPointer.parse("scan.pdf file |scan.pdf")

        assert pointer.title == "scan.pdf file "
        assert pointer.filename == "scan.pdf"
        assert pointer.display_title == "scan.pdf"

    def test_parse_round_trips_value(self) -> None:
        value = "x-ray.png file |x-ray.png"
        assert StoredBlobPointer.parse(value).value == value

    def test_parse_uses_last_segment_as_filename(self) -> None:
        pointer = StoredBlobPointer.parse("title|middle|stored.bin")

        assert pointer.title == "title"
        assert pointer.filename == "stored.bin"

    def test_parse_without_separator_uses_value_for_both(self) -> None:
        pointer = StoredBlobPointer.parse("stored.bin")

        assert pointer.title == "stored.bin"
        assert pointer.filename == "stored.bin"

    def test_parse_ignores_trailing_separators(self) -> None:
        pointer = StoredBlobPointer.parse("stored.bin||")

        assert pointer.filename == "stored.bin"

    @pytest.mark.parametrize("value", ["", "|", "  |  "])
    def test_parse_rejects_pointer_without_filename(self, value: str) -> None:
        with pytest.raises(ValidationError):
            StoredBlobPointer.parse(value)

    def test_display_title_strips_commas_and_spaces(self) -> None:
        """Test the sanitization applied to titles on fetch."""
        pointer = StoredBlobPointer.for_filename("My, File.pdf")

        assert pointer.display_title == "MyFile.pdf"

    def test_display_title_strips_only_one_trailing_file_token(self) -> None:
        pointer = StoredBlobPointer(title="profile file ", filename="profile")

        # the historical suffix goes; the "file" inside "profile" stays
        assert pointer.display_title == "profile"

    def test_display_title_keeps_file_token_not_at_end(self) -> None:
        pointer = StoredBlobPointer(title="file.txt", filename="file.txt")

        assert pointer.display_title == "file.txt"

    def test_pointer_is_immutable(self) -> None:
        pointer = StoredBlobPointer.for_filename("a.bin")

        with pytest.raises(PydanticValidationError):
            pointer.filename = "b.bin"


class TestComplexData:
    """Test ComplexData value object."""

    def test_from_bytes(self) -> None:
        data = ComplexData.from_bytes("note.txt", b"hello", mime_type="text/plain")

        assert data.title == "note.txt"
        assert isinstance(data.payload, BytePayload)
        assert data.payload.kind is PayloadKind.BYTES
        assert data.payload.data == b"hello"
        assert data.mime_type == "text/plain"
        assert data.length == 5

    def test_from_stream(self) -> None:
        stream = io.BytesIO(b"hello")
        data = ComplexData.from_stream("note.txt", stream)

        assert isinstance(data.payload, StreamPayload)
        assert data.payload.kind is PayloadKind.STREAM
        assert data.payload.stream is stream
        assert data.mime_type is None
        assert data.length is None

    def test_with_mime_type_returns_copy(self) -> None:
        data = ComplexData.from_bytes("a.bin", b"\x00")
        updated = data.with_mime_type(MimeType.OCTET_STREAM.value)

        assert updated.mime_type == "application/octet-stream"
        assert data.mime_type is None
        assert updated.payload == data.payload
