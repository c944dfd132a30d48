from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import BinaryIO


class PayloadKind(str, Enum):
    """Discriminator for the in-memory payload carried by ComplexData."""

    BYTES = "BYTES"
    STREAM = "STREAM"


@dataclass(frozen=True)
class BytePayload:
    data: bytes
    kind: PayloadKind = field(default=PayloadKind.BYTES, init=False)


@dataclass(frozen=True)
class StreamPayload:
    stream: BinaryIO
    kind: PayloadKind = field(default=PayloadKind.STREAM, init=False)


ComplexPayload = BytePayload | StreamPayload


@dataclass(frozen=True)
class ComplexData:
    """Transient binary payload attached to an observation.

    Never persisted itself: a handler materializes it into a stored file and
    replaces it on the observation with a pointer.
    """

    title: str | None
    payload: ComplexPayload
    mime_type: str | None = None

    @classmethod
    def from_bytes(
        cls,
        title: str | None,
        data: bytes,
        mime_type: str | None = None,
    ) -> ComplexData:
        return cls(title=title, payload=BytePayload(data), mime_type=mime_type)

    @classmethod
    def from_stream(
        cls,
        title: str | None,
        stream: BinaryIO,
        mime_type: str | None = None,
    ) -> ComplexData:
        return cls(title=title, payload=StreamPayload(stream), mime_type=mime_type)

    def with_mime_type(self, mime_type: str | None) -> ComplexData:
        return replace(self, mime_type=mime_type)

    @property
    def length(self) -> int | None:
        """Payload size in bytes, or None when the payload is a stream."""
        if self.payload.kind is PayloadKind.BYTES:
            return len(self.payload.data)
        return None
