from .blob_pointer import StoredBlobPointer
from .complex_data import BytePayload, ComplexData, PayloadKind, StreamPayload
from .complex_data_state import ComplexDataState
from .complex_view import ComplexView
from .mime_type import MimeType

__all__ = [
    "BytePayload",
    "ComplexData",
    "ComplexDataState",
    "ComplexView",
    "MimeType",
    "PayloadKind",
    "StoredBlobPointer",
    "StreamPayload",
]
