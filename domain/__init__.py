"""Domain layer exports."""

from domain.aggregates.observation import Observation
from domain.exceptions import (
    ComplexDataReadError,
    DomainError,
    InfrastructureError,
    StorageError,
    ValidationError,
)
from domain.value_objects import (
    ComplexData,
    ComplexDataState,
    ComplexView,
    MimeType,
    StoredBlobPointer,
)

__all__ = [
    "ComplexData",
    "ComplexDataReadError",
    "ComplexDataState",
    "ComplexView",
    "DomainError",
    "InfrastructureError",
    "MimeType",
    "Observation",
    "StorageError",
    "StoredBlobPointer",
    "ValidationError",
]
