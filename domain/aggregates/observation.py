from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from domain.value_objects.blob_pointer import StoredBlobPointer
from domain.value_objects.complex_data import ComplexData
from domain.value_objects.complex_data_state import ComplexDataState


@dataclass
class Observation:
    """Observation record carrying a complex (non-scalar) value.

    ``value_complex`` holds the persisted pointer string; ``complex_data`` holds
    the in-memory payload while it is materialized.
    """

    obs_id: UUID = field(default_factory=uuid4)
    value_complex: str | None = None
    complex_data: ComplexData | None = None

    @property
    def state(self) -> ComplexDataState:
        if self.complex_data is not None:
            return ComplexDataState.MATERIALIZED
        if self.value_complex:
            return ComplexDataState.PERSISTED
        return ComplexDataState.EMPTY

    @property
    def pointer(self) -> StoredBlobPointer | None:
        if not self.value_complex:
            return None
        return StoredBlobPointer.parse(self.value_complex)
