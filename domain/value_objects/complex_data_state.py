from enum import Enum


class ComplexDataState(str, Enum):
    """Enumerate where an observation's complex data currently lives."""

    EMPTY = "EMPTY"
    PERSISTED = "PERSISTED"
    MATERIALIZED = "MATERIALIZED"
