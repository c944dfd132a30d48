"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (filesystem, network, etc.)."""


class StorageError(InfrastructureError):
    """Raised when complex data cannot be written to the storage root.

    The observation's pointer field is left untouched when this is raised.
    """


class ComplexDataReadError(InfrastructureError):
    """Raised when stored complex data cannot be read back."""
