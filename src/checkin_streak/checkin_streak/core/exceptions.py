class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConcurrentUpdateError(DomainError):
    """Raised when a stored record keeps changing under a read-modify-write cycle."""
