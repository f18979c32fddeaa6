class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateKeyError(DomainError):
    """Raised when a record with the same key already exists."""


class NotFoundError(DomainError):
    """Raised when the requested record does not exist."""


class PersistenceError(DomainError):
    """Raised when the attendance document cannot be written to disk."""
