class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a referenced candidate (or other record) does not exist."""


class DuplicateEntryError(DomainError):
    """Raised when a unique ledger entry (e.g. attendance for a day) already exists."""
