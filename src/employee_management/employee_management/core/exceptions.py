class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class ConflictError(DomainError):
    """Raised when a unique value (e.g. username) is already taken."""


class NotFoundError(DomainError):
    """Raised when a referenced user or record does not exist."""


class IOFailure(DomainError):
    """Raised when an uploaded file cannot be written to disk."""
