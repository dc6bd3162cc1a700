class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateEmail(ValidationError):
    """Raised when an e-mail address already belongs to another account."""


class WeakPassword(ValidationError):
    """Raised when a password is shorter than the allowed minimum."""


class AuthenticationError(DomainError):
    """Raised when login fails."""


class InvalidCredentials(AuthenticationError):
    """Raised when no verified account matches the given e-mail and password."""


class NotFound(DomainError):
    """Raised when a referenced record does not exist."""


class StorageError(DomainError):
    """Raised when the persisted document cannot be written."""
