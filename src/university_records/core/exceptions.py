class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidArgumentError(ValidationError):
    """Raised when an argument is unusable for the requested operation."""


class OutOfRangeError(ValidationError):
    """Raised when a numeric value falls outside its allowed bounds."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class SubjectNotFoundError(NotFoundError):
    """Raised when marks are entered for a subject with no scheduled exam."""
