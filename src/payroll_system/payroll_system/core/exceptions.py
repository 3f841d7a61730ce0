class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced worker or record does not exist."""


class ConfigurationError(DomainError):
    """Raised when stored data cannot be mapped onto a pay rule."""
