class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when caller input is invalid (wage, payload fields, period)."""


class ConfigurationError(DomainError):
    """Raised when pay rules are inconsistent or cannot be loaded."""
