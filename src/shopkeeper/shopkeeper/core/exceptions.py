class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class AssistantError(Exception):
    """Base exception for the external text-generation call."""


class ConfigurationError(AssistantError):
    """Raised when no credentials are configured for the assistant."""


class ServiceError(AssistantError):
    """Raised when the external service fails, times out or answers garbage."""
