class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a requested attendance record does not exist."""


class UpstreamError(DomainError):
    """Raised when the attendance history API fails or returns garbage."""


class NotConfiguredError(DomainError):
    """Raised when no attendance history API is configured."""
