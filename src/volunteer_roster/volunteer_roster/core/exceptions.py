class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when a bearer token is missing or cannot be verified."""


class AuthorizationError(DomainError):
    """Raised when a verified identity is not allowed to perform an action."""


class ConfigurationError(Exception):
    """Raised when a required setting (credentials, ids, URLs) is missing."""


class UpstreamError(Exception):
    """Raised when the spreadsheet backend or the published export fails."""


class RangeNotFoundError(UpstreamError):
    """Raised when a requested sheet or range does not exist."""
