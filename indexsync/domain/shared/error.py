"""Error hierarchy for indexsync.

Error layers:
- IndexSyncError: Base class for all indexsync errors
- DomainError: Business rule violations, invalid arguments
- InfrastructureError: Search backend or configuration failures

The CLI maps DomainError subclasses to a non-zero exit with a readable message.
"""


class IndexSyncError(Exception):
    """Base class for all indexsync errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(IndexSyncError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed (missing or malformed argument)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(IndexSyncError):
    """Base class for infrastructure/system errors."""


class ExternalServiceError(InfrastructureError):
    """External service is unavailable or failed."""


class SearchBackendError(ExternalServiceError):
    """The search backend rejected or failed a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, code="SEARCH_BACKEND_ERROR")
        self.status_code = status_code


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
