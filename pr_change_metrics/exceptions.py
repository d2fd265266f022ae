"""Exceptions raised while collecting and presenting PR metrics."""

from typing import Optional


class MetricsError(Exception):
    """Base exception for all PR metrics errors."""
    pass


class ConfigError(MetricsError):
    """Raised when a required configuration value is missing or invalid."""
    pass


class AuthError(MetricsError):
    """Raised when the API rejects the token or the viewer cannot be resolved."""
    pass


class AccessError(MetricsError):
    """Raised when the target repository is not accessible with the token."""
    pass


class GraphError(MetricsError):
    """Raised when the GraphQL API reports errors in its response."""

    def __init__(self, message: str, error_type: Optional[str] = None, errors: Optional[list] = None):
        """Initialize GraphQL error.

        Args:
            message: First error message reported by the API
            error_type: GraphQL error type (e.g. 'NOT_FOUND') if reported
            errors: Full list of errors from the response
        """
        super().__init__(message)
        self.error_type = error_type
        self.errors = errors or []


class NetworkError(MetricsError):
    """Raised on transport failures, timeouts and unexpected HTTP statuses."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ReportWriteError(MetricsError):
    """Raised when the metrics artifact cannot be written."""
    pass


class LoadError(MetricsError):
    """Raised when the metrics artifact is missing, malformed or not an object."""
    pass
