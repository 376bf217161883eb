"""
Custom exceptions for the adoptapi application.

This module defines domain-specific exceptions that provide better error
categorization and more informative error messages for users and developers.

Unparseable assets, empty results and ambiguous binary requests are not
exceptional: they are represented as empty collections or as responses.
Only configuration and upstream fetch failures raise.
"""


class AdoptApiError(Exception):
    """
    Base exception for all adoptapi errors.

    All custom exceptions in adoptapi should inherit from this class
    to allow for easy catching of all application-specific errors.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """
        Initialize the exception.

        Args:
            message: The primary error message.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(AdoptApiError):
    """
    Exception raised when configuration is invalid or missing.

    This includes:
    - Invalid configuration values
    - Configuration file parsing errors
    """

    pass


class ConfigFileError(ConfigurationError):
    """Exception raised when configuration file cannot be read or parsed."""

    pass


class ConfigValidationError(ConfigurationError):
    """Exception raised when configuration validation fails."""

    pass


# =============================================================================
# Upstream Errors
# =============================================================================


class UpstreamError(AdoptApiError):
    """
    Base exception for failures while fetching release data upstream.

    Attributes:
        url: The URL that was being fetched when the error occurred.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message, details)
        self.url = url


class UpstreamInternalError(UpstreamError):
    """
    Exception raised for unexpected upstream failures.

    This includes:
    - Connection errors and timeouts
    - Responses that are not valid JSON
    - Payloads that are not a list of releases

    Reported to callers as a generic internal error.
    """

    pass


class UpstreamHTTPError(UpstreamError):
    """
    Exception raised when the upstream API answers with an HTTP error status.

    The status code is passed through to the caller unchanged.

    Attributes:
        status_code: The HTTP status code returned by the upstream API.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        url: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message, url, details)
        self.status_code = status_code
