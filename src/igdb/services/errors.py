"""Error types raised by the IGDB client.

This module provides:
- A base exception carrying a category and optional call-site context
- Validation errors raised before any request is sent
- Response errors for empty or undecodable payloads
- Network and API errors wrapping transport failures
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(Enum):
    """Categories of errors for classification and handling."""
    VALIDATION = "validation"
    NO_RESULTS = "no_results"
    MALFORMED_RESPONSE = "malformed_response"
    NETWORK = "network"
    CONFIGURATION = "configuration"


@dataclass(frozen=True)
class ErrorContext:
    """Context information for an error."""
    operation: str
    component: str
    details: dict[str, Any] = field(default_factory=dict)

    def describe(self) -> str:
        """Render the context the way call sites phrase it."""
        return f"cannot {self.operation} {self.component}"


class IGDBError(Exception):
    """Base exception class for client errors."""

    default_message = "igdb: unexpected error"
    category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str | None = None,
        technical_details: str | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.technical_details = technical_details
        self.context = context
        super().__init__(self.message)

    def with_context(self, context: ErrorContext) -> "IGDBError":
        """Attach call-site context, keeping the exception type."""
        self.context = context
        return self

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        return f"{self.context.describe()}: {self.message}"


class ValidationError(IGDBError):
    """Exception for invalid arguments detected before a request is sent."""

    default_message = "igdb: invalid argument"
    category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        technical_details = None
        if field:
            technical_details = f"Field: {field}"
        if value is not None:
            value_str = str(value)[:100]
            technical_details = (technical_details or "") + f"\nValue: {value_str}"

        super().__init__(message, technical_details=technical_details)
        self.field = field
        self.value = value


class NegativeIDError(ValidationError):
    default_message = "igdb: negative ID"


class EmptyIDsError(ValidationError):
    default_message = "igdb: empty IDs"


class EmptyQueryError(ValidationError):
    default_message = "igdb.Option: query value empty"


class OutOfRangeError(ValidationError):
    default_message = "igdb.Option: value out of range"


class EmptyFieldError(ValidationError):
    default_message = "igdb.Option: field empty"


class EmptyFilterValueError(ValidationError):
    default_message = "igdb.Option: filter value empty"


class TooManyArgsError(ValidationError):
    default_message = "igdb.Option: too many arguments"


class BlankImageIDError(ValidationError):
    default_message = "igdb: id value empty"


class PixelRatioError(ValidationError):
    default_message = "igdb: invalid display pixel ratio"


class MissingFieldsError(ValidationError):
    """Raised when a model lacks fields the remote schema reports."""

    default_message = "igdb: missing model fields"

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"missing model fields: {', '.join(missing)}")
        self.missing = missing


class NoResultsError(IGDBError):
    """The response decoded successfully but contained zero entities."""

    default_message = "igdb: no results"
    category = ErrorCategory.NO_RESULTS


class MalformedResponseError(IGDBError):
    """The response body could not be parsed as JSON."""

    default_message = "igdb: invalid JSON"
    category = ErrorCategory.MALFORMED_RESPONSE


class NetworkError(IGDBError):
    """Exception for transport-level failures."""

    default_message = "igdb: network error"
    category = ErrorCategory.NETWORK

    def __init__(
        self,
        message: str | None = None,
        original_error: Exception | None = None,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        technical_details = None
        if original_error:
            technical_details = f"{type(original_error).__name__}: {str(original_error)}"
        if url:
            technical_details = f"URL: {url}" + (f"\n{technical_details}" if technical_details else "")
        if status_code:
            technical_details = f"Status: {status_code}" + (f"\n{technical_details}" if technical_details else "")

        super().__init__(message, technical_details=technical_details)
        self.original_error = original_error
        self.url = url
        self.status_code = status_code


class APIError(NetworkError):
    """The API answered with a non-200 status."""

    default_message = "igdb: API error"

    def __init__(self, status_code: int, detail: str = "", url: str | None = None) -> None:
        message = f"Status {status_code}"
        if detail:
            message += f" - {detail}"
        super().__init__(message, url=url, status_code=status_code)
        self.detail = detail


class ConfigurationError(IGDBError):
    """Exception for configuration-related errors."""

    default_message = "igdb: invalid configuration"
    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str | None = None, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        technical_details = "\n".join(self.errors) if self.errors else None
        super().__init__(message, technical_details=technical_details)


def convert_http_error(error: httpx.HTTPError, url: str | None = None) -> NetworkError:
    """Convert an httpx exception into a NetworkError."""
    if isinstance(error, httpx.ConnectError):
        message = "unable to connect to the server"
    elif isinstance(error, httpx.TimeoutException):
        message = "the request timed out"
    else:
        message = "a network error occurred"
    return NetworkError(message=message, original_error=error, url=url)
