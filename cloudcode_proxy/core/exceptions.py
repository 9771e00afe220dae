"""
Exception hierarchy for Cloud Code Proxy.

All exceptions inherit from CloudCodeProxyError, allowing callers to
catch every package-specific error with a single except clause.

Example:
    >>> try:
    ...     builder.build_envelope(request, "my-project")
    ... except ConversionError as e:
    ...     print(f"Bad request shape: {e}")
"""

from __future__ import annotations

from cloudcode_proxy.core.error_types import ErrorType


class CloudCodeProxyError(Exception):
    """Base exception for all Cloud Code Proxy errors."""

    error_type: ErrorType = ErrorType.UNEXPECTED_ERROR


class ConversionError(CloudCodeProxyError):
    """Raised when a Claude request cannot be mapped to the Gemini dialect.

    Attributes:
        field: Dotted path of the offending field, when known
        message: Human-readable explanation of the failure

    Example:
        >>> convert_anthropic_to_google({"model": "claude-sonnet-4-5", "messages": []})
        ConversionError: Invalid 'messages': at least one message is required
    """

    error_type = ErrorType.CONVERSION_FAILURE

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        self.message = message
        if field:
            super().__init__(f"Invalid {field!r}: {message}")
        else:
            super().__init__(message)

    def __repr__(self) -> str:
        return f"ConversionError(field={self.field!r}, message={self.message!r})"


class InvalidRequestError(CloudCodeProxyError, ValueError):
    """Raised for invalid caller input outside the request body.

    Example: building an envelope without a project id. Subclasses
    ValueError so callers validating arguments can catch it generically.
    """

    error_type = ErrorType.BAD_REQUEST
