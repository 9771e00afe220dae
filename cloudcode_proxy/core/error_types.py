"""Error type enumeration for Cloud Code Proxy.

Provides type-safe error categorization for raised errors and log lines.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type categories.

    These error types are used for:
    - CloudCodeProxyError.error_type
    - Error log lines, so callers can tell a bad request shape apart
      from transport-level failures raised outside this package
    """

    # Request shape errors
    CONVERSION_FAILURE = "conversion_failure"  # Source request cannot be mapped
    BAD_REQUEST = "bad_request"  # Invalid caller input other than the request body

    # Environment errors
    CONFIG_ERROR = "config_error"  # Environment variable failed validation

    # Catch-all
    UNEXPECTED_ERROR = "unexpected_error"  # Unhandled/unexpected error
