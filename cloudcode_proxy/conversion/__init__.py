"""Claude -> Gemini request conversion."""

from cloudcode_proxy.conversion.request_converter import (
    coerce_anthropic_request,
    convert_anthropic_to_google,
)

__all__ = ["coerce_anthropic_request", "convert_anthropic_to_google"]
