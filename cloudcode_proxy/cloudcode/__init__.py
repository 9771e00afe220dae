"""Cloud Code envelope and header construction."""

from cloudcode_proxy.cloudcode.headers import HeaderCacheKey, HeaderTemplateCache
from cloudcode_proxy.cloudcode.instructions import compose_system_instruction
from cloudcode_proxy.cloudcode.request_builder import (
    CloudCodeRequestBuilder,
    build_cloudcode_request,
    build_headers,
    generate_request_id,
)

__all__ = [
    "CloudCodeRequestBuilder",
    "HeaderCacheKey",
    "HeaderTemplateCache",
    "build_cloudcode_request",
    "build_headers",
    "compose_system_instruction",
    "generate_request_id",
]
