"""Request conversion pipeline.

A composable pipeline for converting Claude API requests to the Gemini
request dialect. Each transformer handles a single responsibility.
"""

from cloudcode_proxy.conversion.pipeline.base import (
    ConversionContext,
    RequestPipeline,
    RequestTransformer,
)
from cloudcode_proxy.conversion.pipeline.factory import RequestPipelineFactory

__all__ = ["ConversionContext", "RequestPipeline", "RequestTransformer", "RequestPipelineFactory"]
