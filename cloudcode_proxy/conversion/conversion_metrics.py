"""Per-request conversion metrics.

Collected only when LOG_REQUEST_METRICS is enabled.
"""

import logging
from dataclasses import dataclass

from cloudcode_proxy.core.constants import Constants
from cloudcode_proxy.models.anthropic import AnthropicMessagesRequest


@dataclass(frozen=True)
class RequestConversionMetrics:
    model: str
    message_count: int
    content_block_count: int
    tool_count: int
    tool_result_count: int
    image_count: int
    has_system: bool
    thinking_enabled: bool


def collect_request_metrics(request: AnthropicMessagesRequest) -> RequestConversionMetrics:
    block_count = 0
    tool_results = 0
    images = 0
    for msg in request.messages:
        if isinstance(msg.content, list):
            block_count += len(msg.content)
            for block in msg.content:
                if block.type == Constants.CONTENT_TOOL_RESULT:
                    tool_results += 1
                elif block.type == Constants.CONTENT_IMAGE:
                    images += 1
        elif msg.content:
            block_count += 1

    return RequestConversionMetrics(
        model=request.model,
        message_count=len(request.messages),
        content_block_count=block_count,
        tool_count=len(request.tools or []),
        tool_result_count=tool_results,
        image_count=images,
        has_system=bool(request.system),
        thinking_enabled=bool(
            request.thinking and request.thinking.type == Constants.THINKING_ENABLED
        ),
    )


def log_request_metrics(logger: logging.Logger, metrics: RequestConversionMetrics) -> None:
    logger.info(
        f"📊 CONVERT | model={metrics.model} | messages={metrics.message_count} | "
        f"blocks={metrics.content_block_count} | tools={metrics.tool_count} | "
        f"tool_results={metrics.tool_result_count} | images={metrics.image_count} | "
        f"system={metrics.has_system} | thinking={metrics.thinking_enabled}"
    )
