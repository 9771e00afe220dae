"""Request and envelope models."""

from cloudcode_proxy.models.anthropic import (
    AnthropicContentBlock,
    AnthropicMessage,
    AnthropicMessagesRequest,
    AnthropicSystemContent,
    AnthropicThinkingConfig,
    AnthropicTool,
)
from cloudcode_proxy.models.envelope import CloudCodeEnvelope

__all__ = [
    "AnthropicContentBlock",
    "AnthropicMessage",
    "AnthropicMessagesRequest",
    "AnthropicSystemContent",
    "AnthropicThinkingConfig",
    "AnthropicTool",
    "CloudCodeEnvelope",
]
