"""Pydantic models for the Claude Messages API request dialect."""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class AnthropicContentBlockText(BaseModel):
    type: Literal["text"]
    text: str


class AnthropicContentBlockImage(BaseModel):
    type: Literal["image"]
    source: dict[str, Any]


class AnthropicContentBlockDocument(BaseModel):
    type: Literal["document"]
    source: dict[str, Any]


class AnthropicContentBlockToolUse(BaseModel):
    type: Literal["tool_use"]
    id: str
    name: str
    input: dict[str, Any] = Field(default_factory=dict)


class AnthropicContentBlockToolResult(BaseModel):
    type: Literal["tool_result"]
    tool_use_id: str
    content: Union[str, list[dict[str, Any]], dict[str, Any], None] = None
    is_error: bool | None = None


class AnthropicContentBlockThinking(BaseModel):
    type: Literal["thinking"]
    thinking: str
    signature: str | None = None


class AnthropicContentBlockRedactedThinking(BaseModel):
    type: Literal["redacted_thinking"]
    data: str


AnthropicContentBlock = Union[
    AnthropicContentBlockText,
    AnthropicContentBlockImage,
    AnthropicContentBlockDocument,
    AnthropicContentBlockToolUse,
    AnthropicContentBlockToolResult,
    AnthropicContentBlockThinking,
    AnthropicContentBlockRedactedThinking,
]


class AnthropicSystemContent(BaseModel):
    type: Literal["text"]
    text: str


class AnthropicMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: Union[str, list[AnthropicContentBlock], None] = None


class AnthropicTool(BaseModel):
    name: str
    description: str | None = None
    input_schema: dict[str, Any] = Field(default_factory=dict)


class AnthropicThinkingConfig(BaseModel):
    type: Literal["enabled", "disabled"] = "enabled"
    budget_tokens: int | None = None


class AnthropicMessagesRequest(BaseModel):
    """A Claude Messages API request as received from the client.

    Unknown fields are accepted and ignored so that newer clients keep working.
    """

    model_config = ConfigDict(extra="allow")

    model: str
    max_tokens: int | None = None
    messages: list[AnthropicMessage]
    system: Union[str, list[AnthropicSystemContent], None] = None
    stop_sequences: list[str] | None = None
    stream: bool | None = None
    temperature: float | None = None
    top_p: float | None = None
    top_k: int | None = None
    metadata: dict[str, Any] | None = None
    tools: list[AnthropicTool] | None = None
    tool_choice: dict[str, Any] | None = None
    thinking: AnthropicThinkingConfig | None = None
