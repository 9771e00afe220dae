import json
import logging
import mimetypes
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from pydantic import ValidationError

from cloudcode_proxy.conversion.conversion_metrics import (
    collect_request_metrics,
)
from cloudcode_proxy.conversion.conversion_metrics import (
    log_request_metrics as log_request_metrics_impl,
)
from cloudcode_proxy.core.config import get_config
from cloudcode_proxy.core.constants import Constants
from cloudcode_proxy.core.exceptions import ConversionError
from cloudcode_proxy.core.logging import ConversationLogger
from cloudcode_proxy.core.model_family import get_model_family, is_thinking_model
from cloudcode_proxy.models.anthropic import (
    AnthropicContentBlockDocument,
    AnthropicContentBlockImage,
    AnthropicContentBlockText,
    AnthropicContentBlockThinking,
    AnthropicContentBlockToolResult,
    AnthropicContentBlockToolUse,
    AnthropicMessage,
    AnthropicMessagesRequest,
    AnthropicSystemContent,
)

if TYPE_CHECKING:
    from cloudcode_proxy.conversion.pipeline.base import ConversionContext

conversation_logger = ConversationLogger.get_logger()

logger = logging.getLogger(__name__)


def coerce_anthropic_request(
    request: AnthropicMessagesRequest | Mapping[str, Any],
) -> AnthropicMessagesRequest:
    """Return ``request`` as a validated AnthropicMessagesRequest.

    Raises:
        ConversionError: If a mapping does not describe a valid Claude request.
    """
    if isinstance(request, AnthropicMessagesRequest):
        return request
    if not isinstance(request, Mapping):
        raise ConversionError(f"expected a Claude request object, got {type(request).__name__}")
    try:
        return AnthropicMessagesRequest.model_validate(dict(request))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first.get("loc", ())) or None
        raise ConversionError(first.get("msg", str(e)), field=field) from e


def convert_anthropic_to_google(
    anthropic_request: AnthropicMessagesRequest | Mapping[str, Any],
) -> dict[str, Any]:
    """Convert a Claude Messages API request to the Gemini request dialect.

    The source request is not mutated; a fresh dict is returned on every call.
    Any ``systemInstruction`` in the result is provisional: the envelope
    builder always replaces it.

    Raises:
        ConversionError: If the request is structurally invalid or unsupported.
    """
    request = coerce_anthropic_request(anthropic_request)
    _validate_request(request)

    if get_config().log_request_metrics:
        metrics = collect_request_metrics(request)
        log_request_metrics_impl(conversation_logger, metrics)

    context = _build_initial_context(request)

    from cloudcode_proxy.conversion.pipeline import RequestPipelineFactory

    pipeline = RequestPipelineFactory.create_default()
    return pipeline.execute(context)


def _validate_request(request: AnthropicMessagesRequest) -> None:
    if not request.model or not request.model.strip():
        raise ConversionError("a model identifier is required", field="model")
    if not request.messages:
        raise ConversionError("at least one message is required", field="messages")


def _build_initial_context(request: AnthropicMessagesRequest) -> "ConversionContext":
    from cloudcode_proxy.conversion.pipeline.base import ConversionContext

    return ConversionContext(
        anthropic_request=request,
        model=request.model,
        model_family=get_model_family(request.model),
        thinking_model=is_thinking_model(request.model),
        tool_names_by_id=collect_tool_names_by_id(request.messages),
        google_request={"contents": []},
    )


def collect_tool_names_by_id(messages: list[AnthropicMessage]) -> dict[str, str]:
    """Map every tool_use id in the conversation to its tool name."""
    names: dict[str, str] = {}
    for msg in messages:
        if not isinstance(msg.content, list):
            continue
        for block in msg.content:
            if block.type == Constants.CONTENT_TOOL_USE:
                tool_block = cast(AnthropicContentBlockToolUse, block)
                names[tool_block.id] = tool_block.name
    return names


def extract_system_texts(system: str | list[AnthropicSystemContent] | None) -> list[str]:
    """Return the non-empty text segments of a Claude system parameter, in order."""
    if not system:
        return []
    if isinstance(system, str):
        return [system] if system.strip() else []
    return [block.text for block in system if block.type == Constants.CONTENT_TEXT and block.text.strip()]


def convert_message_parts(
    msg: AnthropicMessage,
    tool_names_by_id: dict[str, str],
    include_tool_ids: bool = False,
) -> list[dict[str, Any]]:
    """Convert the content of one Claude message to Gemini parts."""
    if msg.content is None:
        return []

    if isinstance(msg.content, str):
        return [{"text": msg.content}] if msg.content else []

    parts: list[dict[str, Any]] = []
    for block in msg.content:
        if block.type == Constants.CONTENT_TEXT:
            text_block = cast(AnthropicContentBlockText, block)
            if text_block.text:
                parts.append({"text": text_block.text})
        elif block.type in (Constants.CONTENT_IMAGE, Constants.CONTENT_DOCUMENT):
            media_block = cast(AnthropicContentBlockImage | AnthropicContentBlockDocument, block)
            media_part = convert_media_source(media_block.source)
            if media_part is not None:
                parts.append(media_part)
            else:
                logger.warning(f"Skipping {block.type} block with unsupported source: {media_block.source.get('type')}")
        elif block.type == Constants.CONTENT_TOOL_USE:
            tool_block = cast(AnthropicContentBlockToolUse, block)
            function_call: dict[str, Any] = {"name": tool_block.name, "args": tool_block.input}
            if include_tool_ids:
                function_call["id"] = tool_block.id
            parts.append({"functionCall": function_call})
        elif block.type == Constants.CONTENT_TOOL_RESULT:
            result_block = cast(AnthropicContentBlockToolResult, block)
            parts.extend(convert_tool_result(result_block, tool_names_by_id, include_tool_ids))
        elif block.type == Constants.CONTENT_THINKING:
            thinking_block = cast(AnthropicContentBlockThinking, block)
            # The backend rejects thought parts it cannot verify
            if thinking_block.signature and thinking_block.thinking:
                parts.append(
                    {
                        "text": thinking_block.thinking,
                        "thought": True,
                        "thoughtSignature": thinking_block.signature,
                    }
                )
            else:
                logger.debug("Dropping unsigned thinking block")
        # redacted_thinking carries nothing the backend can use

    return parts


def convert_media_source(source: dict[str, Any]) -> dict[str, Any] | None:
    """Convert an image/document source to an inlineData, fileData or text part."""
    source_type = source.get("type")
    if source_type == "base64" and "media_type" in source and "data" in source:
        return {"inlineData": {"mimeType": source["media_type"], "data": source["data"]}}
    if source_type == "url" and source.get("url"):
        url = source["url"]
        mime_type = source.get("media_type") or mimetypes.guess_type(url)[0] or "application/octet-stream"
        return {"fileData": {"mimeType": mime_type, "fileUri": url}}
    if source_type == "text" and source.get("data"):
        return {"text": source["data"]}
    return None


def convert_tool_result(
    block: AnthropicContentBlockToolResult,
    tool_names_by_id: dict[str, str],
    include_tool_ids: bool = False,
) -> list[dict[str, Any]]:
    """Convert a tool_result block to a functionResponse part plus any image parts.

    Raises:
        ConversionError: If no earlier tool_use carries ``block.tool_use_id``.
    """
    name = tool_names_by_id.get(block.tool_use_id)
    if name is None:
        raise ConversionError(
            f"tool_result references unknown tool_use id {block.tool_use_id!r}",
            field="messages.content.tool_use_id",
        )

    function_response: dict[str, Any] = {
        "name": name,
        "response": {"result": parse_tool_result_content(block.content)},
    }
    if include_tool_ids:
        function_response["id"] = block.tool_use_id

    parts: list[dict[str, Any]] = [{"functionResponse": function_response}]

    # Images returned by tools travel as sibling inlineData parts
    if isinstance(block.content, list):
        for item in block.content:
            if isinstance(item, dict) and item.get("type") == Constants.CONTENT_IMAGE:
                image_part = convert_media_source(item.get("source") or {})
                if image_part is not None:
                    parts.append(image_part)

    return parts


def parse_tool_result_content(content: Any) -> str:
    """Parse and normalize tool result content into a string."""
    if content is None:
        return ""

    if isinstance(content, str):
        return content

    if isinstance(content, list):
        result_parts = []
        for item in content:
            if isinstance(item, str):
                result_parts.append(item)
            elif isinstance(item, dict):
                if item.get("type") == Constants.CONTENT_IMAGE:
                    continue
                if "text" in item:
                    result_parts.append(item.get("text", ""))
                else:
                    result_parts.append(json.dumps(item, ensure_ascii=False))
        return "\n".join(result_parts).strip()

    if isinstance(content, dict):
        if content.get("type") == Constants.CONTENT_TEXT:
            return cast(str, content.get("text", ""))
        return json.dumps(content, ensure_ascii=False)

    return str(content)
