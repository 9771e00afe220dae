"""Stable session identifiers for backend-side prompt caching.

A session id groups the requests of one logical conversation. It is a
content fingerprint of the conversation's first user message, so retries
and continuations of the same conversation map to the same id, in this and
in any other process.
"""

import hashlib
import json
from collections.abc import Mapping
from typing import Any

from cloudcode_proxy.core.constants import Constants
from cloudcode_proxy.models.anthropic import AnthropicMessage, AnthropicMessagesRequest

SESSION_ID_LENGTH = 32


def derive_session_id(request: AnthropicMessagesRequest | Mapping[str, Any]) -> str:
    """Derive the session id of a Claude request.

    Hashes the text of the first user message with SHA-256. Requests without
    any user text fall back to a digest of the whole message list, so the
    result is always deterministic.
    """
    if not isinstance(request, AnthropicMessagesRequest):
        from cloudcode_proxy.conversion import coerce_anthropic_request

        request = coerce_anthropic_request(request)

    first_user_text = _first_user_text(request.messages)
    if first_user_text is not None:
        return _digest(first_user_text)

    canonical = json.dumps(
        [msg.model_dump(mode="json", exclude_none=True) for msg in request.messages],
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return _digest(canonical)


def _first_user_text(messages: list[AnthropicMessage]) -> str | None:
    for msg in messages:
        if msg.role != Constants.ROLE_USER:
            continue
        if isinstance(msg.content, str):
            if msg.content:
                return msg.content
            continue
        if isinstance(msg.content, list):
            texts = [
                block.text
                for block in msg.content
                if block.type == Constants.CONTENT_TEXT and block.text
            ]
            if texts:
                return "\n".join(texts)
    return None


def _digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:SESSION_ID_LENGTH]
