"""Message content transformer.

Converts Claude messages to Gemini contents.
"""

import dataclasses
import logging
from typing import Any

from cloudcode_proxy.conversion.pipeline.base import ConversionContext, RequestTransformer
from cloudcode_proxy.conversion.request_converter import convert_message_parts
from cloudcode_proxy.core.constants import Constants
from cloudcode_proxy.core.model_family import ModelFamily

logger = logging.getLogger(__name__)


class MessageContentTransformer(RequestTransformer):
    """Converts Claude messages to Gemini ``contents``.

    Key complexities:
    - Roles: assistant -> model, user -> user (tool results stay with the user)
    - Tool results need the tool name, resolved from the earlier tool_use id
    - Claude models behind the backend require ids on function calls/responses
    - Messages that produce no parts are skipped; the backend rejects them
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        include_ids = context.model_family is ModelFamily.CLAUDE
        contents: list[dict[str, Any]] = []

        for i, msg in enumerate(context.anthropic_request.messages):
            parts = convert_message_parts(msg, context.tool_names_by_id, include_ids)
            if not parts:
                logger.warning(f"Message from role {msg.role} at index {i} produced no parts. Skipping.")
                continue

            role = Constants.ROLE_MODEL if msg.role == Constants.ROLE_ASSISTANT else Constants.ROLE_USER
            contents.append({"role": role, "parts": parts})

        new_request = {**context.google_request, "contents": contents}
        return dataclasses.replace(context, google_request=new_request)
