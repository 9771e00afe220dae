"""Thinking config transformer.

Maps Claude's extended thinking parameter onto the backend's thinking config.
"""

import dataclasses
import logging
from typing import Any

from cloudcode_proxy.conversion.pipeline.base import ConversionContext, RequestTransformer
from cloudcode_proxy.core.constants import Constants
from cloudcode_proxy.core.model_family import ModelFamily

logger = logging.getLogger(__name__)


class ThinkingConfigTransformer(RequestTransformer):
    """Adds the thinking config for thinking models that request it.

    The backend expects different shapes per family:
    - Claude: ``thinking_config: {include_thoughts, thinking_budget}``
    - Gemini: ``thinkingConfig: {includeThoughts, thinkingBudget}``

    The output budget must exceed the thinking budget, so maxOutputTokens is
    raised to ``budget + THINKING_OUTPUT_HEADROOM`` when it does not.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        thinking = context.anthropic_request.thinking
        if thinking is None or thinking.type != Constants.THINKING_ENABLED:
            return context

        if not context.thinking_model:
            logger.debug(f"Ignoring thinking parameter for non-thinking model {context.model}")
            return context

        from cloudcode_proxy.core.config import get_config

        budget = thinking.budget_tokens
        generation_config: dict[str, Any] = dict(context.google_request.get("generationConfig", {}))

        if context.model_family is ModelFamily.CLAUDE:
            thinking_config: dict[str, Any] = {"include_thoughts": True}
            if budget is not None:
                thinking_config["thinking_budget"] = budget
            generation_config["thinking_config"] = thinking_config
        else:
            thinking_config = {"includeThoughts": True}
            if budget is not None:
                thinking_config["thinkingBudget"] = budget
            generation_config["thinkingConfig"] = thinking_config

        max_output = generation_config.get("maxOutputTokens")
        if budget is not None and max_output is not None and max_output <= budget:
            adjusted = budget + get_config().thinking_output_headroom
            logger.debug(f"Raising maxOutputTokens from {max_output} to {adjusted} above thinking budget")
            generation_config["maxOutputTokens"] = adjusted

        new_request = {**context.google_request, "generationConfig": generation_config}
        return dataclasses.replace(context, google_request=new_request)
