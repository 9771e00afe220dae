"""Generation config transformer.

Maps Claude sampling parameters to Gemini's generationConfig and clamps
max_tokens to the configured limit.
"""

import dataclasses
from typing import Any

from cloudcode_proxy.conversion.pipeline.base import ConversionContext, RequestTransformer


class GenerationConfigTransformer(RequestTransformer):
    """Builds ``generationConfig`` from the optional Claude fields.

    - max_tokens -> maxOutputTokens (clamped to MAX_OUTPUT_TOKENS_LIMIT)
    - temperature -> temperature
    - top_p -> topP
    - top_k -> topK
    - stop_sequences -> stopSequences
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        # Import config lazily so tests that reset it are honoured
        from cloudcode_proxy.core.config import get_config

        request = context.anthropic_request
        generation_config: dict[str, Any] = dict(context.google_request.get("generationConfig", {}))

        if request.max_tokens is not None:
            generation_config["maxOutputTokens"] = min(
                request.max_tokens, get_config().max_output_tokens_limit
            )
        if request.temperature is not None:
            generation_config["temperature"] = request.temperature
        if request.top_p is not None:
            generation_config["topP"] = request.top_p
        if request.top_k is not None:
            generation_config["topK"] = request.top_k
        if request.stop_sequences:
            generation_config["stopSequences"] = list(request.stop_sequences)

        if not generation_config:
            return context

        new_request = {**context.google_request, "generationConfig": generation_config}
        return dataclasses.replace(context, google_request=new_request)
