"""System instruction transformer.

Converts Claude's system parameter to Gemini's systemInstruction.
"""

import dataclasses

from cloudcode_proxy.conversion.pipeline.base import ConversionContext, RequestTransformer
from cloudcode_proxy.conversion.request_converter import extract_system_texts


class SystemInstructionTransformer(RequestTransformer):
    """Converts the Claude system parameter to a systemInstruction object.

    Claude accepts system as:
    - str: Direct text content
    - list[AnthropicSystemContent]: Structured blocks with type="text"

    Each non-empty text block becomes one part, in order. The value is
    provisional: the envelope builder replaces it with the composed
    instruction and forces its role.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        texts = extract_system_texts(context.anthropic_request.system)
        if not texts:
            return context

        system_instruction = {"parts": [{"text": text} for text in texts]}
        new_request = {**context.google_request, "systemInstruction": system_instruction}
        return dataclasses.replace(context, google_request=new_request)
