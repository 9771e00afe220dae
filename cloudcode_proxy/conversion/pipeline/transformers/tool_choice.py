"""Tool choice transformer.

Maps Claude's tool_choice to Gemini's toolConfig.
"""

import dataclasses
from typing import Any

from cloudcode_proxy.conversion.pipeline.base import ConversionContext, RequestTransformer
from cloudcode_proxy.core.constants import Constants
from cloudcode_proxy.core.exceptions import ConversionError


class ToolChoiceTransformer(RequestTransformer):
    """Converts Claude tool_choice to ``toolConfig.functionCallingConfig``.

    Claude types -> Gemini modes:
    - "auto" -> AUTO
    - "any" -> ANY
    - "none" -> NONE
    - "tool" (with name) -> ANY restricted to ``allowedFunctionNames``
    """

    _MODES = {
        Constants.TOOL_CHOICE_AUTO: Constants.FUNCTION_CALLING_AUTO,
        Constants.TOOL_CHOICE_ANY: Constants.FUNCTION_CALLING_ANY,
        Constants.TOOL_CHOICE_NONE: Constants.FUNCTION_CALLING_NONE,
    }

    def transform(self, context: ConversionContext) -> ConversionContext:
        tool_choice = context.anthropic_request.tool_choice
        if not tool_choice:
            return context

        choice_type = tool_choice.get("type")
        calling_config: dict[str, Any]

        if choice_type in self._MODES:
            calling_config = {"mode": self._MODES[choice_type]}
        elif choice_type == Constants.TOOL_CHOICE_TOOL:
            name = tool_choice.get("name")
            if not name:
                raise ConversionError("tool_choice of type 'tool' requires a name", field="tool_choice.name")
            calling_config = {"mode": Constants.FUNCTION_CALLING_ANY, "allowedFunctionNames": [name]}
        else:
            raise ConversionError(f"unsupported tool_choice type {choice_type!r}", field="tool_choice.type")

        new_request = {
            **context.google_request,
            "toolConfig": {"functionCallingConfig": calling_config},
        }
        return dataclasses.replace(context, google_request=new_request)
