"""Tool schema transformer.

Converts Claude tool definitions to Gemini function declarations.
"""

import dataclasses

from cloudcode_proxy.conversion.pipeline.base import ConversionContext, RequestTransformer
from cloudcode_proxy.conversion.schema_cleaner import EMPTY_OBJECT_SCHEMA, clean_json_schema


class ToolSchemaTransformer(RequestTransformer):
    """Converts Claude tools to a single ``functionDeclarations`` tool entry.

    Input schemas are cleaned of JSON Schema keywords the backend rejects.
    Tools without a name are dropped.
    """

    def transform(self, context: ConversionContext) -> ConversionContext:
        tools = context.anthropic_request.tools
        if not tools:
            return context

        declarations = [
            {
                "name": tool.name,
                "description": tool.description or "",
                "parameters": clean_json_schema(tool.input_schema) or dict(EMPTY_OBJECT_SCHEMA),
            }
            for tool in tools
            if tool.name and tool.name.strip()
        ]

        if declarations:
            new_request = {**context.google_request, "tools": [{"functionDeclarations": declarations}]}
            return dataclasses.replace(context, google_request=new_request)

        return context
