"""Request pipeline factory.

Builds the default request conversion pipeline with all transformers.
"""

from cloudcode_proxy.conversion.pipeline.base import RequestPipeline, RequestTransformer
from cloudcode_proxy.conversion.pipeline.transformers.generation_config import (
    GenerationConfigTransformer,
)
from cloudcode_proxy.conversion.pipeline.transformers.message_content import (
    MessageContentTransformer,
)
from cloudcode_proxy.conversion.pipeline.transformers.system_instruction import (
    SystemInstructionTransformer,
)
from cloudcode_proxy.conversion.pipeline.transformers.thinking_config import (
    ThinkingConfigTransformer,
)
from cloudcode_proxy.conversion.pipeline.transformers.tool_choice import ToolChoiceTransformer
from cloudcode_proxy.conversion.pipeline.transformers.tool_schema import ToolSchemaTransformer


class RequestPipelineFactory:
    """Factory for creating request conversion pipelines."""

    @staticmethod
    def create_default() -> RequestPipeline:
        """Create the default request conversion pipeline.

        Transformers are executed in the following order:
        1. SystemInstructionTransformer - system -> systemInstruction
        2. MessageContentTransformer - messages -> contents
        3. GenerationConfigTransformer - sampling parameters and token limit
        4. ThinkingConfigTransformer - thinking budget (needs maxOutputTokens)
        5. ToolSchemaTransformer - tools -> functionDeclarations
        6. ToolChoiceTransformer - tool_choice -> toolConfig
        """
        transformers: list[RequestTransformer] = [
            SystemInstructionTransformer(),
            MessageContentTransformer(),
            GenerationConfigTransformer(),
            ThinkingConfigTransformer(),
            ToolSchemaTransformer(),
            ToolChoiceTransformer(),
        ]
        return RequestPipeline(transformers)

    @staticmethod
    def create_custom(transformers: list[RequestTransformer]) -> RequestPipeline:
        return RequestPipeline(transformers)
