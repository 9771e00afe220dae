"""Request conversion transformers.

Each transformer handles a single, focused transformation of the request.
Transformers are executed in sequence by the RequestPipeline.
"""

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

__all__ = [
    "SystemInstructionTransformer",
    "MessageContentTransformer",
    "GenerationConfigTransformer",
    "ThinkingConfigTransformer",
    "ToolSchemaTransformer",
    "ToolChoiceTransformer",
]
