import dataclasses

import pytest

from cloudcode_proxy.conversion.pipeline import (
    ConversionContext,
    RequestPipelineFactory,
    RequestTransformer,
)
from cloudcode_proxy.conversion.request_converter import _build_initial_context
from cloudcode_proxy.core.exceptions import ConversionError
from cloudcode_proxy.core.model_family import ModelFamily
from cloudcode_proxy.models.anthropic import AnthropicMessagesRequest


class MarkerTransformer(RequestTransformer):
    def __init__(self, marker: str) -> None:
        self.marker = marker

    def transform(self, context: ConversionContext) -> ConversionContext:
        markers = [*context.google_request.get("markers", []), self.marker]
        return dataclasses.replace(context, google_request={**context.google_request, "markers": markers})


class FailingTransformer(RequestTransformer):
    def transform(self, context: ConversionContext) -> ConversionContext:
        raise ConversionError("boom", field="messages")


@pytest.fixture
def context():
    request = AnthropicMessagesRequest.model_validate(
        {"model": "gemini-2.5-flash", "messages": [{"role": "user", "content": "hi"}]}
    )
    return _build_initial_context(request)


@pytest.mark.unit
def test_initial_context_classifies_model(context):
    assert context.model == "gemini-2.5-flash"
    assert context.model_family is ModelFamily.GEMINI
    assert context.thinking_model is False
    assert context.google_request == {"contents": []}


@pytest.mark.unit
def test_context_is_frozen(context):
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.model = "other"  # type: ignore[misc]


@pytest.mark.unit
def test_custom_pipeline_runs_in_order(context):
    pipeline = RequestPipelineFactory.create_custom([MarkerTransformer("a"), MarkerTransformer("b")])
    result = pipeline.execute(context)

    assert result["markers"] == ["a", "b"]
    assert context.google_request == {"contents": []}


@pytest.mark.unit
def test_transformer_failure_is_reraised(context, caplog):
    pipeline = RequestPipelineFactory.create_custom([MarkerTransformer("a"), FailingTransformer()])

    with caplog.at_level("ERROR"), pytest.raises(ConversionError, match="boom"):
        pipeline.execute(context)

    assert "FailingTransformer failed" in caplog.text


@pytest.mark.unit
def test_default_pipeline_order():
    names = [t.name for t in RequestPipelineFactory.create_default().transformers]
    assert names == [
        "SystemInstructionTransformer",
        "MessageContentTransformer",
        "GenerationConfigTransformer",
        "ThinkingConfigTransformer",
        "ToolSchemaTransformer",
        "ToolChoiceTransformer",
    ]


@pytest.mark.unit
def test_default_pipeline_converts_context(context):
    result = RequestPipelineFactory.create_default().execute(context)
    assert result == {"contents": [{"role": "user", "parts": [{"text": "hi"}]}]}
