"""Base infrastructure for the request conversion pipeline.

This module defines the core components of the pipeline:
- ConversionContext: Immutable context passed through transformers
- RequestTransformer: Abstract base for all transformation steps
- RequestPipeline: Orchestrator that executes transformers in sequence
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import Any

from cloudcode_proxy.core.model_family import ModelFamily
from cloudcode_proxy.models.anthropic import AnthropicMessagesRequest


@dataclasses.dataclass(frozen=True)
class ConversionContext:
    """Immutable context passed through the conversion pipeline.

    Attributes:
        anthropic_request: The original Claude request (never mutated).
        model: The model identifier the request targets.
        model_family: Classification of ``model``.
        thinking_model: Whether ``model`` is a thinking variant.
        tool_names_by_id: tool_use id -> tool name, for functionResponse naming.
        google_request: The Gemini request being built (replaced by each transformer).
        metadata: Optional metadata for debugging and extensibility.
    """

    anthropic_request: AnthropicMessagesRequest
    model: str
    model_family: ModelFamily
    thinking_model: bool
    tool_names_by_id: dict[str, str]
    google_request: dict[str, Any]
    metadata: dict[str, Any] = dataclasses.field(default_factory=dict)


class RequestTransformer(ABC):
    """Base class for all request transformation steps.

    Transformers must not mutate the input context; they return a new
    ConversionContext built with ``dataclasses.replace()``.
    """

    @abstractmethod
    def transform(self, context: ConversionContext) -> ConversionContext:
        """Transform the context and return a new instance."""

    @property
    def name(self) -> str:
        """Human-readable name for logging and debugging."""
        return self.__class__.__name__


class RequestPipeline:
    """Executes transformers in order, feeding each the previous output."""

    def __init__(self, transformers: list[RequestTransformer]) -> None:
        self.transformers = transformers
        self.logger = logging.getLogger(f"{__name__}.RequestPipeline")

    def execute(self, initial_context: ConversionContext) -> dict[str, Any]:
        """Execute all transformers and return the final Gemini request.

        Raises:
            Exception: If any transformer fails. The failure is logged with the
                transformer's name and re-raised unchanged.
        """
        context = initial_context

        for i, transformer in enumerate(self.transformers):
            self.logger.debug(
                f"Running transformer [{i + 1}/{len(self.transformers)}]: {transformer.name}"
            )
            try:
                context = transformer.transform(context)
            except Exception as e:
                self.logger.error(f"Transformer {transformer.name} failed: {e}")
                raise

        self.logger.debug(f"Pipeline completed: {len(self.transformers)} transformers executed")
        return context.google_request
