"""Declarative schema for environment variable configuration.

Single source of truth for every environment variable the proxy reads,
including type coercion and validation rules.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class EnvVarSpec:
    """Specification for a single environment variable.

    Attributes:
        name: Environment variable name (e.g., "LOG_LEVEL")
        default: Default value if env var not set
        type_hint: Type for validation (int, str, float, bool)
        description: Human-readable description for docs
        validator: Optional custom validation function
        coerce: Optional function to convert string to target type
    """

    name: str
    default: Any
    type_hint: type
    description: str
    validator: Callable[[Any], bool] | None = None
    coerce: Callable[[str], Any] | None = None


class ConfigSchema:
    """Registry of all configuration environment variables."""

    # === Logging ===

    LOG_LEVEL = EnvVarSpec(
        name="LOG_LEVEL",
        default="INFO",
        type_hint=str,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        validator=lambda x: x.split()[0].upper() in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )

    LOG_REQUEST_METRICS = EnvVarSpec(
        name="LOG_REQUEST_METRICS",
        default=False,
        type_hint=bool,
        description="Log per-request conversion metrics",
    )

    # === Cloud Code envelope ===

    CLOUDCODE_PROJECT_ID = EnvVarSpec(
        name="CLOUDCODE_PROJECT_ID",
        default=None,
        type_hint=str,
        description="Project id used when the caller does not pass one explicitly",
    )

    # === Generation limits ===

    MAX_OUTPUT_TOKENS_LIMIT = EnvVarSpec(
        name="MAX_OUTPUT_TOKENS_LIMIT",
        default=64000,
        type_hint=int,
        description="Upper bound applied to maxOutputTokens",
        validator=lambda x: x > 0,
    )

    THINKING_OUTPUT_HEADROOM = EnvVarSpec(
        name="THINKING_OUTPUT_HEADROOM",
        default=8192,
        type_hint=int,
        description="Output tokens reserved above the thinking budget",
        validator=lambda x: x >= 0,
    )

    @classmethod
    def all_specs(cls) -> dict[str, EnvVarSpec]:
        """Get all environment variable specifications."""
        return {
            name: getattr(cls, name)
            for name in dir(cls)
            if isinstance(getattr(cls, name), EnvVarSpec)
        }
