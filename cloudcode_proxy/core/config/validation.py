"""Type coercion and validation utilities for configuration loading.

Errors are raised with clear messages to help users fix configuration issues.
"""

import os
from typing import Any

from cloudcode_proxy.core.config.schema import ConfigSchema, EnvVarSpec
from cloudcode_proxy.core.error_types import ErrorType
from cloudcode_proxy.core.exceptions import CloudCodeProxyError


class ConfigError(CloudCodeProxyError):
    """Configuration validation error.

    Attributes:
        env_var: The environment variable name
        value: The raw value that failed validation
        message: Human-readable error message
    """

    error_type = ErrorType.CONFIG_ERROR

    def __init__(self, env_var: str, value: str, message: str) -> None:
        self.env_var = env_var
        self.value = value
        self.message = message
        super().__init__(f"{env_var}={value}: {message}")


def _parse_bool(value: str) -> bool:
    """True if value is "true", "1", "yes", or "on" (case-insensitive)."""
    return value.lower() in ("true", "1", "yes", "on")


def load_env_var(spec: EnvVarSpec) -> Any:
    """Load and validate a single environment variable.

    Args:
        spec: Environment variable specification from ConfigSchema

    Returns:
        Validated and coerced value, or the spec default when unset

    Raises:
        ConfigError: If validation fails or type conversion is impossible
    """
    raw_value = os.environ.get(spec.name)

    if raw_value is None:
        return spec.default

    try:
        if spec.coerce is not None:
            value = spec.coerce(raw_value)
        elif spec.type_hint is bool:
            value = _parse_bool(raw_value)
        elif spec.type_hint is int:
            value = int(raw_value)
        elif spec.type_hint is float:
            value = float(raw_value)
        else:
            value = raw_value
    except (ValueError, TypeError) as e:
        raise ConfigError(
            spec.name,
            raw_value,
            f"Cannot convert to {spec.type_hint.__name__}: {e}",
        ) from e

    if spec.validator is not None:
        try:
            valid = spec.validator(value)
        except (TypeError, IndexError) as e:
            raise ConfigError(spec.name, raw_value, f"Validation error: {e}") from e
        if not valid:
            raise ConfigError(
                spec.name,
                raw_value,
                f"Validation failed for type {spec.type_hint.__name__}",
            )

    return value


def validate_all() -> list[ConfigError]:
    """Validate all environment variables and return any errors.

    Example:
        errors = validate_all()
        if errors:
            for error in errors:
                print(f"Configuration error: {error}")
            sys.exit(1)
    """
    errors: list[ConfigError] = []
    for spec in ConfigSchema.all_specs().values():
        try:
            load_env_var(spec)
        except ConfigError as e:
            errors.append(e)
    return errors
