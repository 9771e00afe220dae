"""Configuration sections loaded from the environment.

- LoggingConfig: log level and request metrics logging
- RequestConfig: envelope defaults and generation limits
"""

from dataclasses import dataclass

from cloudcode_proxy.core.config.schema import ConfigSchema
from cloudcode_proxy.core.config.validation import load_env_var


@dataclass(frozen=True)
class LoggingConfig:
    log_level: str
    log_request_metrics: bool


@dataclass(frozen=True)
class RequestConfig:
    """Settings consumed while converting and wrapping requests.

    Attributes:
        project_id: Default Cloud Code project id (None when unset)
        max_output_tokens_limit: Upper bound for maxOutputTokens
        thinking_output_headroom: Output tokens added above a thinking budget
    """

    project_id: str | None
    max_output_tokens_limit: int
    thinking_output_headroom: int


class LoggingSettings:
    @staticmethod
    def load() -> LoggingConfig:
        return LoggingConfig(
            log_level=load_env_var(ConfigSchema.LOG_LEVEL),
            log_request_metrics=load_env_var(ConfigSchema.LOG_REQUEST_METRICS),
        )


class RequestSettings:
    @staticmethod
    def load() -> RequestConfig:
        """Load request settings using schema-based validation.

        Raises:
            ConfigError: If any environment variable fails validation
        """
        return RequestConfig(
            project_id=load_env_var(ConfigSchema.CLOUDCODE_PROJECT_ID) or None,
            max_output_tokens_limit=load_env_var(ConfigSchema.MAX_OUTPUT_TOKENS_LIMIT),
            thinking_output_headroom=load_env_var(ConfigSchema.THINKING_OUTPUT_HEADROOM),
        )
