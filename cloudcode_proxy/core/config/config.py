"""Configuration singleton for Cloud Code Proxy.

Direct property access to configuration values, organized into:
- logging: log level, request metrics logging
- request: default project id, generation limits
"""

from cloudcode_proxy.core.config.settings import LoggingSettings, RequestSettings


class Config:
    """Configuration with direct access to all settings.

    All values are loaded at initialization time from environment variables
    using schema-based validation.
    """

    def __init__(self) -> None:
        self._logging = LoggingSettings.load()
        self._request = RequestSettings.load()

    # Logging settings
    @property
    def log_level(self) -> str:
        return self._logging.log_level.split()[0].upper()

    @property
    def log_request_metrics(self) -> bool:
        return self._logging.log_request_metrics

    # Request settings
    @property
    def project_id(self) -> str | None:
        return self._request.project_id

    @property
    def max_output_tokens_limit(self) -> int:
        return self._request.max_output_tokens_limit

    @property
    def thinking_output_headroom(self) -> int:
        return self._request.thinking_output_headroom

    @classmethod
    def reset_singleton(cls) -> None:
        """Reset the global config singleton for test isolation.

        The next get_config() call reloads from the (modified) environment.

        WARNING: Never call this in production code!
        """
        global _config
        _config = None


# Module-level singleton, created by get_config() on first access
_config: Config | None = None


def get_config() -> Config:
    """Return the process-wide config, loading it on first use.

    Raises:
        ConfigError: If an environment variable fails validation
    """
    global _config
    if _config is None:
        _config = Config()
    return _config
