"""Schema-driven configuration loaded from environment variables."""

from cloudcode_proxy.core.config.config import Config, get_config
from cloudcode_proxy.core.config.validation import ConfigError, validate_all

__all__ = ["Config", "ConfigError", "get_config", "validate_all"]
