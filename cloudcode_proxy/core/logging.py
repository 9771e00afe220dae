import logging
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

logger = logging.getLogger(__name__)

# Request-scoped correlation id (thread- and task-local)
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Return the correlation id of the current context, if any."""
    return _correlation_id.get()


class ConversationLogger:
    """Logger with correlation ID support"""

    @staticmethod
    def get_logger() -> logging.Logger:
        return logging.getLogger("conversation")

    @staticmethod
    @contextmanager
    def correlation_context(request_id: str) -> Generator[None, None, None]:
        """Bind ``request_id`` to every record logged inside the block.

        The id lives in a ContextVar, so concurrent blocks on other threads
        or tasks never see each other's id.
        """
        token = _correlation_id.set(request_id)
        try:
            yield
        finally:
            _correlation_id.reset(token)


class CorrelationFilter(logging.Filter):
    """Attach the current correlation id to records that do not carry one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "correlation_id", None) is None:
            record.correlation_id = _correlation_id.get()
        return True


class CorrelationFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            # Drop the shared "agent-" prefix so the short id stays distinctive
            short_id = correlation_id.removeprefix("agent-")[:8]
            return f"[{short_id}] {super().format(record)}"
        return super().format(record)


def resolve_log_level(raw_level: str) -> str:
    """Extract the first word of a LOG_LEVEL value, defaulting to INFO."""
    parts = (raw_level or "").split()
    level = parts[0].upper() if parts else ""
    return level if level in VALID_LOG_LEVELS else "INFO"


def configure_root_logging(log_level: str | None = None) -> None:
    """Install the correlation-aware handler on the root logger.

    Args:
        log_level: Level name; defaults to the configured LOG_LEVEL.
    """
    if log_level is None:
        from cloudcode_proxy.core.config import get_config

        log_level = get_config().log_level

    level = resolve_log_level(log_level)

    handler = logging.StreamHandler()
    handler.addFilter(CorrelationFilter())
    handler.setFormatter(
        CorrelationFormatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s", datefmt="%H:%M:%S")
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level))

    logger.debug(f"Logging configured at {level}")


conversation_logger = ConversationLogger.get_logger()
