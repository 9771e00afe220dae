"""Model identifier classification.

Classifies a model identifier into a coarse family and detects thinking
variants. Unknown identifiers degrade to ``ModelFamily.UNKNOWN`` instead of
failing so that new models still get usable (non-specialized) headers.
"""

import logging
import re
from enum import Enum

logger = logging.getLogger(__name__)

_GEMINI_VERSION_RE = re.compile(r"gemini-(\d+)")


class ModelFamily(str, Enum):
    """Model families known to the Cloud Code backend."""

    CLAUDE = "claude"
    GEMINI = "gemini"
    UNKNOWN = "unknown"


def get_model_family(model: str | None) -> ModelFamily:
    """Classify a model identifier (case-insensitive substring match)."""
    lower = (model or "").lower()
    if "claude" in lower:
        return ModelFamily.CLAUDE
    if "gemini" in lower:
        return ModelFamily.GEMINI
    logger.debug(f"Unrecognized model '{model}', classifying as {ModelFamily.UNKNOWN.value}")
    return ModelFamily.UNKNOWN


def is_thinking_model(model: str | None) -> bool:
    """Return True when the model supports extended, interleaved reasoning output.

    Claude models are thinking variants only when their identifier says so.
    Gemini models are thinking variants when named so or when their major
    version is 3 or later.
    """
    lower = (model or "").lower()
    family = get_model_family(lower)

    if family is ModelFamily.CLAUDE:
        return "thinking" in lower

    if family is ModelFamily.GEMINI:
        if "thinking" in lower:
            return True
        match = _GEMINI_VERSION_RE.search(lower)
        return bool(match and int(match.group(1)) >= 3)

    return False
