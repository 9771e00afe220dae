"""Header templates for Cloud Code API requests.

Building the header set is identical for every request against the same
model family and response encoding, so templates are built once per
``HeaderCacheKey`` and shared read-only afterwards. The only per-call part,
``Authorization``, is merged in after lookup and never stored.
"""

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import NamedTuple

from cloudcode_proxy.core.constants import CloudCode
from cloudcode_proxy.core.model_family import ModelFamily, get_model_family, is_thinking_model

logger = logging.getLogger(__name__)

BASE_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Content-Type": CloudCode.CONTENT_TYPE,
        **CloudCode.CLIENT_HEADERS,
    }
)


class HeaderCacheKey(NamedTuple):
    """Composite cache key.

    ``family_tag`` is the Claude-thinking tag when the model is a Claude
    thinking variant, else the model family value.
    """

    family_tag: str
    accept: str

    @classmethod
    def for_model(cls, model: str, accept: str = CloudCode.DEFAULT_ACCEPT) -> "HeaderCacheKey":
        family = get_model_family(model)
        if family is ModelFamily.CLAUDE and is_thinking_model(model):
            return cls(CloudCode.CLAUDE_THINKING_TAG, accept)
        return cls(family.value, accept)

    @property
    def interleaved_thinking(self) -> bool:
        return self.family_tag == CloudCode.CLAUDE_THINKING_TAG


def build_header_template(key: HeaderCacheKey) -> Mapping[str, str]:
    """Build the immutable header template for ``key`` (pure function of the key)."""
    template = dict(BASE_HEADERS)

    if key.interleaved_thinking:
        template[CloudCode.INTERLEAVED_THINKING_HEADER] = CloudCode.INTERLEAVED_THINKING_VALUE

    if key.accept != CloudCode.DEFAULT_ACCEPT:
        template["Accept"] = key.accept

    return MappingProxyType(template)


class HeaderTemplateCache:
    """Append-only cache of header templates.

    Thread-safe: lookups that hit never take the lock; misses build under the
    lock so every caller observes the same template object for a key. There
    is no eviction, the key space is bounded by the model families in use.
    """

    def __init__(self) -> None:
        self._templates: dict[HeaderCacheKey, Mapping[str, str]] = {}
        self._lock = threading.Lock()

    def get_template(self, model: str, accept: str = CloudCode.DEFAULT_ACCEPT) -> Mapping[str, str]:
        """Return the cached template for ``model``/``accept``, building it on a miss."""
        key = HeaderCacheKey.for_model(model, accept)

        template = self._templates.get(key)
        if template is not None:
            return template

        with self._lock:
            template = self._templates.get(key)
            if template is None:
                template = build_header_template(key)
                self._templates[key] = template
                logger.debug(f"Built header template for {key.family_tag}:{key.accept}")
        return template

    def build_headers(
        self, token: str, model: str, accept: str = CloudCode.DEFAULT_ACCEPT
    ) -> dict[str, str]:
        """Return a fresh header dict: ``Authorization`` plus the cached template."""
        template = self.get_template(model, accept)
        return {"Authorization": f"Bearer {token}", **template}

    def keys(self) -> list[HeaderCacheKey]:
        return list(self._templates)

    def clear(self) -> None:
        with self._lock:
            self._templates.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __len__(self) -> int:
        return len(self._templates)
