"""Request builder for the Cloud Code API.

Builds request envelopes and headers for the Cloud Code v1internal API:
- convert the Claude request to the Gemini dialect
- attach a stable session id for backend-side cache continuity
- compose the system instruction (anti identity-leak pair first)
- wrap everything in an envelope with a fresh request id

Header sets come from a per-builder HeaderTemplateCache.
"""

import logging
import uuid
from collections.abc import Callable, Mapping
from typing import Any

from cloudcode_proxy.cloudcode.headers import HeaderTemplateCache
from cloudcode_proxy.cloudcode.instructions import compose_system_instruction
from cloudcode_proxy.conversion import coerce_anthropic_request, convert_anthropic_to_google
from cloudcode_proxy.core.config import get_config
from cloudcode_proxy.core.constants import CloudCode
from cloudcode_proxy.core.exceptions import InvalidRequestError
from cloudcode_proxy.core.logging import ConversationLogger
from cloudcode_proxy.models.anthropic import AnthropicMessagesRequest
from cloudcode_proxy.models.envelope import CloudCodeEnvelope
from cloudcode_proxy.session import derive_session_id

logger = logging.getLogger(__name__)

AnthropicRequestLike = AnthropicMessagesRequest | Mapping[str, Any]


def generate_request_id() -> str:
    """Return a new ``agent-<uuid4>`` request id."""
    return f"{CloudCode.REQUEST_ID_PREFIX}{uuid.uuid4()}"


class CloudCodeRequestBuilder:
    """Builds Cloud Code envelopes and headers.

    Collaborators are injectable for testing. Each builder owns its header
    template cache; the only state shared between calls is that cache.
    """

    def __init__(
        self,
        header_cache: HeaderTemplateCache | None = None,
        converter: Callable[[AnthropicMessagesRequest], dict[str, Any]] = convert_anthropic_to_google,
        session_id_deriver: Callable[[AnthropicMessagesRequest], str] = derive_session_id,
        request_id_factory: Callable[[], str] = generate_request_id,
    ) -> None:
        self.header_cache = header_cache if header_cache is not None else HeaderTemplateCache()
        self._convert = converter
        self._derive_session_id = session_id_deriver
        self._new_request_id = request_id_factory

    def build_envelope(
        self, anthropic_request: AnthropicRequestLike, project_id: str | None = None
    ) -> CloudCodeEnvelope:
        """Build the wrapped request body for the Cloud Code API.

        Args:
            anthropic_request: The Claude request (model instance or mapping).
            project_id: Cloud Code project id; defaults to CLOUDCODE_PROJECT_ID.

        Returns:
            A complete envelope. Nothing is returned on failure.

        Raises:
            ConversionError: If the request cannot be converted.
            InvalidRequestError: If no project id is given or configured.
        """
        project = project_id or get_config().project_id
        if not project:
            raise InvalidRequestError("project_id is required (pass it or set CLOUDCODE_PROJECT_ID)")

        request = coerce_anthropic_request(anthropic_request)
        request_id = self._new_request_id()

        with ConversationLogger.correlation_context(request_id):
            google_request = self._convert(request)
            google_request = {**google_request, "sessionId": self._derive_session_id(request)}
            google_request = compose_system_instruction(google_request)

            logger.debug(
                f"Built envelope for model={request.model} project={project} "
                f"session={google_request['sessionId']} "
                f"system_parts={len(google_request['systemInstruction']['parts'])}"
            )

        return CloudCodeEnvelope(
            project=project,
            model=request.model,
            request=google_request,
            request_id=request_id,
        )

    def build_headers(
        self, token: str, model: str, accept: str = CloudCode.DEFAULT_ACCEPT
    ) -> dict[str, str]:
        """Build headers for a Cloud Code API request.

        Args:
            token: OAuth access token, only ever placed in ``Authorization``.
            model: Model identifier.
            accept: Accept header value (default: application/json, omitted).
        """
        return self.header_cache.build_headers(token, model, accept)


request_builder = CloudCodeRequestBuilder()


def build_cloudcode_request(
    anthropic_request: AnthropicRequestLike, project_id: str | None = None
) -> CloudCodeEnvelope:
    """Build an envelope with the process-wide default builder."""
    return request_builder.build_envelope(anthropic_request, project_id)


def build_headers(token: str, model: str, accept: str = CloudCode.DEFAULT_ACCEPT) -> dict[str, str]:
    """Build headers with the process-wide default builder's template cache."""
    return request_builder.build_headers(token, model, accept)
