"""Cloud Code v1internal request envelope."""

from dataclasses import dataclass
from typing import Any

from cloudcode_proxy.core.constants import CloudCode


@dataclass(frozen=True)
class CloudCodeEnvelope:
    """The fully assembled backend payload.

    Attributes:
        project: Cloud Code project id the request is billed to.
        model: Model identifier exactly as the client sent it.
        request: The Gemini-dialect request body (contents, systemInstruction, ...).
        request_id: ``agent-<uuid4>`` token used only for backend-side tracing.
        user_agent: Fixed caller identity.
        request_type: Fixed request kind.
    """

    project: str
    model: str
    request: dict[str, Any]
    request_id: str
    user_agent: str = CloudCode.USER_AGENT
    request_type: str = CloudCode.REQUEST_TYPE

    @property
    def session_id(self) -> str | None:
        return self.request.get("sessionId")

    def to_dict(self) -> dict[str, Any]:
        """Wire representation with the backend's field names."""
        return {
            "project": self.project,
            "model": self.model,
            "request": self.request,
            "userAgent": self.user_agent,
            "requestType": self.request_type,
            "requestId": self.request_id,
        }
