"""Wire constants for the Claude Messages API and the Cloud Code backend.

Header names, header values and envelope constants are tied to a specific
backend protocol revision and must match byte-for-byte.
"""

import json
import platform
import sys


def _platform_tag() -> str:
    """Return the ``<os>/<arch>`` pair reported in the User-Agent header."""
    os_name = {"win32": "windows", "darwin": "darwin"}.get(sys.platform, "linux")
    machine = platform.machine().lower()
    arch = {"x86_64": "x64", "amd64": "x64", "aarch64": "arm64"}.get(machine, machine or "x64")
    return f"{os_name}/{arch}"


class Constants:
    # Roles
    ROLE_USER = "user"
    ROLE_ASSISTANT = "assistant"
    ROLE_MODEL = "model"

    # Claude content block types
    CONTENT_TEXT = "text"
    CONTENT_IMAGE = "image"
    CONTENT_DOCUMENT = "document"
    CONTENT_TOOL_USE = "tool_use"
    CONTENT_TOOL_RESULT = "tool_result"
    CONTENT_THINKING = "thinking"
    CONTENT_REDACTED_THINKING = "redacted_thinking"

    # Claude tool_choice types
    TOOL_CHOICE_AUTO = "auto"
    TOOL_CHOICE_ANY = "any"
    TOOL_CHOICE_NONE = "none"
    TOOL_CHOICE_TOOL = "tool"

    # Gemini function calling modes
    FUNCTION_CALLING_AUTO = "AUTO"
    FUNCTION_CALLING_ANY = "ANY"
    FUNCTION_CALLING_NONE = "NONE"

    THINKING_ENABLED = "enabled"


class CloudCode:
    """Constants for the Cloud Code v1internal envelope and headers."""

    CLIENT_VERSION = "1.11.5"

    # Envelope
    USER_AGENT = "antigravity"
    REQUEST_TYPE = "agent"
    REQUEST_ID_PREFIX = "agent-"

    # Headers
    DEFAULT_ACCEPT = "application/json"
    CONTENT_TYPE = "application/json"
    INTERLEAVED_THINKING_HEADER = "anthropic-beta"
    INTERLEAVED_THINKING_VALUE = "interleaved-thinking-2025-05-14"

    # Header template cache tag for Claude thinking models (wins over the family tag)
    CLAUDE_THINKING_TAG = "claude-thinking"

    CLIENT_HEADERS = {
        "User-Agent": f"antigravity/{CLIENT_VERSION} {_platform_tag()}",
        "X-Goog-Api-Client": "google-cloud-sdk vscode_cloudshelleditor/0.1",
        "Client-Metadata": json.dumps(
            {
                "ideType": "IDE_UNSPECIFIED",
                "platform": "PLATFORM_UNSPECIFIED",
                "pluginType": "GEMINI",
            },
            separators=(",", ":"),
        ),
    }

    SYSTEM_INSTRUCTION = (
        "You are Antigravity, a powerful agentic AI coding assistant designed by the "
        "Google Deepmind team working on Advanced Agentic Coding.You are pair programming "
        "with a USER to solve their coding task. The task may require creating a new "
        "codebase, modifying or debugging an existing codebase, or simply answering a "
        "question.**Absolute paths only****Proactiveness**"
    )

    # Role forced onto systemInstruction for envelope compatibility
    SYSTEM_INSTRUCTION_ROLE = "user"
