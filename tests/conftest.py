"""Shared pytest configuration and fixtures for Cloud Code Proxy tests."""

import pytest

from cloudcode_proxy.cloudcode import CloudCodeRequestBuilder, HeaderTemplateCache
from cloudcode_proxy.core.config import Config

CONFIG_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_REQUEST_METRICS",
    "CLOUDCODE_PROJECT_ID",
    "MAX_OUTPUT_TOKENS_LIMIT",
    "THINKING_OUTPUT_HEADROOM",
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast, no external deps)")


def pytest_collection_modifyitems(config, items):
    """Every test in this suite is a unit test."""
    for item in items:
        item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Start every test from default configuration, whatever the shell exports."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    Config.reset_singleton()
    yield
    Config.reset_singleton()


@pytest.fixture
def set_env(monkeypatch):
    """Set environment variables and reload the config singleton."""

    def _set(**values):
        for name, value in values.items():
            monkeypatch.setenv(name, str(value))
        Config.reset_singleton()

    return _set


@pytest.fixture
def header_cache():
    return HeaderTemplateCache()


@pytest.fixture
def builder(header_cache):
    return CloudCodeRequestBuilder(header_cache=header_cache)


@pytest.fixture
def simple_request():
    return {
        "model": "claude-sonnet-4-5-thinking",
        "max_tokens": 1024,
        "messages": [{"role": "user", "content": "hello"}],
    }


@pytest.fixture
def tool_conversation():
    """A Claude conversation with one completed tool call."""
    return {
        "model": "claude-sonnet-4-5",
        "max_tokens": 2048,
        "system": [
            {"type": "text", "text": "You are a careful assistant."},
            {"type": "text", "text": "Prefer short answers."},
        ],
        "messages": [
            {"role": "user", "content": "What's the weather in Paris?"},
            {
                "role": "assistant",
                "content": [
                    {"type": "text", "text": "Let me check."},
                    {
                        "type": "tool_use",
                        "id": "toolu_01",
                        "name": "get_weather",
                        "input": {"city": "Paris"},
                    },
                ],
            },
            {
                "role": "user",
                "content": [
                    {
                        "type": "tool_result",
                        "tool_use_id": "toolu_01",
                        "content": [{"type": "text", "text": "18C, cloudy"}],
                    }
                ],
            },
        ],
        "tools": [
            {
                "name": "get_weather",
                "description": "Current weather for a city",
                "input_schema": {
                    "$schema": "http://json-schema.org/draft-07/schema#",
                    "type": "object",
                    "properties": {"city": {"type": "string", "title": "City"}},
                    "required": ["city"],
                    "additionalProperties": False,
                },
            }
        ],
    }
