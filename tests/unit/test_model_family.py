import pytest

from cloudcode_proxy.core.model_family import ModelFamily, get_model_family, is_thinking_model


@pytest.mark.unit
class TestGetModelFamily:
    @pytest.mark.parametrize(
        "model,expected",
        [
            ("claude-sonnet-4-5", ModelFamily.CLAUDE),
            ("Claude-Opus-4-5-Thinking", ModelFamily.CLAUDE),
            ("gemini-2.5-flash", ModelFamily.GEMINI),
            ("gemini-3-pro-high", ModelFamily.GEMINI),
            ("gpt-oss-120b", ModelFamily.UNKNOWN),
        ],
    )
    def test_classifies_by_substring(self, model, expected):
        assert get_model_family(model) is expected

    def test_unknown_and_empty_identifiers_fall_back(self):
        assert get_model_family("") is ModelFamily.UNKNOWN
        assert get_model_family(None) is ModelFamily.UNKNOWN


@pytest.mark.unit
class TestIsThinkingModel:
    def test_claude_requires_thinking_suffix(self):
        assert is_thinking_model("claude-sonnet-4-5-thinking") is True
        assert is_thinking_model("claude-sonnet-4-5") is False

    def test_gemini_thinking_by_name(self):
        assert is_thinking_model("gemini-2.5-flash-thinking") is True
        assert is_thinking_model("gemini-2.5-flash") is False

    def test_gemini_three_and_later_always_think(self):
        assert is_thinking_model("gemini-3-pro-high") is True
        assert is_thinking_model("gemini-3-flash") is True

    def test_unknown_models_never_think(self):
        assert is_thinking_model("mystery-thinking-model") is False
        assert is_thinking_model(None) is False
