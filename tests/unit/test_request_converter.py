import copy

import pytest

from cloudcode_proxy.conversion import convert_anthropic_to_google
from cloudcode_proxy.conversion.request_converter import parse_tool_result_content
from cloudcode_proxy.core.exceptions import ConversionError


def _request(model="claude-sonnet-4-5", **fields):
    return {"model": model, "messages": [{"role": "user", "content": "hi"}], **fields}


@pytest.mark.unit
class TestMessageConversion:
    def test_roles_are_mapped(self):
        result = convert_anthropic_to_google(
            _request(
                messages=[
                    {"role": "user", "content": "hi"},
                    {"role": "assistant", "content": "hello"},
                    {"role": "user", "content": "bye"},
                ]
            )
        )
        assert [c["role"] for c in result["contents"]] == ["user", "model", "user"]

    def test_tool_round_trip_for_claude_carries_ids(self, tool_conversation):
        contents = convert_anthropic_to_google(tool_conversation)["contents"]

        assert contents[1]["parts"] == [
            {"text": "Let me check."},
            {"functionCall": {"name": "get_weather", "args": {"city": "Paris"}, "id": "toolu_01"}},
        ]
        assert contents[2] == {
            "role": "user",
            "parts": [
                {
                    "functionResponse": {
                        "name": "get_weather",
                        "response": {"result": "18C, cloudy"},
                        "id": "toolu_01",
                    }
                }
            ],
        }

    def test_gemini_function_parts_have_no_ids(self, tool_conversation):
        tool_conversation["model"] = "gemini-2.5-pro"
        contents = convert_anthropic_to_google(tool_conversation)["contents"]
        assert "id" not in contents[1]["parts"][1]["functionCall"]
        assert "id" not in contents[2]["parts"][0]["functionResponse"]

    def test_unknown_tool_result_id_is_a_conversion_failure(self):
        request = _request(
            messages=[
                {
                    "role": "user",
                    "content": [{"type": "tool_result", "tool_use_id": "missing", "content": "x"}],
                }
            ]
        )
        with pytest.raises(ConversionError, match="unknown tool_use id"):
            convert_anthropic_to_google(request)

    def test_images_become_inline_data(self):
        request = _request(
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": "what is this?"},
                        {"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": "iVBOR"}},
                        {"type": "image", "source": {"type": "url", "url": "https://example.com/cat.jpg"}},
                    ],
                }
            ]
        )
        parts = convert_anthropic_to_google(request)["contents"][0]["parts"]
        assert parts[1] == {"inlineData": {"mimeType": "image/png", "data": "iVBOR"}}
        assert parts[2] == {"fileData": {"mimeType": "image/jpeg", "fileUri": "https://example.com/cat.jpg"}}

    def test_tool_result_images_follow_the_function_response(self):
        request = _request(
            messages=[
                {"role": "user", "content": "take a screenshot"},
                {
                    "role": "assistant",
                    "content": [{"type": "tool_use", "id": "t1", "name": "screenshot", "input": {}}],
                },
                {
                    "role": "user",
                    "content": [
                        {
                            "type": "tool_result",
                            "tool_use_id": "t1",
                            "content": [
                                {"type": "text", "text": "done"},
                                {"type": "image", "source": {"type": "base64", "media_type": "image/png", "data": "AA"}},
                            ],
                        }
                    ],
                },
            ]
        )
        parts = convert_anthropic_to_google(request)["contents"][2]["parts"]
        assert parts[0]["functionResponse"]["response"] == {"result": "done"}
        assert parts[1] == {"inlineData": {"mimeType": "image/png", "data": "AA"}}

    def test_signed_thinking_is_kept_and_unsigned_dropped(self):
        request = _request(
            model="claude-sonnet-4-5-thinking",
            messages=[
                {"role": "user", "content": "hi"},
                {
                    "role": "assistant",
                    "content": [
                        {"type": "thinking", "thinking": "pondering", "signature": "sig-1"},
                        {"type": "thinking", "thinking": "unsigned"},
                        {"type": "redacted_thinking", "data": "opaque"},
                        {"type": "text", "text": "answer"},
                    ],
                },
            ],
        )
        parts = convert_anthropic_to_google(request)["contents"][1]["parts"]
        assert parts == [
            {"text": "pondering", "thought": True, "thoughtSignature": "sig-1"},
            {"text": "answer"},
        ]

    def test_messages_without_parts_are_skipped(self):
        request = _request(
            messages=[
                {"role": "user", "content": "hi"},
                {"role": "assistant", "content": [{"type": "thinking", "thinking": "unsigned"}]},
                {"role": "user", "content": "still there?"},
            ]
        )
        contents = convert_anthropic_to_google(request)["contents"]
        assert [c["role"] for c in contents] == ["user", "user"]


@pytest.mark.unit
class TestSystemAndGenerationConfig:
    def test_system_string_becomes_single_part(self):
        result = convert_anthropic_to_google(_request(system="Be brief."))
        assert result["systemInstruction"] == {"parts": [{"text": "Be brief."}]}

    def test_blank_system_is_omitted(self):
        assert "systemInstruction" not in convert_anthropic_to_google(_request(system="   "))

    def test_sampling_parameters_are_mapped(self):
        result = convert_anthropic_to_google(
            _request(max_tokens=1000, temperature=0.2, top_p=0.9, top_k=40, stop_sequences=["END"])
        )
        assert result["generationConfig"] == {
            "maxOutputTokens": 1000,
            "temperature": 0.2,
            "topP": 0.9,
            "topK": 40,
            "stopSequences": ["END"],
        }

    def test_max_tokens_is_clamped(self, set_env):
        set_env(MAX_OUTPUT_TOKENS_LIMIT=4096)
        result = convert_anthropic_to_google(_request(max_tokens=100_000))
        assert result["generationConfig"]["maxOutputTokens"] == 4096

    def test_no_generation_config_without_parameters(self):
        assert "generationConfig" not in convert_anthropic_to_google(_request())


@pytest.mark.unit
class TestThinkingConfig:
    def test_claude_thinking_uses_snake_case(self):
        result = convert_anthropic_to_google(
            _request(
                model="claude-opus-4-5-thinking",
                max_tokens=32000,
                thinking={"type": "enabled", "budget_tokens": 16000},
            )
        )
        assert result["generationConfig"]["thinking_config"] == {
            "include_thoughts": True,
            "thinking_budget": 16000,
        }

    def test_gemini_thinking_uses_camel_case(self):
        result = convert_anthropic_to_google(
            _request(model="gemini-3-pro-high", thinking={"type": "enabled", "budget_tokens": 8000})
        )
        assert result["generationConfig"]["thinkingConfig"] == {
            "includeThoughts": True,
            "thinkingBudget": 8000,
        }

    def test_output_budget_is_raised_above_thinking_budget(self, set_env):
        set_env(THINKING_OUTPUT_HEADROOM=1000)
        result = convert_anthropic_to_google(
            _request(
                model="claude-opus-4-5-thinking",
                max_tokens=4000,
                thinking={"type": "enabled", "budget_tokens": 8000},
            )
        )
        assert result["generationConfig"]["maxOutputTokens"] == 9000

    def test_ignored_for_non_thinking_models(self):
        result = convert_anthropic_to_google(
            _request(model="claude-sonnet-4-5", thinking={"type": "enabled", "budget_tokens": 8000})
        )
        assert "generationConfig" not in result

    def test_disabled_thinking_is_ignored(self):
        result = convert_anthropic_to_google(
            _request(model="claude-opus-4-5-thinking", thinking={"type": "disabled"})
        )
        assert "generationConfig" not in result


@pytest.mark.unit
class TestTools:
    def test_tools_become_cleaned_function_declarations(self, tool_conversation):
        tools = convert_anthropic_to_google(tool_conversation)["tools"]
        assert tools == [
            {
                "functionDeclarations": [
                    {
                        "name": "get_weather",
                        "description": "Current weather for a city",
                        "parameters": {
                            "type": "object",
                            "properties": {"city": {"type": "string"}},
                            "required": ["city"],
                        },
                    }
                ]
            }
        ]

    def test_tool_without_schema_gets_empty_object(self):
        result = convert_anthropic_to_google(_request(tools=[{"name": "ping"}]))
        declaration = result["tools"][0]["functionDeclarations"][0]
        assert declaration["parameters"] == {"type": "object", "properties": {}}
        assert declaration["description"] == ""

    @pytest.mark.parametrize(
        "tool_choice,expected",
        [
            ({"type": "auto"}, {"mode": "AUTO"}),
            ({"type": "any"}, {"mode": "ANY"}),
            ({"type": "none"}, {"mode": "NONE"}),
            ({"type": "tool", "name": "ping"}, {"mode": "ANY", "allowedFunctionNames": ["ping"]}),
        ],
    )
    def test_tool_choice_mapping(self, tool_choice, expected):
        result = convert_anthropic_to_google(_request(tools=[{"name": "ping"}], tool_choice=tool_choice))
        assert result["toolConfig"] == {"functionCallingConfig": expected}

    def test_unsupported_tool_choice_fails(self):
        with pytest.raises(ConversionError, match="unsupported tool_choice"):
            convert_anthropic_to_google(_request(tool_choice={"type": "sometimes"}))


@pytest.mark.unit
class TestValidation:
    def test_empty_messages(self):
        with pytest.raises(ConversionError) as exc_info:
            convert_anthropic_to_google({"model": "claude-sonnet-4-5", "messages": []})
        assert exc_info.value.field == "messages"

    def test_blank_model(self):
        with pytest.raises(ConversionError) as exc_info:
            convert_anthropic_to_google(_request(model="  "))
        assert exc_info.value.field == "model"

    def test_schema_violation_is_wrapped(self):
        with pytest.raises(ConversionError) as exc_info:
            convert_anthropic_to_google(_request(messages=[{"role": "system", "content": "x"}]))
        assert exc_info.value.field.startswith("messages.0.role")

    def test_non_mapping_input_is_rejected(self):
        with pytest.raises(ConversionError, match="expected a Claude request"):
            convert_anthropic_to_google(["not", "a", "request"])

    def test_source_is_not_mutated_and_results_are_fresh(self, tool_conversation):
        snapshot = copy.deepcopy(tool_conversation)
        first = convert_anthropic_to_google(tool_conversation)
        second = convert_anthropic_to_google(tool_conversation)
        assert tool_conversation == snapshot
        assert first == second
        assert first is not second
        first["contents"].clear()
        assert second["contents"]


@pytest.mark.unit
class TestParseToolResultContent:
    def test_none_and_strings(self):
        assert parse_tool_result_content(None) == ""
        assert parse_tool_result_content("plain") == "plain"

    def test_lists_join_text_and_skip_images(self):
        content = [
            {"type": "text", "text": "a"},
            {"type": "image", "source": {}},
            "b",
            {"other": 1},
        ]
        assert parse_tool_result_content(content) == 'a\nb\n{"other": 1}'

    def test_dicts(self):
        assert parse_tool_result_content({"type": "text", "text": "t"}) == "t"
        assert parse_tool_result_content({"k": "v"}) == '{"k": "v"}'
