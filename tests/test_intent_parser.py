"""
Tests for the AI intent path.

Tests for:
- Sanitizing raw model output (fences, tags, limits, values)
- Fallback on provider failure, timeout and bad output
- System prompt contents
"""

import asyncio
from datetime import date

import pytest

from omniagent.ai.intent import (
    ActionTag,
    IntentParseError,
    IntentParser,
    KeywordIntentParser,
    parse_model_output,
)
from omniagent.ai.intent.sanitizer import clamp_limit, normalize_values, strip_code_fences
from omniagent.ai.monitoring import ai_monitor
from omniagent.ai.prompts import INTENT_SYSTEM_PROMPT, build_intent_system_prompt
from omniagent.ai.providers import AIProvider, ProviderType
from omniagent.core.config import settings

from conftest import ScriptedProvider


# ===========================================================================
# SANITIZER TESTS
# ===========================================================================

class TestSanitizer:
    """Tests for parse_model_output and its helpers."""

    def test_strip_code_fences(self):
        raw = '```json\n{"action": "help"}\n```'
        assert strip_code_fences(raw) == '{"action": "help"}'

    def test_fenced_reply(self):
        raw = '```json\n{"action": "create_meet", "parameters": {"time": "5pm"}}\n```'
        intent = parse_model_output(raw)

        assert intent.action == ActionTag.CREATE_MEET
        assert intent.parameters.time == "5pm"
        assert intent.source == "ai"

    def test_unknown_tag_becomes_none(self):
        intent = parse_model_output('{"action": "launch_rocket"}')
        assert intent.action == ActionTag.NONE

    def test_missing_natural_response_defaults(self):
        intent = parse_model_output('{"action": "fetch_emails"}')
        assert intent.natural_response == "Okay."

    def test_uses_context_must_be_true_boolean(self):
        assert parse_model_output('{"action": "delete_meet", "usesContext": true}').uses_context is True
        assert parse_model_output('{"action": "delete_meet", "usesContext": "yes"}').uses_context is False

    def test_camel_case_parameters(self):
        intent = parse_model_output(
            '{"action": "replace_doc", "parameters": '
            '{"title": "Budget", "findText": "2024", "replaceText": ""}}'
        )

        assert intent.parameters.find_text == "2024"
        assert intent.parameters.replace_text == ""

    def test_numeric_ids_become_strings(self):
        intent = parse_model_output(
            '{"action": "manage_telegram_group", "parameters": '
            '{"chatId": -100123, "action": "kick", "userId": 42}}'
        )

        assert intent.parameters.chat_id == "-100123"
        assert intent.parameters.user_id == "42"
        assert intent.parameters.action == "kick"

    def test_unknown_and_malformed_parameters_dropped(self):
        intent = parse_model_output(
            '{"action": "fetch_emails", "parameters": '
            '{"search": ["a", "b"], "color": "red", "filter": "unread", "status": "open"}}'
        )
        assert intent.parameters.search is None
        assert intent.parameters.model_dump(exclude_none=True) == {}

    @pytest.mark.parametrize("raw,expected", [
        (10, 10),
        ("12", 12),
        (7.9, 7),
        (0, None),
        (-3, None),
        ("lots", None),
        (True, None),
        (float("nan"), None),
    ])
    def test_clamp_limit(self, raw, expected):
        assert clamp_limit(raw) == expected

    def test_clamp_limit_caps_at_max(self):
        assert clamp_limit(10_000) == settings.MAX_FETCH_LIMIT

    def test_limit_clamped_in_intent(self):
        intent = parse_model_output('{"action": "fetch_files", "parameters": {"limit": 999999}}')
        assert intent.parameters.limit == settings.MAX_FETCH_LIMIT

    def test_normalize_values(self):
        assert normalize_values([[1, None, "x"], "row", []]) == [["1", "", "x"], [], []]
        assert normalize_values("A1") == []

    @pytest.mark.parametrize("raw", ["", "not json", "[1, 2]", '"help"', "```\n```"])
    def test_unusable_output_raises(self, raw):
        with pytest.raises(IntentParseError):
            parse_model_output(raw)


# ===========================================================================
# PARSER TESTS
# ===========================================================================

class _SlowProvider(AIProvider):
    provider_type = ProviderType.GEMINI
    model = "slow"

    async def generate(self, prompt, system_prompt=None, temperature=0.0, max_tokens=500, **kwargs):
        await asyncio.sleep(5)


class _BrokenProvider(AIProvider):
    provider_type = ProviderType.OPENAI
    model = "broken"

    async def generate(self, prompt, system_prompt=None, temperature=0.0, max_tokens=500, **kwargs):
        raise RuntimeError("socket closed")


class TestIntentParser:
    """Tests for IntentParser."""

    @pytest.mark.asyncio
    async def test_ai_path(self):
        provider = ScriptedProvider([{
            "action": "create_meet",
            "parameters": {"time": "5pm"},
            "naturalResponse": "Creating your meeting.",
        }])
        parser = IntentParser(provider=provider, fallback=KeywordIntentParser())

        intent = await parser.parse("set up a call at 5pm")

        assert intent.action == ActionTag.CREATE_MEET
        assert intent.source == "ai"
        assert provider.prompts == ["set up a call at 5pm"]
        assert ai_monitor.get_stats().fallback_parses == 0
        assert ai_monitor.get_stats().intents_by_action == {"create_meet": 1}

    @pytest.mark.asyncio
    async def test_provider_failure_falls_back(self):
        parser = IntentParser(provider=ScriptedProvider([None]))

        intent = await parser.parse("create a meet at 5pm")

        assert intent.action == ActionTag.CREATE_MEET
        assert intent.source == "fallback"
        assert ai_monitor.get_stats().fallback_parses == 1
        assert ai_monitor.get_stats().failed_requests == 1

    @pytest.mark.asyncio
    async def test_bad_output_falls_back(self):
        parser = IntentParser(provider=ScriptedProvider(["Sure! I'll create that meeting."]))

        intent = await parser.parse("cancel that meeting")

        assert intent.action == ActionTag.DELETE_MEET
        assert intent.source == "fallback"

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self):
        parser = IntentParser(provider=_SlowProvider(), timeout=0.05)

        intent = await parser.parse("show my gmail")

        assert intent.action == ActionTag.FETCH_EMAILS
        assert intent.source == "fallback"

    @pytest.mark.asyncio
    async def test_unexpected_error_falls_back(self):
        parser = IntentParser(provider=_BrokenProvider())

        intent = await parser.parse("show my shopify orders")

        assert intent.action == ActionTag.FETCH_ORDERS
        assert ai_monitor.get_stats().fallback_parses == 1

    @pytest.mark.asyncio
    async def test_monitor_failure_does_not_break_parse(self, monkeypatch):
        def broken_tracking(*args, **kwargs):
            raise RuntimeError("metrics store unavailable")

        monkeypatch.setattr(ai_monitor, "track_intent", broken_tracking)
        monkeypatch.setattr(ai_monitor, "track_fallback", broken_tracking)
        parser = IntentParser(provider=ScriptedProvider([None]))

        intent = await parser.parse("create a meet at 5pm")

        assert intent.action == ActionTag.CREATE_MEET
        assert intent.source == "fallback"

    @pytest.mark.asyncio
    async def test_system_prompt_carries_current_date(self):
        provider = ScriptedProvider([{"action": "help"}])
        parser = IntentParser(provider=provider)

        await parser.parse("what can you do")

        assert provider.system_prompts[0].startswith(INTENT_SYSTEM_PROMPT)
        assert "Today is " in provider.system_prompts[0]


# ===========================================================================
# PROMPT TESTS
# ===========================================================================

class TestIntentPrompt:

    def test_every_action_listed(self):
        for tag in ActionTag:
            assert f"- {tag.value}\n" in INTENT_SYSTEM_PROMPT, tag.value

    def test_build_prompt(self):
        prompt = build_intent_system_prompt(date(2025, 3, 1), "Europe/Madrid")

        assert "Today is 2025-03-01 (Saturday), timezone Europe/Madrid." in prompt
