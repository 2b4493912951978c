"""
Intent Module - free text → typed Intent.

    from omniagent.ai.intent import intent_parser
    intent = await intent_parser.parse("send an email to bob@example.com")

AI path first, deterministic keyword fallback second.
"""

from omniagent.ai.intent.fallback import KeywordIntentParser
from omniagent.ai.intent.parser import IntentParser, intent_parser
from omniagent.ai.intent.sanitizer import IntentParseError, parse_model_output
from omniagent.ai.intent.schemas import (
    ActionTag,
    CAPABILITY_SUMMARY,
    Intent,
    IntentParameters,
    META_ACTIONS,
)

__all__ = [
    "ActionTag",
    "CAPABILITY_SUMMARY",
    "Intent",
    "IntentParameters",
    "META_ACTIONS",
    "IntentParseError",
    "parse_model_output",
    "KeywordIntentParser",
    "IntentParser",
    "intent_parser",
]
