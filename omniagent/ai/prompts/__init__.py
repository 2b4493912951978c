"""Prompt templates for the NLU and result summary steps."""

from omniagent.ai.prompts.intent_prompts import INTENT_SYSTEM_PROMPT, build_intent_system_prompt
from omniagent.ai.prompts.summary_prompts import RESULT_SUMMARY_PROMPT, RESULT_SUMMARY_SYSTEM_PROMPT

__all__ = [
    "INTENT_SYSTEM_PROMPT",
    "build_intent_system_prompt",
    "RESULT_SUMMARY_PROMPT",
    "RESULT_SUMMARY_SYSTEM_PROMPT",
]
