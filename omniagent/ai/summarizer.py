"""
Result Summarizer - a short natural-language answer over fetched items.

Gmail, Drive, Shopify and Teams reads answer with a 2-3 sentence summary
of what was found instead of a bare count. The model only sees the first
``preview_items`` items.

``summarize`` never raises. No items, a provider error, a timeout or an
empty reply all give the plain count, e.g. "✅ Found 3 emails."
"""

import asyncio
import json
import logging
from enum import Enum
from typing import Any, List, Optional

from omniagent.ai.prompts.summary_prompts import RESULT_SUMMARY_PROMPT, RESULT_SUMMARY_SYSTEM_PROMPT
from omniagent.ai.providers import AIProvider, get_nlu_provider
from omniagent.core.config import settings

logger = logging.getLogger("omniagent.ai.summarizer")


class SummaryKind(str, Enum):
    """What the fetched items are."""
    EMAILS = "emails"
    FILES = "files"
    ORDERS = "orders"
    TEAMS_MESSAGES = "teams_messages"
    TEAMS_CHANNELS = "teams_channels"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    SummaryKind.EMAILS: "emails",
    SummaryKind.FILES: "files",
    SummaryKind.ORDERS: "Shopify orders",
    SummaryKind.TEAMS_MESSAGES: "Teams messages",
    SummaryKind.TEAMS_CHANNELS: "Teams channels",
}


def count_message(items: List[Any], kind: SummaryKind) -> str:
    return f"✅ Found {len(items)} {kind.label}."


class ResultSummarizer:
    """
    Summarizes fetched items with the configured NLU provider.

    Usage:
        summarizer = ResultSummarizer()
        message = await summarizer.summarize(emails, "any mail from Ann?", SummaryKind.EMAILS)

    Args:
        provider: NLU backend (default: settings.NLU_PROVIDER)
        preview_items: how many items the model sees
        timeout: seconds before the summary is abandoned
    """

    def __init__(
        self,
        provider: Optional[AIProvider] = None,
        preview_items: int = 3,
        timeout: Optional[float] = None,
    ):
        self.provider = provider or get_nlu_provider()
        self.preview_items = preview_items
        self.timeout = timeout if timeout is not None else settings.AI_REQUEST_TIMEOUT

    async def summarize(self, items: List[Any], query: str, kind: SummaryKind) -> str:
        fallback = count_message(items, kind)
        if not items:
            return fallback

        preview = json.dumps(items[:self.preview_items], indent=2, ensure_ascii=False, default=str)
        prompt = RESULT_SUMMARY_PROMPT.format(query=query, label=kind.label, preview=preview)

        try:
            response = await asyncio.wait_for(
                self.provider.generate(
                    prompt=prompt,
                    system_prompt=RESULT_SUMMARY_SYSTEM_PROMPT,
                    temperature=0.3,
                    max_tokens=250,
                ),
                timeout=self.timeout,
            )
        except Exception as e:
            logger.warning(f"Result summary failed ({kind.value}): {str(e) or type(e).__name__}")
            return fallback

        summary = response.content.strip() if response.success else ""
        if not summary:
            logger.warning(f"Result summary unavailable ({kind.value}): {response.error or 'empty reply'}")
            return fallback
        return summary
