"""
Intent Parser - turns one free-text request into one Intent.

The parser:
1. Sends the text to the configured NLU provider (temperature 0)
2. Runs the reply through the sanitizer
3. Falls back to KeywordIntentParser on any failure (provider error,
   timeout, fences/JSON/shape problems)

``parse`` never raises; the worst case is a keyword-parsed intent.
"""

import asyncio
import logging
import time
import uuid
from datetime import datetime
from typing import Optional

from omniagent.ai.intent.fallback import KeywordIntentParser
from omniagent.ai.intent.sanitizer import IntentParseError, parse_model_output
from omniagent.ai.intent.schemas import Intent
from omniagent.ai.monitoring import ai_monitor
from omniagent.ai.prompts.intent_prompts import build_intent_system_prompt
from omniagent.ai.providers import AIProvider, get_nlu_provider
from omniagent.core.config import settings
from omniagent.core.timeutils import local_timezone

logger = logging.getLogger("omniagent.ai.intent")


class IntentParser:
    """
    AI-first intent parser with a deterministic fallback.

    Usage:
        parser = IntentParser()
        intent = await parser.parse("create a meet at 5pm")
        print(intent.action, intent.parameters.time)

    Args:
        provider: NLU backend (default: settings.NLU_PROVIDER)
        fallback: keyword parser used when the AI path fails
        timeout: seconds before the provider call is abandoned
    """

    def __init__(
        self,
        provider: Optional[AIProvider] = None,
        fallback: Optional[KeywordIntentParser] = None,
        timeout: Optional[float] = None,
    ):
        self.provider = provider or get_nlu_provider()
        self.fallback = fallback or KeywordIntentParser()
        self.timeout = timeout if timeout is not None else settings.AI_REQUEST_TIMEOUT
        logger.info(f"Intent parser initialized ({self.provider.provider_type.value})")

    async def parse(self, text: str, request_id: Optional[str] = None) -> Intent:
        """
        Parse ``text`` into an Intent.

        Args:
            text: The user's request
            request_id: Correlates monitor log lines (generated if omitted)
        """
        request_id = request_id or str(uuid.uuid4())[:8]
        start_time = time.time()

        fallback_reason = None
        try:
            intent = await self._parse_with_ai(text, request_id)
        except (IntentParseError, asyncio.TimeoutError) as e:
            fallback_reason = str(e) or type(e).__name__
            logger.warning(f"[{request_id}] AI intent parsing failed, using keywords: {fallback_reason}")
            intent = self.fallback.parse(text)
        except Exception as e:
            fallback_reason = str(e) or type(e).__name__
            logger.error(f"[{request_id}] Unexpected NLU failure, using keywords: {e}")
            intent = self.fallback.parse(text)

        try:
            if fallback_reason is not None:
                ai_monitor.track_fallback(request_id, fallback_reason)
            ai_monitor.track_intent(
                request_id=request_id,
                original_text=text,
                action=intent.action.value,
                source=intent.source,
                processing_time_ms=(time.time() - start_time) * 1000,
            )
        except Exception as e:
            logger.error(f"[{request_id}] Intent metrics not recorded: {e}")
        return intent

    async def _parse_with_ai(self, text: str, request_id: str) -> Intent:
        """
        Raises:
            IntentParseError: provider failure or unusable output
            asyncio.TimeoutError: provider did not answer in time
        """
        tz = local_timezone()
        system_prompt = build_intent_system_prompt(datetime.now(tz).date(), settings.DEFAULT_TIMEZONE)

        ai_monitor.track_request(
            request_id=request_id,
            prompt=text,
            provider=self.provider.provider_type.value,
            model=self.provider.model,
        )

        response = await asyncio.wait_for(
            self.provider.generate(
                prompt=text,
                system_prompt=system_prompt,
                temperature=0,
                max_tokens=500,
            ),
            timeout=self.timeout,
        )
        ai_monitor.track_response_from_ai_response(request_id, response)

        if not response.success:
            raise IntentParseError(response.error or "provider returned no content")

        return parse_model_output(response.content)


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
intent_parser = IntentParser()
