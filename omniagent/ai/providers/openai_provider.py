"""
OpenAI Provider - default NLU backend.

A small, cheap chat model (gpt-4o-mini) at temperature 0 is enough to map
a one-line request to an action tag and a handful of parameters.

API Documentation: https://platform.openai.com/docs/api-reference
"""

import logging
import time
from typing import Optional

from openai import AsyncOpenAI

from omniagent.ai.providers.base import (
    AIProvider,
    AIResponse,
    ProviderType,
    TokenUsage,
)
from omniagent.core.config import settings

logger = logging.getLogger("omniagent.ai.openai")


class OpenAIProvider(AIProvider):
    """
    OpenAI chat-completions provider.

    Usage:
        provider = OpenAIProvider()
        response = await provider.generate(text, system_prompt=INTENT_SYSTEM_PROMPT)
    """

    provider_type = ProviderType.OPENAI

    def __init__(self, model: str = None, api_key: str = None):
        self.model = model or settings.OPENAI_MODEL
        self.api_key = api_key or settings.OPENAI_API_KEY

        if self.api_key:
            self._client = AsyncOpenAI(api_key=self.api_key)
            logger.info(f"OpenAI provider initialized with model: {self.model}")
        else:
            self._client = None
            logger.warning("OpenAI API key not configured - keyword fallback only")

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 500,
        **kwargs
    ) -> AIResponse:
        start_time = time.time()

        if not self._client:
            return self._create_error_response(
                error="OpenAI API key not configured",
                model=self.model,
                latency_ms=self._measure_latency(start_time),
            )

        try:
            messages = []
            if system_prompt:
                messages.append({"role": "system", "content": system_prompt})
            messages.append({"role": "user", "content": prompt})

            response = await self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )

            latency_ms = self._measure_latency(start_time)
            content = response.choices[0].message.content or ""
            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens if response.usage else 0,
                completion_tokens=response.usage.completion_tokens if response.usage else 0,
            )

            logger.info(f"OpenAI request completed in {latency_ms:.0f}ms, tokens: {usage.total_tokens}")

            return AIResponse(
                content=content,
                provider=self.provider_type,
                model=self.model,
                usage=usage,
                latency_ms=latency_ms,
                success=True,
            )

        except Exception as e:
            logger.error(f"OpenAI generation failed: {e}")
            return self._create_error_response(
                error=str(e),
                model=self.model,
                latency_ms=self._measure_latency(start_time),
            )
