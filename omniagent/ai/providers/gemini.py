"""
Gemini Provider - alternative NLU backend on the google-genai SDK.
"""

import logging
import time
from typing import Optional

from google import genai
from google.genai import types

from omniagent.ai.providers.base import (
    AIProvider,
    AIResponse,
    ProviderType,
    TokenUsage,
)
from omniagent.core.config import settings

logger = logging.getLogger("omniagent.ai.gemini")


class GeminiProvider(AIProvider):
    provider_type = ProviderType.GEMINI

    def __init__(self, model: str = None, api_key: str = None):
        self.model = model or settings.GEMINI_MODEL
        self.api_key = api_key or settings.GEMINI_API_KEY

        if self.api_key:
            self._client = genai.Client(api_key=self.api_key)
            logger.info(f"Gemini provider initialized with model: {self.model}")
        else:
            self._client = None
            logger.warning("Gemini API key not configured")

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
            return self._error("API key missing", start_time)

        try:
            config = types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_tokens,
                system_instruction=system_prompt,
            )

            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )

            latency_ms = self._measure_latency(start_time)
            usage = self._extract_usage(response)

            return AIResponse(
                content=response.text or "",
                provider=self.provider_type,
                model=self.model,
                usage=usage,
                latency_ms=latency_ms,
                success=True,
            )

        except Exception as e:
            logger.error(f"Gemini generation failed: {e}")
            return self._error(str(e), start_time)

    def _extract_usage(self, response) -> TokenUsage:
        # usage_metadata is None when the API reports no usage
        meta = response.usage_metadata
        return TokenUsage(
            prompt_tokens=(meta.prompt_token_count or 0) if meta else 0,
            completion_tokens=(meta.candidates_token_count or 0) if meta else 0,
        )

    def _error(self, msg, start_time):
        return self._create_error_response(
            error=msg, model=self.model, latency_ms=self._measure_latency(start_time)
        )
