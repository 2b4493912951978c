"""
Base AI Provider - the contract every NLU backend follows.

Design Pattern: Strategy Pattern
================================
The intent parser depends only on AIProvider; which model answers is a
configuration choice (NLU_PROVIDER).

Example:
    provider = OpenAIProvider()
    response = await provider.generate("email from alice", system_prompt=...)
    if response.success:
        print(response.content)
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

logger = logging.getLogger("omniagent.ai")


class ProviderType(str, Enum):
    """Supported NLU providers."""
    OPENAI = "openai"
    GEMINI = "gemini"


@dataclass
class TokenUsage:
    """Token usage for one request (feeds the cost estimate in AIMonitor)."""
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        if self.total_tokens == 0:
            self.total_tokens = self.prompt_tokens + self.completion_tokens


@dataclass
class AIResponse:
    """
    Standardized response from any provider.

    Attributes:
        content: The generated text (raw, untrusted)
        provider: Which provider generated it
        model: The specific model used
        usage: Token usage statistics
        latency_ms: Wall time of the call
        success: False when the call failed; ``error`` then says why
    """
    content: str
    provider: ProviderType
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    latency_ms: float = 0.0
    success: bool = True
    error: Optional[str] = None


class AIProvider(ABC):
    """
    Abstract base class for NLU providers.

    Implementations must not raise from ``generate``: failures are reported
    through ``AIResponse.success`` / ``AIResponse.error`` so the caller can
    fall back to keyword parsing.
    """

    provider_type: ProviderType
    model: str

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: int = 500,
        **kwargs
    ) -> AIResponse:
        """
        Generate a completion for ``prompt``.

        Args:
            prompt: The user's request text
            system_prompt: Instructions (the intent schema)
            temperature: 0 for deterministic parsing
            max_tokens: Maximum tokens in the completion
        """
        pass

    @property
    def is_configured(self) -> bool:
        return getattr(self, "_client", None) is not None

    def _measure_latency(self, start_time: float) -> float:
        """Calculate latency in milliseconds."""
        return (time.time() - start_time) * 1000

    def _create_error_response(
        self,
        error: str,
        model: str,
        latency_ms: float = 0.0
    ) -> AIResponse:
        logger.error(f"AI Provider Error [{self.provider_type.value}]: {error}")
        return AIResponse(
            content="",
            provider=self.provider_type,
            model=model,
            latency_ms=latency_ms,
            success=False,
            error=error,
        )
