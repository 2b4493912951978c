"""
AI Providers Module - interchangeable NLU backends.

    provider = get_nlu_provider()          # honours settings.NLU_PROVIDER
    response = await provider.generate(text, system_prompt=...)
"""

from omniagent.ai.providers.base import AIProvider, AIResponse, ProviderType, TokenUsage
from omniagent.ai.providers.gemini import GeminiProvider
from omniagent.ai.providers.openai_provider import OpenAIProvider
from omniagent.core.config import settings


def get_nlu_provider(name: str = None) -> AIProvider:
    """
    Build the provider named by ``name`` (default: settings.NLU_PROVIDER).

    Raises:
        ValueError: for an unknown provider name
    """
    choice = (name or settings.NLU_PROVIDER).lower()
    if choice == ProviderType.OPENAI.value:
        return OpenAIProvider()
    if choice == ProviderType.GEMINI.value:
        return GeminiProvider()
    raise ValueError(f"Unknown NLU provider: {choice}")


__all__ = [
    "AIProvider",
    "AIResponse",
    "ProviderType",
    "TokenUsage",
    "OpenAIProvider",
    "GeminiProvider",
    "get_nlu_provider",
]
