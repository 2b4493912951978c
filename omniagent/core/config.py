"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override in production, set environment variables:
        export OPENAI_API_KEY=sk-...
        export DEFAULT_TIMEZONE=Asia/Kolkata
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    APP_NAME: str = "OmniAgent"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # NLU PROVIDER SETTINGS
    # ---------------------------------------------------------------------------
    # NLU_PROVIDER: which model turns free text into an intent ("openai" or "gemini")
    NLU_PROVIDER: str = "openai"

    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"

    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # Seconds before the NLU call is abandoned in favour of the keyword parser
    AI_REQUEST_TIMEOUT: int = 30

    # ---------------------------------------------------------------------------
    # GOOGLE OAUTH SETTINGS
    # ---------------------------------------------------------------------------
    # Tokens are obtained out of band (consent screen) and stored in
    # GOOGLE_TOKENS_FILE as {"access_token", "refresh_token", "expiry_date"}.
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    GOOGLE_TOKENS_FILE: str = "google_tokens.json"

    # ---------------------------------------------------------------------------
    # ACTION DEFAULTS
    # ---------------------------------------------------------------------------
    # DEFAULT_TIMEZONE: used to build meeting start times from "5pm" style input
    DEFAULT_TIMEZONE: str = "UTC"
    MEETING_DURATION_MINUTES: int = 30

    # Hard ceiling on any "limit" the NLU hands to a fetch collaborator
    MAX_FETCH_LIMIT: int = 200

    SHOPIFY_API_VERSION: str = "2024-01"

    # Timeout for outbound vendor API calls, in seconds
    HTTP_TIMEOUT: float = 30.0


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from omniagent.core.config import settings
settings = Settings()
