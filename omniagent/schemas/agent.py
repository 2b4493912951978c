"""
Agent schemas - Pydantic models for the /agent endpoints.

Request bodies carry per-request vendor credentials (Shopify, Microsoft,
Telegram); Google credentials live server-side.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# CREDENTIALS
# ---------------------------------------------------------------------------

class ShopifyConfig(_CamelModel):
    """
    Example:
    {"storeUrl": "my-shop.myshopify.com", "accessToken": "shpat_..."}
    """
    store_url: Optional[str] = None
    access_token: Optional[str] = None
    api_key: Optional[str] = None
    api_secret: Optional[str] = None


class MicrosoftTokens(BaseModel):
    # Graph tokens keep their OAuth snake_case names on the wire
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_on: Optional[int] = None


class ProviderCredentials(_CamelModel):
    """Everything a handler may need besides the server-side Google tokens."""
    shopify_config: Optional[ShopifyConfig] = None
    microsoft_tokens: Optional[MicrosoftTokens] = None
    telegram_token: Optional[str] = None

    @property
    def microsoft_access_token(self) -> Optional[str]:
        return self.microsoft_tokens.access_token if self.microsoft_tokens else None


# ---------------------------------------------------------------------------
# REQUEST SCHEMAS (what the client sends)
# ---------------------------------------------------------------------------

class AgentQueryRequest(ProviderCredentials):
    """
    Body of POST /agent/query.

    Example request body:
    {
        "query": "create a meet at 5pm",
        "telegramToken": "123456:ABC..."
    }
    """
    query: Optional[str] = Field(None, description="Free-text request")

    def credentials(self) -> ProviderCredentials:
        return ProviderCredentials(
            shopify_config=self.shopify_config,
            microsoft_tokens=self.microsoft_tokens,
            telegram_token=self.telegram_token,
        )


# ---------------------------------------------------------------------------
# RESPONSE SCHEMAS (what the server returns)
# ---------------------------------------------------------------------------

class ActionResponse(BaseModel):
    """
    Uniform result envelope.

    ``data`` is present only for successful, content-bearing actions and is
    omitted from the JSON otherwise.

    Example response:
    {"action": "create_meet", "message": "✅ Google Meet created!...", "data": {...}}
    """
    action: str
    message: str = Field(..., min_length=1)
    data: Optional[Any] = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)


class MeetingOut(BaseModel):
    external_id: Optional[str] = None
    link: str
    start: datetime
    end: datetime
    title: Optional[str] = None
    description: Optional[str] = None


class SessionContextOut(BaseModel):
    count: int
    meetings: List[MeetingOut]
