"""
Google OAuth token provider.

The consent flow happens elsewhere; this module only reads the stored tokens
and refreshes the access token when it has expired. Every Google-backed
action awaits ``get_access_token()`` on its own request chain, so a failed
refresh aborts only that request.
"""

import json
import logging
import time
from pathlib import Path
from typing import Optional

import httpx

from omniagent.core.config import settings
from omniagent.environments.base import AuthenticationError, TokenExpiredError


logger = logging.getLogger("omniagent.environments.google.auth")


class GoogleAuth:
    """
    Supplies a valid Google access token.

    Tokens file format (as written by the consent flow):
        {"access_token": "...", "refresh_token": "...", "expiry_date": 1735689600000}

    ``expiry_date`` is in milliseconds since the epoch.
    """

    TOKEN_URL = "https://oauth2.googleapis.com/token"

    def __init__(
        self,
        tokens_file: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.tokens_path = Path(tokens_file or settings.GOOGLE_TOKENS_FILE)
        self._transport = transport

    def _load_tokens(self) -> Optional[dict]:
        if not self.tokens_path.exists():
            return None
        try:
            return json.loads(self.tokens_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read Google tokens file: {e}")
            return None

    def _save_tokens(self, tokens: dict) -> None:
        self.tokens_path.write_text(json.dumps(tokens, indent=2), encoding="utf-8")

    async def get_access_token(self) -> str:
        """
        Return a non-expired access token, refreshing it if needed.

        Raises:
            AuthenticationError: no refresh token stored
            TokenExpiredError: refresh was rejected or failed
        """
        tokens = self._load_tokens()
        if not tokens or not tokens.get("refresh_token"):
            raise AuthenticationError("No Google refresh token found")

        expiry_ms = tokens.get("expiry_date") or 0
        if tokens.get("access_token") and expiry_ms > time.time() * 1000:
            return tokens["access_token"]

        refreshed = await self._refresh(tokens["refresh_token"])
        tokens.update(refreshed)
        self._save_tokens(tokens)
        return tokens["access_token"]

    async def _refresh(self, refresh_token: str) -> dict:
        refresh_data = {
            "client_id": settings.GOOGLE_CLIENT_ID,
            "client_secret": settings.GOOGLE_CLIENT_SECRET,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        }

        logger.info("Refreshing Google access token")

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.post(
                    self.TOKEN_URL,
                    data=refresh_data,
                    timeout=settings.HTTP_TIMEOUT,
                )
            except httpx.RequestError as e:
                logger.error(f"Network error during token refresh: {e}")
                raise TokenExpiredError(f"Network error: {e}")

        if response.status_code != 200:
            logger.error(f"Token refresh failed: {response.text}")
            raise TokenExpiredError("Google authentication failed.")

        payload = response.json()
        expires_in = int(payload.get("expires_in", 3600))
        return {
            "access_token": payload["access_token"],
            "expiry_date": int((time.time() + expires_in) * 1000),
        }
