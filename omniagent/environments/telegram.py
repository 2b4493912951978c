"""
Telegram Bot API client.

Every method is a POST to ``/bot<token>/<method>``; Telegram wraps results
as ``{"ok": true, "result": ...}`` and failures as
``{"ok": false, "description": ...}``.

API Reference: https://core.telegram.org/bots/api
"""

import logging
from typing import Any, Dict, List, Union

from omniagent.environments.base import APIError, RestClient


logger = logging.getLogger("omniagent.environments.telegram")


ChatId = Union[int, str]


class TelegramClient(RestClient):
    service_name = "Telegram"
    BASE_URL = "https://api.telegram.org"

    def _get_headers(self, token: str) -> Dict[str, str]:
        # The bot token travels in the URL path
        return {"Accept": "application/json"}

    async def _call(self, token: str, method: str, payload: dict = None) -> Any:
        data = await self._make_request(
            "POST",
            f"/bot{token}/{method}",
            token,
            json_body=payload or {},
        )
        if not isinstance(data, dict) or not data.get("ok"):
            description = data.get("description") if isinstance(data, dict) else data
            raise APIError(f"Telegram API error: {description}", response=data)
        return data.get("result")

    async def get_me(self, token: str) -> dict:
        return await self._call(token, "getMe")

    async def get_updates(self, token: str, limit: int) -> List[dict]:
        """Recent text messages sent to the bot, newest first."""
        updates = await self._call(token, "getUpdates", {
            "limit": limit,
            "allowed_updates": ["message"],
        })
        messages = [u["message"] for u in updates or [] if u.get("message", {}).get("text")]
        messages.reverse()
        return messages

    async def send_message(self, token: str, chat_id: ChatId, text: str) -> dict:
        result = await self._call(token, "sendMessage", {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": "Markdown",
        })
        logger.info(f"Sent Telegram message to chat {chat_id}")
        return result

    async def ban_chat_member(self, token: str, chat_id: ChatId, user_id: int) -> bool:
        return bool(await self._call(token, "banChatMember", {"chat_id": chat_id, "user_id": user_id}))

    async def pin_chat_message(self, token: str, chat_id: ChatId, message_id: int) -> bool:
        return bool(await self._call(token, "pinChatMessage", {"chat_id": chat_id, "message_id": message_id}))

    async def set_chat_title(self, token: str, chat_id: ChatId, title: str) -> bool:
        return bool(await self._call(token, "setChatTitle", {"chat_id": chat_id, "title": title}))
