"""
Telegram Handler - bot updates, messages and group management.

The bot token comes with each request. Group management supports:
- kick  + userId    → banChatMember
- pin   + messageId → pinChatMessage
- title + value     → setChatTitle
Anything else is reported back without calling Telegram.
"""

import logging
from typing import Dict, List, Optional

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    TELEGRAM_TOKEN_MESSAGE,
    ActionHandler,
    HandlerContext,
    RouteFn,
)

logger = logging.getLogger("omniagent.services.action_handlers.telegram")


class TelegramHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "telegram"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [
            ActionTag.FETCH_TELEGRAM_UPDATES,
            ActionTag.SEND_TELEGRAM_MESSAGE,
            ActionTag.MANAGE_TELEGRAM_GROUP,
        ]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.FETCH_TELEGRAM_UPDATES: self._fetch_updates,
            ActionTag.SEND_TELEGRAM_MESSAGE: self._send_message,
            ActionTag.MANAGE_TELEGRAM_GROUP: self._manage_group,
        }

    async def _fetch_updates(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.telegram_token
        if not token:
            return self.respond(intent.action, TELEGRAM_TOKEN_MESSAGE)

        messages = await context.collaborators.telegram.get_updates(token, self.limit(intent, 5))
        return self.respond(intent.action, f"✅ Fetched {len(messages)} Telegram messages.", messages)

    async def _send_message(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.telegram_token
        if not token:
            return self.respond(intent.action, TELEGRAM_TOKEN_MESSAGE)

        params = intent.parameters
        if not params.chat_id or not params.text:
            return self.respond(intent.action, "Please provide the Chat ID and the message text.")

        result = await context.collaborators.telegram.send_message(token, params.chat_id, params.text)
        return self.respond(intent.action, f"✅ Message sent to chat {params.chat_id}.", result)

    async def _manage_group(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.telegram_token
        if not token:
            return self.respond(intent.action, TELEGRAM_TOKEN_MESSAGE)

        params = intent.parameters
        if not params.chat_id or not params.action:
            return self.respond(intent.action, "Missing Chat ID or Action.")

        telegram = context.collaborators.telegram
        operation = params.action.strip().lower()

        if operation == "kick" and params.user_id:
            user_id = _as_int(params.user_id)
            if user_id is None:
                return self.respond(intent.action, "User ID must be a number.")
            await telegram.ban_chat_member(token, params.chat_id, user_id)
            return self.respond(intent.action, f"✅ User {user_id} removed from the group.")

        if operation == "pin" and params.message_id:
            message_id = _as_int(params.message_id)
            if message_id is None:
                return self.respond(intent.action, "Message ID must be a number.")
            await telegram.pin_chat_message(token, params.chat_id, message_id)
            return self.respond(intent.action, f"✅ Message {message_id} pinned.")

        if operation == "title" and params.value:
            await telegram.set_chat_title(token, params.chat_id, params.value)
            return self.respond(intent.action, f"✅ Group title changed to \"{params.value}\".")

        logger.info(f"[{context.request_id}] Unsupported group action: {params.action!r}")
        return self.respond(
            intent.action,
            f"⚠️ Action \"{params.action}\" is not fully supported or missing parameters.",
        )


def _as_int(value: str) -> Optional[int]:
    try:
        return int(value.strip())
    except ValueError:
        return None
