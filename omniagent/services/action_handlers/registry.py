"""
Handler Registry - routes an Intent to the handler that owns its tag.

The registry is checked when it is built: every ActionTag except the meta
tags (help/none) must belong to exactly one handler, otherwise construction
fails with ValueError.

Collaborator errors are folded into user-facing messages here:
- AuthenticationError / TokenExpiredError → reconnect message for the
  provider family behind the action
- APIError → "Failed to <action>. Please try again."
Anything else propagates to the service boundary.
"""

import logging
from typing import Dict, Iterable, List, Optional

from omniagent.ai.intent.schemas import META_ACTIONS, ActionTag, Intent
from omniagent.environments.base import APIError, AuthenticationError
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    GOOGLE_CONNECT_MESSAGE,
    MICROSOFT_SIGN_IN_MESSAGE,
    SHOPIFY_CONNECT_MESSAGE,
    TEAMS_CONNECT_MESSAGE,
    ActionHandler,
    HandlerContext,
)
from omniagent.services.action_handlers.classroom import ClassroomHandler
from omniagent.services.action_handlers.commerce import CommerceHandler
from omniagent.services.action_handlers.document import DocumentHandler
from omniagent.services.action_handlers.files import FilesHandler
from omniagent.services.action_handlers.mail import MailHandler
from omniagent.services.action_handlers.meeting import MeetingHandler
from omniagent.services.action_handlers.notes import NotesHandler
from omniagent.services.action_handlers.spreadsheet import SpreadsheetHandler
from omniagent.services.action_handlers.teams import TeamsHandler
from omniagent.services.action_handlers.telegram import TelegramHandler

logger = logging.getLogger("omniagent.services.action_handlers.registry")


TELEGRAM_REJECTED_MESSAGE = "❌ Telegram rejected the bot token. Please check it and try again."


# ---------------------------------------------------------------------------
# PROVIDER FAMILIES (for reconnect messages)
# ---------------------------------------------------------------------------
_MICROSOFT_ACTIONS = frozenset({
    ActionTag.FETCH_OUTLOOK_EMAILS,
    ActionTag.SEND_OUTLOOK_EMAIL,
    ActionTag.FETCH_ONEDRIVE_FILES,
    ActionTag.CREATE_OUTLOOK_EVENT,
    ActionTag.CREATE_EXCEL_SHEET,
    ActionTag.READ_EXCEL_SHEET,
    ActionTag.UPDATE_EXCEL_SHEET,
    ActionTag.CREATE_WORD_DOC,
    ActionTag.READ_WORD_DOC,
})
_TEAMS_ACTIONS = frozenset({ActionTag.FETCH_TEAMS_MESSAGES, ActionTag.FETCH_TEAMS_CHANNELS})
_TELEGRAM_ACTIONS = frozenset({
    ActionTag.FETCH_TELEGRAM_UPDATES,
    ActionTag.SEND_TELEGRAM_MESSAGE,
    ActionTag.MANAGE_TELEGRAM_GROUP,
})
_SHOPIFY_ACTIONS = frozenset({ActionTag.FETCH_ORDERS})


def reconnect_message(action: ActionTag) -> str:
    """Reconnect prompt for the provider behind ``action`` (Google by default)."""
    if action in _MICROSOFT_ACTIONS:
        return MICROSOFT_SIGN_IN_MESSAGE
    if action in _TEAMS_ACTIONS:
        return TEAMS_CONNECT_MESSAGE
    if action in _TELEGRAM_ACTIONS:
        return TELEGRAM_REJECTED_MESSAGE
    if action in _SHOPIFY_ACTIONS:
        return SHOPIFY_CONNECT_MESSAGE
    return GOOGLE_CONNECT_MESSAGE


def failure_message(action: ActionTag) -> str:
    """fetch_emails → "❌ Failed to fetch emails. Please try again." """
    phrase = action.value.replace("_", " ")
    return f"❌ Failed to {phrase}. Please try again."


def default_handlers() -> List[ActionHandler]:
    return [
        MailHandler(),
        FilesHandler(),
        CommerceHandler(),
        TeamsHandler(),
        MeetingHandler(),
        SpreadsheetHandler(),
        DocumentHandler(),
        NotesHandler(),
        ClassroomHandler(),
        TelegramHandler(),
    ]


class HandlerRegistry:
    """
    Tag → handler routing table.

    Usage:
        registry = HandlerRegistry()
        response = await registry.dispatch(intent, context)

    Raises:
        ValueError: (at construction) a tag is claimed twice, a meta tag is
            claimed, or a non-meta tag has no handler
    """

    def __init__(self, handlers: Optional[Iterable[ActionHandler]] = None):
        self._routes: Dict[ActionTag, ActionHandler] = {}

        for handler in handlers if handlers is not None else default_handlers():
            for tag in handler.supported_actions:
                if tag in META_ACTIONS:
                    raise ValueError(f"{handler.handler_name} cannot handle meta action {tag.value}")
                if tag in self._routes:
                    raise ValueError(
                        f"{tag.value} is claimed by both "
                        f"{self._routes[tag].handler_name} and {handler.handler_name}"
                    )
                self._routes[tag] = handler

        missing = [tag.value for tag in ActionTag if tag not in META_ACTIONS and tag not in self._routes]
        if missing:
            raise ValueError(f"No handler for actions: {', '.join(missing)}")

        logger.info(f"Handler registry ready ({len(self._routes)} actions)")

    def handler_for(self, action: ActionTag) -> Optional[ActionHandler]:
        return self._routes.get(action)

    async def dispatch(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        handler = self._routes.get(intent.action)
        if handler is None:
            # help / none
            return ActionResponse(action=intent.action.value, message=intent.natural_response)

        try:
            return await handler.handle(intent, context)
        except AuthenticationError as e:
            logger.warning(f"[{context.request_id}] {intent.action.value} auth failure: {e}")
            return ActionResponse(action=intent.action.value, message=reconnect_message(intent.action))
        except APIError as e:
            logger.error(
                f"[{context.request_id}] {intent.action.value} failed: {e}",
                extra={"handler": handler.handler_name, "status_code": e.status_code},
            )
            return ActionResponse(action=intent.action.value, message=failure_message(intent.action))
