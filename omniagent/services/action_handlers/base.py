"""
Base Action Handler - the contract every action handler follows.

Design Pattern: Strategy Pattern
================================
Each handler owns a group of related ActionTags (mail, meetings, docs...).
HandlerRegistry routes an Intent to the one handler that declared its tag.

Handler rules:
- Validate your own required parameters first; a missing one is answered
  with a clarifying message, never an exception.
- At most one resolver call, one session-store operation and one
  collaborator call per request, plus a result summary for some reads.
  Handlers never call each other.
- Let AuthenticationError / APIError propagate; the registry turns them
  into user-facing messages.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Awaitable, Callable, Dict, List, Optional

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.ai.summarizer import ResultSummarizer
from omniagent.core.config import settings
from omniagent.environments.google import (
    CalendarClient,
    ClassroomClient,
    DocsClient,
    DriveClient,
    GmailClient,
    GoogleAuth,
    KeepClient,
    SheetsClient,
)
from omniagent.environments.microsoft import (
    ExcelClient,
    OneDriveClient,
    OutlookClient,
    TeamsClient,
    WordClient,
)
from omniagent.environments.shopify import ShopifyClient
from omniagent.environments.telegram import TelegramClient
from omniagent.schemas.agent import ActionResponse, ProviderCredentials
from omniagent.services.session_context import SessionContextStore

logger = logging.getLogger("omniagent.services.action_handlers")


# ---------------------------------------------------------------------------
# USER-FACING MESSAGES
# ---------------------------------------------------------------------------
GOOGLE_CONNECT_MESSAGE = "❌ Please connect your Google account first."
MICROSOFT_SIGN_IN_MESSAGE = "❌ Please sign in with Microsoft first."
TEAMS_CONNECT_MESSAGE = "❌ Please connect your Microsoft Teams account first."
TELEGRAM_TOKEN_MESSAGE = "❌ Please provide a Telegram Bot Token."
SHOPIFY_CONNECT_MESSAGE = "❌ Shopify is not connected. Please connect your store first."
INVALID_DATE_MESSAGE = "📅 I couldn't understand the date \"{day}\". Please use YYYY-MM-DD."


@dataclass
class Collaborators:
    """
    The vendor clients handlers talk to, plus the result summarizer.

    Defaults build the real httpx clients; tests pass fakes.
    """
    google_auth: Any = field(default_factory=GoogleAuth)
    gmail: Any = field(default_factory=GmailClient)
    drive: Any = field(default_factory=DriveClient)
    docs: Any = field(default_factory=DocsClient)
    sheets: Any = field(default_factory=SheetsClient)
    calendar: Any = field(default_factory=CalendarClient)
    keep: Any = field(default_factory=KeepClient)
    classroom: Any = field(default_factory=ClassroomClient)
    outlook: Any = field(default_factory=OutlookClient)
    onedrive: Any = field(default_factory=OneDriveClient)
    word: Any = field(default_factory=WordClient)
    excel: Any = field(default_factory=ExcelClient)
    teams: Any = field(default_factory=TeamsClient)
    shopify: Any = field(default_factory=ShopifyClient)
    telegram: Any = field(default_factory=TelegramClient)
    summarizer: Any = field(default_factory=ResultSummarizer)


@dataclass
class HandlerContext:
    """
    Everything a handler needs for one request.

    Attributes:
        request_id: Correlates log lines for this request
        original_text: The user's request, verbatim
        credentials: Per-request Shopify / Microsoft / Telegram credentials
        collaborators: Vendor clients
        session: Meetings created earlier in this session
        start_time: Request start, for latency logging
    """
    request_id: str
    original_text: str
    credentials: ProviderCredentials
    collaborators: Collaborators
    session: SessionContextStore
    start_time: float = field(default_factory=time.time)

    async def google_token(self) -> str:
        """
        Raises:
            AuthenticationError: no usable Google credentials
        """
        return await self.collaborators.google_auth.get_access_token()


RouteFn = Callable[[Intent, HandlerContext], Awaitable[ActionResponse]]


class ActionHandler(ABC):
    """
    Abstract base class for action handlers.

    Subclasses declare their tags in ``supported_actions`` and map each tag
    to a coroutine in ``routes()``.

    Usage:
        class NotesHandler(ActionHandler):
            handler_name = "notes"
            supported_actions = [ActionTag.FETCH_NOTES, ActionTag.CREATE_NOTE]

            def routes(self):
                return {ActionTag.FETCH_NOTES: self._fetch_notes, ...}
    """

    @property
    @abstractmethod
    def handler_name(self) -> str:
        """Lowercase name used in logs."""
        pass

    @property
    @abstractmethod
    def supported_actions(self) -> List[ActionTag]:
        pass

    @abstractmethod
    def routes(self) -> Dict[ActionTag, RouteFn]:
        pass

    async def handle(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        self._log_entry(intent, context)
        route = self.routes()[intent.action]
        response = await route(intent, context)
        self._log_exit(context, response)
        return response

    # -----------------------------------------------------------------------
    # HELPERS
    # -----------------------------------------------------------------------

    @staticmethod
    def respond(action: ActionTag, message: str, data: Any = None) -> ActionResponse:
        return ActionResponse(action=action.value, message=message, data=data)

    @staticmethod
    def limit(intent: Intent, default: int) -> int:
        """Requested limit or the per-action default, never above MAX_FETCH_LIMIT."""
        return min(intent.parameters.limit or default, settings.MAX_FETCH_LIMIT)

    @staticmethod
    def date_problem(day: Optional[str]) -> Optional[str]:
        """Clarifying message when ``day`` is given but is not YYYY-MM-DD."""
        if not day:
            return None
        try:
            date.fromisoformat(day)
        except ValueError:
            return INVALID_DATE_MESSAGE.format(day=day)
        return None

    def _log_entry(self, intent: Intent, context: HandlerContext) -> None:
        logger.info(
            f"[{context.request_id}] {self.handler_name}.handle({intent.action.value})",
            extra={"handler": self.handler_name, "action": intent.action.value},
        )

    def _log_exit(self, context: HandlerContext, response: ActionResponse) -> None:
        processing_time_ms = (time.time() - context.start_time) * 1000
        logger.info(
            f"[{context.request_id}] {self.handler_name} completed in {processing_time_ms:.0f}ms",
            extra={
                "handler": self.handler_name,
                "has_data": response.data is not None,
                "processing_time_ms": processing_time_ms,
            },
        )
