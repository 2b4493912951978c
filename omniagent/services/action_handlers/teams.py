"""
Teams Handler - recent channel messages and channel listing.
"""

from typing import Dict, List

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.ai.summarizer import SummaryKind
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    TEAMS_CONNECT_MESSAGE,
    ActionHandler,
    HandlerContext,
    RouteFn,
)


class TeamsHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "teams"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [ActionTag.FETCH_TEAMS_MESSAGES, ActionTag.FETCH_TEAMS_CHANNELS]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.FETCH_TEAMS_MESSAGES: self._fetch_messages,
            ActionTag.FETCH_TEAMS_CHANNELS: self._fetch_channels,
        }

    async def _fetch_messages(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, TEAMS_CONNECT_MESSAGE)

        messages = await context.collaborators.teams.get_messages(token, limit=self.limit(intent, 5))
        if not messages:
            return self.respond(intent.action, "No Teams messages found.", messages)
        summary = await context.collaborators.summarizer.summarize(
            messages, context.original_text, SummaryKind.TEAMS_MESSAGES
        )
        return self.respond(intent.action, summary, messages)

    async def _fetch_channels(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, TEAMS_CONNECT_MESSAGE)

        channels = await context.collaborators.teams.get_channels(token, limit=self.limit(intent, 10))
        summary = await context.collaborators.summarizer.summarize(
            channels, context.original_text, SummaryKind.TEAMS_CHANNELS
        )
        return self.respond(intent.action, summary, channels)
