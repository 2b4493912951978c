"""
Notes Handler - Google Keep.
"""

from typing import Dict, List

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import ActionHandler, HandlerContext, RouteFn


class NotesHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "notes"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [ActionTag.FETCH_NOTES, ActionTag.CREATE_NOTE]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.FETCH_NOTES: self._fetch_notes,
            ActionTag.CREATE_NOTE: self._create_note,
        }

    async def _fetch_notes(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = await context.google_token()
        notes = await context.collaborators.keep.list_notes(token, self.limit(intent, 10))
        return self.respond(intent.action, f"✅ Fetched {len(notes)} notes.", notes)

    async def _create_note(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        title = params.title or "New Note"
        content = params.content or params.text or "No content"

        token = await context.google_token()
        note = await context.collaborators.keep.create_note(token, title, content)
        return self.respond(intent.action, f"✅ Created note: \"{title}\"", note)
