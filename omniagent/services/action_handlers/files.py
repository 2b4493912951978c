"""
Files Handler - recent Google Drive and OneDrive files.
"""

from typing import Dict, List

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.ai.summarizer import SummaryKind
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    MICROSOFT_SIGN_IN_MESSAGE,
    ActionHandler,
    HandlerContext,
    RouteFn,
)


class FilesHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "files"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [ActionTag.FETCH_FILES, ActionTag.FETCH_ONEDRIVE_FILES]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.FETCH_FILES: self._fetch_files,
            ActionTag.FETCH_ONEDRIVE_FILES: self._fetch_onedrive_files,
        }

    async def _fetch_files(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = await context.google_token()
        files = await context.collaborators.drive.list_files(token, limit=self.limit(intent, 5))
        summary = await context.collaborators.summarizer.summarize(
            files, context.original_text, SummaryKind.FILES
        )
        return self.respond(intent.action, summary, files)

    async def _fetch_onedrive_files(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)

        files = await context.collaborators.onedrive.list_files(token, limit=self.limit(intent, 5))
        return self.respond(intent.action, f"✅ Found {len(files)} OneDrive files.", files)
