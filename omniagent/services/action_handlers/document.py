"""
Document Handler - Google Docs and Word documents.

Every Google Docs action except create resolves the document first
(title → id through Drive, explicit ``documentId`` wins) and stops with
"Could not find doc" when that fails.
"""

from typing import Dict, List

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.environments.google import GOOGLE_DOC_MIME
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    MICROSOFT_SIGN_IN_MESSAGE,
    ActionHandler,
    HandlerContext,
    RouteFn,
)
from omniagent.services.reference_resolver import ReferenceResolver, ResolvedReference


class DocumentHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "document"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [
            ActionTag.CREATE_DOC,
            ActionTag.READ_DOC,
            ActionTag.APPEND_DOC,
            ActionTag.REPLACE_DOC,
            ActionTag.CLEAR_DOC,
            ActionTag.CREATE_WORD_DOC,
            ActionTag.READ_WORD_DOC,
        ]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.CREATE_DOC: self._create_doc,
            ActionTag.READ_DOC: self._read_doc,
            ActionTag.APPEND_DOC: self._append_doc,
            ActionTag.REPLACE_DOC: self._replace_doc,
            ActionTag.CLEAR_DOC: self._clear_doc,
            ActionTag.CREATE_WORD_DOC: self._create_word_doc,
            ActionTag.READ_WORD_DOC: self._read_word_doc,
        }

    # -----------------------------------------------------------------------
    # GOOGLE DOCS
    # -----------------------------------------------------------------------

    async def _create_doc(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        if not params.title:
            return self.respond(intent.action, "Please provide a title.")

        token = await context.google_token()
        doc = await context.collaborators.docs.create_document(token, params.title, params.content)
        return self.respond(intent.action, f"✅ Doc created: {doc.get('title')}", doc)

    async def _read_doc(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = await context.google_token()
        ref = await self._resolve(intent, context, token)
        if not ref.id:
            return self._not_found(intent, ref)

        content = await context.collaborators.docs.read_text(token, ref.id)
        return self.respond(
            intent.action,
            f"✅ Read content from \"{ref.name}\".",
            {"documentId": ref.id, "content": content},
        )

    async def _append_doc(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = await context.google_token()
        ref = await self._resolve(intent, context, token)
        if not ref.id:
            return self._not_found(intent, ref)
        if not intent.parameters.text:
            return self.respond(intent.action, "No text provided.")

        await context.collaborators.docs.append_text(token, ref.id, intent.parameters.text)
        return self.respond(intent.action, f"✅ Added text to \"{ref.name}\".")

    async def _replace_doc(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        token = await context.google_token()
        ref = await self._resolve(intent, context, token)
        if not ref.id:
            return self._not_found(intent, ref)
        # An empty replacement is legal: it deletes the matched text
        if not params.find_text or params.replace_text is None:
            return self.respond(intent.action, "Missing parameters.")

        await context.collaborators.docs.replace_text(token, ref.id, params.find_text, params.replace_text)
        return self.respond(intent.action, "✅ Text replaced.")

    async def _clear_doc(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = await context.google_token()
        ref = await self._resolve(intent, context, token)
        if not ref.id:
            return self._not_found(intent, ref)

        await context.collaborators.docs.clear(token, ref.id)
        return self.respond(intent.action, f"✅ Cleared content of \"{ref.name}\".")

    # -----------------------------------------------------------------------
    # WORD
    # -----------------------------------------------------------------------

    async def _create_word_doc(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)
        if not intent.parameters.title:
            return self.respond(intent.action, "Please provide a title.")

        doc = await context.collaborators.word.create_document(token, intent.parameters.title)
        return self.respond(intent.action, f"✅ Word document created: \"{doc.get('name')}\"", doc)

    async def _read_word_doc(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)

        params = intent.parameters
        resolver = ReferenceResolver(context.collaborators.onedrive.list_by_name)
        ref = await resolver.resolve(token, params.title, params.document_id, ".docx")
        if not ref.id:
            return self.respond(intent.action, f"❌ Could not find Word doc \"{ref.name}\".")

        doc = await context.collaborators.word.read_document(token, ref.id)
        return self.respond(
            intent.action,
            f"✅ Opened \"{ref.name}\". Content preview is limited for Word Online.",
            doc,
        )

    # -----------------------------------------------------------------------
    # HELPERS
    # -----------------------------------------------------------------------

    @staticmethod
    async def _resolve(intent: Intent, context: HandlerContext, token: str) -> ResolvedReference:
        resolver = ReferenceResolver(context.collaborators.drive.list_by_name)
        return await resolver.resolve(
            token,
            display_name=intent.parameters.title,
            explicit_id=intent.parameters.document_id,
            type_hint=GOOGLE_DOC_MIME,
        )

    def _not_found(self, intent: Intent, ref: ResolvedReference) -> ActionResponse:
        return self.respond(intent.action, f"❌ Could not find doc \"{ref.name}\".")
