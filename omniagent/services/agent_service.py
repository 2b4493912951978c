"""
Agent Service - one free-text request in, one ActionResponse out.

Pipeline:
1. IntentParser: text → Intent (AI first, keyword fallback)
2. HandlerRegistry: Intent → handler → collaborator call
3. ActionResponse back to the router

Everything runs inside one try/except: whatever escapes the pipeline is
logged with its traceback and the user gets the capability summary.
"""

import logging
import time
import uuid
from typing import Optional

from omniagent.ai.intent import CAPABILITY_SUMMARY, ActionTag, IntentParser, intent_parser
from omniagent.schemas.agent import ActionResponse, ProviderCredentials
from omniagent.services.action_handlers import Collaborators, HandlerContext, HandlerRegistry
from omniagent.services.session_context import SessionContextStore

logger = logging.getLogger("omniagent.services.agent")


class AgentService:
    """
    Owns the parser, the handler registry, the vendor clients and the
    session store for one operator.

    Args:
        parser: Intent parser (default: module singleton)
        registry: Routing table (default: all built-in handlers)
        collaborators: Vendor clients (default: real httpx clients)
        session: Meetings created in this session
    """

    def __init__(
        self,
        parser: Optional[IntentParser] = None,
        registry: Optional[HandlerRegistry] = None,
        collaborators: Optional[Collaborators] = None,
        session: Optional[SessionContextStore] = None,
    ):
        self.parser = parser or intent_parser
        self.registry = registry or HandlerRegistry()
        self.collaborators = collaborators or Collaborators()
        self.session = session if session is not None else SessionContextStore()
        logger.info("Agent service initialized")

    # -----------------------------------------------------------------------
    # MAIN ENTRY POINT
    # -----------------------------------------------------------------------

    async def handle_query(
        self,
        text: str,
        credentials: Optional[ProviderCredentials] = None,
        request_id: Optional[str] = None,
    ) -> ActionResponse:
        """
        Process one request. Never raises.

        Args:
            text: The user's request
            credentials: Per-request Shopify / Microsoft / Telegram credentials
            request_id: Correlates log lines (generated if omitted)
        """
        start_time = time.time()
        request_id = request_id or str(uuid.uuid4())[:8]
        logger.info(f"[{request_id}] Query received: {text[:80]!r}")

        try:
            intent = await self.parser.parse(text, request_id=request_id)
            logger.info(
                f"[{request_id}] Intent {intent.action.value} ({intent.source})",
                extra={"action": intent.action.value, "source": intent.source},
            )

            context = HandlerContext(
                request_id=request_id,
                original_text=text,
                credentials=credentials or ProviderCredentials(),
                collaborators=self.collaborators,
                session=self.session,
                start_time=start_time,
            )
            response = await self.registry.dispatch(intent, context)

        except Exception:
            logger.exception(f"[{request_id}] Request failed")
            return ActionResponse(action=ActionTag.HELP.value, message=CAPABILITY_SUMMARY)

        processing_time_ms = (time.time() - start_time) * 1000
        logger.info(f"[{request_id}] Responded with {response.action} in {processing_time_ms:.0f}ms")
        return response


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
agent_service = AgentService()
