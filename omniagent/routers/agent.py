"""
Agent Router - HTTP surface for the agent.

This router only does HTTP handling; all business logic lives in
AgentService.

Endpoints:
- POST /agent/query    free-text request → {action, message, data?}
- GET  /agent/context  meetings created in this session (operator view)
- GET  /agent/stats    NLU usage statistics
"""

import logging
import uuid
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status

from omniagent.ai.monitoring import ai_monitor
from omniagent.schemas.agent import AgentQueryRequest, MeetingOut, SessionContextOut
from omniagent.services.agent_service import AgentService, agent_service


# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger("omniagent.routers.agent")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/agent", tags=["agent"])


def get_agent_service() -> AgentService:
    """Dependency hook; tests override it with a service built on fakes."""
    return agent_service


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post("/query")
async def query_agent(
    request: AgentQueryRequest,
    service: AgentService = Depends(get_agent_service),
) -> Dict[str, Any]:
    """
    Run one natural-language request.

    Every handled outcome (including "please connect your account" and
    upstream failures) is a 200 with a user-facing message.

    **Examples:**
    - "create a meet at 5pm"
    - "email the meeting link to bob@example.com"
    - "read my Budget doc"
    """
    if not request.query or not request.query.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query is required",
        )

    request_id = str(uuid.uuid4())[:8]
    response = await service.handle_query(
        request.query.strip(),
        credentials=request.credentials(),
        request_id=request_id,
    )
    return response.to_payload()


@router.get("/context", response_model=SessionContextOut)
async def get_session_context(service: AgentService = Depends(get_agent_service)):
    """Meetings the agent created in this session, oldest first."""
    meetings = service.session.snapshot()
    return SessionContextOut(
        count=len(meetings),
        meetings=[
            MeetingOut(
                external_id=m.external_id,
                link=m.link,
                start=m.start,
                end=m.end,
                title=m.title,
                description=m.description,
            )
            for m in meetings
        ],
    )


@router.get("/stats")
async def get_ai_stats() -> Dict[str, Any]:
    """
    NLU usage statistics: requests, fallbacks, tokens, estimated cost and
    intents by action.
    """
    return ai_monitor.get_stats().to_dict()
