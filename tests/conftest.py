"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Scripted NLU provider (no network)
- Vendor clients replaced by AsyncMocks
- HandlerContext / AgentService built on those fakes
- FastAPI TestClient wired to the fake service
"""

import json
import time
from typing import Generator, List, Optional, Union
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from omniagent.ai.intent import IntentParser
from omniagent.ai.monitoring import ai_monitor
from omniagent.ai.providers import AIProvider, AIResponse, ProviderType
from omniagent.ai.summarizer import ResultSummarizer
from omniagent.environments.base import NamedItem
from omniagent.main import app
from omniagent.routers.agent import get_agent_service
from omniagent.schemas.agent import ProviderCredentials
from omniagent.services.action_handlers import Collaborators, HandlerContext, HandlerRegistry
from omniagent.services.agent_service import AgentService
from omniagent.services.session_context import SessionContextStore


# ---------------------------------------------------------------------------
# NLU PROVIDER
# ---------------------------------------------------------------------------

class ScriptedProvider(AIProvider):
    """
    Returns canned replies in order.

    A dict reply is sent as JSON, a string verbatim; None simulates a
    failed provider call.
    """

    provider_type = ProviderType.OPENAI

    def __init__(self, replies: Optional[List[Union[dict, str, None]]] = None):
        self.model = "scripted"
        self.replies = list(replies or [])
        self.prompts: List[str] = []
        self.system_prompts: List[str] = []

    async def generate(self, prompt, system_prompt=None, temperature=0.0, max_tokens=500, **kwargs):
        self.prompts.append(prompt)
        self.system_prompts.append(system_prompt)

        reply = self.replies.pop(0) if self.replies else None
        if reply is None:
            return self._create_error_response("scripted failure", model=self.model)
        content = reply if isinstance(reply, str) else json.dumps(reply)
        return AIResponse(content=content, provider=self.provider_type, model=self.model)


# ---------------------------------------------------------------------------
# COLLABORATORS
# ---------------------------------------------------------------------------

def make_collaborators() -> Collaborators:
    """
    Every vendor client as an AsyncMock with realistic return values.

    The summarizer's provider always fails, so fetch replies are plain counts.
    """
    collaborators = Collaborators(**{name: AsyncMock() for name in Collaborators.__dataclass_fields__})
    collaborators.summarizer = ResultSummarizer(provider=ScriptedProvider(), timeout=2)

    collaborators.google_auth.get_access_token.return_value = "google-token"

    collaborators.calendar.create_event.side_effect = _fake_calendar_event
    collaborators.calendar.update_event.return_value = {"id": "evt-1"}
    collaborators.calendar.delete_event.return_value = None

    collaborators.gmail.get_emails.return_value = [{"id": "m1", "subject": "Hello"}]
    collaborators.gmail.send_email.return_value = {"id": "sent-1"}
    collaborators.outlook.send_email.return_value = None

    collaborators.drive.list_by_name.return_value = [NamedItem(id="doc-1", name="Budget")]
    collaborators.onedrive.list_by_name.return_value = [NamedItem(id="xl-1", name="Budget.xlsx")]
    collaborators.classroom.list_by_name.return_value = [NamedItem(id="course-1", name="Biology")]

    collaborators.docs.read_text.return_value = "Hello world"
    collaborators.docs.replace_text.return_value = 1
    collaborators.sheets.read_range.return_value = [["a", "b"], ["c", "d"]]
    collaborators.keep.create_note.return_value = {"id": "notes/1", "title": "New Note"}
    collaborators.telegram.send_message.return_value = {"message_id": 10}
    collaborators.telegram.get_updates.return_value = []
    return collaborators


_event_counter = {"n": 0}


async def _fake_calendar_event(token, summary, start, end, description=None):
    _event_counter["n"] += 1
    n = _event_counter["n"]
    return {
        "eventId": f"evt-{n}",
        "meetLink": f"https://meet.google.com/abc-{n}",
        "start": start.isoformat(),
        "end": end.isoformat(),
        "summary": summary,
        "description": description,
    }


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_monitor():
    """Fresh AI monitor stats for each test."""
    ai_monitor.reset()
    yield
    ai_monitor.reset()


@pytest.fixture
def collaborators() -> Collaborators:
    return make_collaborators()


@pytest.fixture
def session() -> SessionContextStore:
    return SessionContextStore()


@pytest.fixture
def credentials() -> ProviderCredentials:
    return ProviderCredentials.model_validate({
        "shopifyConfig": {"storeUrl": "demo.myshopify.com", "accessToken": "shpat_test"},
        "microsoftTokens": {"access_token": "ms-token"},
        "telegramToken": "123456:ABC",
    })


@pytest.fixture
def make_context(collaborators, session, credentials):
    """Factory: HandlerContext for a given request text (and credentials)."""
    def _make(text: str = "test request", creds: Optional[ProviderCredentials] = None) -> HandlerContext:
        return HandlerContext(
            request_id="test-req-123",
            original_text=text,
            credentials=creds if creds is not None else credentials,
            collaborators=collaborators,
            session=session,
            start_time=time.time(),
        )
    return _make


@pytest.fixture
def provider() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture
def service(provider, collaborators, session) -> AgentService:
    return AgentService(
        parser=IntentParser(provider=provider, timeout=2),
        registry=HandlerRegistry(),
        collaborators=collaborators,
        session=session,
    )


@pytest.fixture
def client(service) -> Generator[TestClient, None, None]:
    """TestClient whose /agent routes use the fake-backed service."""
    app.dependency_overrides[get_agent_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
