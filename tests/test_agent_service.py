"""
Tests for AgentService - parse → route → respond.

Tests for:
- Follow-up requests resolved through the session store
- The boundary: unexpected failures become the capability summary
"""

from unittest.mock import AsyncMock

import pytest

from omniagent.ai.intent import CAPABILITY_SUMMARY


class TestAgentService:

    @pytest.mark.asyncio
    async def test_create_then_cancel_that_meeting(self, service, collaborators, session, credentials):
        # Provider returns nothing usable, so the keyword parser handles both requests
        created = await service.handle_query("create a meet at 5pm", credentials)

        assert created.action == "create_meet"
        assert "meet.google.com" in created.message
        assert len(session) == 1
        event_id = session.last().external_id

        cancelled = await service.handle_query("cancel that meeting", credentials)

        assert cancelled.action == "delete_meet"
        assert cancelled.message == "✅ Meeting deleted."
        collaborators.calendar.delete_event.assert_awaited_once_with("google-token", event_id)
        assert len(session) == 0

    @pytest.mark.asyncio
    async def test_ai_intent_routed(self, service, provider, collaborators, credentials):
        provider.replies.append({
            "action": "fetch_outlook_emails",
            "parameters": {"limit": 3, "search": "invoice"},
            "naturalResponse": "Fetching Outlook mail.",
        })
        collaborators.outlook.get_emails.return_value = [{"id": "o1"}]

        response = await service.handle_query("any invoices in outlook?", credentials)

        assert response.action == "fetch_outlook_emails"
        assert response.data == [{"id": "o1"}]
        collaborators.outlook.get_emails.assert_awaited_once_with("ms-token", limit=3, search="invoice")

    @pytest.mark.asyncio
    async def test_help_passthrough(self, service, provider):
        provider.replies.append({"action": "help", "naturalResponse": "I can manage mail and meetings."})

        response = await service.handle_query("what can you do?")

        assert response.action == "help"
        assert response.message == "I can manage mail and meetings."

    @pytest.mark.asyncio
    async def test_boundary_returns_capability_summary(self, service, collaborators, credentials):
        collaborators.keep.list_notes.side_effect = RuntimeError("boom")

        response = await service.handle_query("show my notes", credentials)

        assert response.action == "help"
        assert response.message == CAPABILITY_SUMMARY
        assert response.data is None

    @pytest.mark.asyncio
    async def test_boundary_covers_parser_failure(self, service, credentials):
        service.parser = AsyncMock()
        service.parser.parse.side_effect = RuntimeError("parser exploded")

        response = await service.handle_query("create a meet at 5pm", credentials)

        assert response.message == CAPABILITY_SUMMARY

    @pytest.mark.asyncio
    async def test_missing_credentials(self, service):
        response = await service.handle_query("show my shopify orders")

        assert response.action == "fetch_orders"
        assert "Shopify is not connected" in response.message
