"""
Tests for the action handlers.

Tests for:
- Parameter validation (clarifying messages, no collaborator call)
- Credential checks per provider
- Session store interplay for meetings
- Collaborator arguments

Vendor clients are AsyncMocks (see conftest.make_collaborators).
"""

import asyncio

import pytest

from omniagent.ai.intent import ActionTag, Intent, IntentParameters
from omniagent.ai.summarizer import ResultSummarizer
from omniagent.core.config import settings
from omniagent.environments.google import GOOGLE_DOC_MIME, GOOGLE_SHEET_MIME
from omniagent.schemas.agent import ProviderCredentials
from omniagent.services.action_handlers import (
    ClassroomHandler,
    CommerceHandler,
    DocumentHandler,
    FilesHandler,
    MailHandler,
    MeetingHandler,
    NotesHandler,
    SpreadsheetHandler,
    TeamsHandler,
    TelegramHandler,
)
from omniagent.services.action_handlers.base import (
    MICROSOFT_SIGN_IN_MESSAGE,
    SHOPIFY_CONNECT_MESSAGE,
    TEAMS_CONNECT_MESSAGE,
    TELEGRAM_TOKEN_MESSAGE,
)

from conftest import ScriptedProvider


def make_intent(action: ActionTag, /, **params) -> Intent:
    return Intent(action=action, parameters=IntentParameters(**params))


# ===========================================================================
# MEETING HANDLER
# ===========================================================================

class TestMeetingHandler:
    """Create / update / delete Google Meet events against the session store."""

    @pytest.mark.asyncio
    async def test_create_requires_time(self, make_context, collaborators, session):
        response = await MeetingHandler().handle(make_intent(ActionTag.CREATE_MEET), make_context())

        assert response.message == "🕒 Please tell me the meeting time (e.g. 5pm)"
        assert response.data is None
        collaborators.calendar.create_event.assert_not_awaited()
        collaborators.google_auth.get_access_token.assert_not_awaited()
        assert len(session) == 0

    @pytest.mark.asyncio
    async def test_create_bad_time(self, make_context, collaborators):
        response = await MeetingHandler().handle(
            make_intent(ActionTag.CREATE_MEET, time="teatime"), make_context()
        )

        assert "couldn't understand the time" in response.message
        collaborators.calendar.create_event.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_records_meeting(self, make_context, collaborators, session):
        response = await MeetingHandler().handle(
            make_intent(ActionTag.CREATE_MEET, time="5pm", date="2025-03-01"), make_context()
        )

        assert response.action == "create_meet"
        assert response.message.startswith("✅ Google Meet created!")
        assert "🕒 5:00 pm" in response.message
        assert response.data["meetLink"] in response.message

        kwargs = collaborators.calendar.create_event.await_args.kwargs
        assert kwargs["summary"] == "Google Meet"
        assert kwargs["start"].isoformat().startswith("2025-03-01T17:00")
        assert (kwargs["end"] - kwargs["start"]).total_seconds() == settings.MEETING_DURATION_MINUTES * 60

        assert len(session) == 1
        assert session.last().link == response.data["meetLink"]
        assert session.last().external_id == response.data["eventId"]

    @pytest.mark.asyncio
    async def test_delete_with_empty_store(self, make_context, collaborators):
        response = await MeetingHandler().handle(make_intent(ActionTag.DELETE_MEET), make_context())

        assert response.message == "No meeting found."
        collaborators.calendar.delete_event.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_by_time(self, make_context, collaborators, session):
        handler = MeetingHandler()
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="10am", date="2025-03-01"), make_context())
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="5pm", date="2025-03-01"), make_context())
        morning_id = session.snapshot()[0].external_id

        response = await handler.handle(make_intent(ActionTag.DELETE_MEET, time="10am"), make_context())

        assert response.message == "✅ Meeting deleted."
        collaborators.calendar.delete_event.assert_awaited_once_with("google-token", morning_id)
        assert len(session) == 1
        assert session.find("5pm") != []

    @pytest.mark.asyncio
    async def test_delete_no_match_at_time(self, make_context, collaborators):
        handler = MeetingHandler()
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="5pm"), make_context())

        response = await handler.handle(make_intent(ActionTag.DELETE_MEET, time="9am"), make_context())

        assert response.message == "No meeting found at 9am."
        collaborators.calendar.delete_event.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_without_external_id(self, make_context, collaborators, session):
        collaborators.calendar.create_event.side_effect = None
        collaborators.calendar.create_event.return_value = {"meetLink": "https://meet.google.com/x"}
        handler = MeetingHandler()
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="5pm"), make_context())

        response = await handler.handle(make_intent(ActionTag.DELETE_MEET), make_context())

        assert response.message == "Cannot delete this meeting."
        assert len(session) == 1

    @pytest.mark.asyncio
    async def test_concurrent_cancels_delete_once(self, make_context, collaborators, session):
        async def slow_delete(token, event_id):
            await asyncio.sleep(0.01)

        collaborators.calendar.delete_event.side_effect = slow_delete
        handler = MeetingHandler()
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="5pm"), make_context())

        responses = await asyncio.gather(
            handler.handle(make_intent(ActionTag.DELETE_MEET), make_context()),
            handler.handle(make_intent(ActionTag.DELETE_MEET), make_context()),
        )

        assert sorted(r.message for r in responses) == ["No meeting found.", "✅ Meeting deleted."]
        assert collaborators.calendar.delete_event.await_count == 1
        assert len(session) == 0

    @pytest.mark.asyncio
    async def test_update_no_match_at_time(self, make_context, collaborators, session):
        handler = MeetingHandler()
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="10am", date="2025-03-01"), make_context())
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="5pm", date="2025-03-01"), make_context())

        response = await handler.handle(make_intent(ActionTag.UPDATE_MEET, time="3pm"), make_context())

        assert response.message == "No meeting found at 3pm."
        collaborators.calendar.update_event.assert_not_awaited()
        assert session.find("10am") != []
        assert session.find("5pm") != []

    @pytest.mark.asyncio
    async def test_update_matched_meeting_to_new_date(self, make_context, collaborators, session):
        handler = MeetingHandler()
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="10am", date="2025-03-01"), make_context())
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="5pm", date="2025-03-01"), make_context())
        morning_id = session.snapshot()[0].external_id

        response = await handler.handle(
            make_intent(ActionTag.UPDATE_MEET, time="10am", date="2025-03-02"), make_context()
        )

        assert response.message == "✅ Meeting rescheduled to 10:00 am"
        args = collaborators.calendar.update_event.await_args
        assert args.args == ("google-token", morning_id)
        assert args.kwargs["start"].isoformat().startswith("2025-03-02T10:00")

    @pytest.mark.asyncio
    async def test_update_keeps_time_when_only_date_given(self, make_context, collaborators, session):
        handler = MeetingHandler()
        await handler.handle(make_intent(ActionTag.CREATE_MEET, time="5pm", date="2025-03-01"), make_context())

        await handler.handle(make_intent(ActionTag.UPDATE_MEET, date="2025-03-02"), make_context())

        moved = session.last()
        assert moved.start.isoformat().startswith("2025-03-02T17:00")

    @pytest.mark.asyncio
    async def test_update_with_empty_store(self, make_context, collaborators):
        response = await MeetingHandler().handle(
            make_intent(ActionTag.UPDATE_MEET, time="6pm"), make_context()
        )

        assert response.message == "No meeting found at 6pm."
        collaborators.calendar.update_event.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_outlook_event_requires_sign_in(self, make_context, collaborators):
        response = await MeetingHandler().handle(
            make_intent(ActionTag.CREATE_OUTLOOK_EVENT, time="5pm"),
            make_context(creds=ProviderCredentials()),
        )

        assert response.message == MICROSOFT_SIGN_IN_MESSAGE
        collaborators.outlook.create_event.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_outlook_event(self, make_context, collaborators):
        collaborators.outlook.create_event.return_value = {"id": "o-1", "subject": "Meeting"}

        response = await MeetingHandler().handle(
            make_intent(ActionTag.CREATE_OUTLOOK_EVENT, time="5pm", date="2025-03-01"), make_context()
        )

        assert response.message == "✅ Outlook Calendar event created: \"Meeting\" at 5:00 pm"
        assert collaborators.outlook.create_event.await_args.args == ("ms-token",)


# ===========================================================================
# MAIL HANDLER
# ===========================================================================

class TestMailHandler:

    @pytest.mark.asyncio
    async def test_send_requires_recipient(self, make_context, collaborators):
        response = await MailHandler().handle(make_intent(ActionTag.SEND_EMAIL), make_context())

        assert response.message == "Who should I send the email to?"
        collaborators.gmail.send_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_send_attaches_last_meeting(self, make_context, collaborators, session):
        await MeetingHandler().handle(make_intent(ActionTag.CREATE_MEET, time="5pm"), make_context())
        link = session.last().link

        response = await MailHandler().handle(
            make_intent(ActionTag.SEND_EMAIL, to="bob@example.com"),
            make_context("send the meeting link to bob@example.com"),
        )

        assert response.message == "✅ Email sent."
        kwargs = collaborators.gmail.send_email.await_args.kwargs
        assert kwargs["to"] == "bob@example.com"
        assert kwargs["subject"] == "Meeting Details"
        assert link in kwargs["body"]
        assert "5:00 pm – 5:30 pm" in kwargs["body"]

    @pytest.mark.asyncio
    async def test_send_without_meeting_mention(self, make_context, collaborators, session):
        await MeetingHandler().handle(make_intent(ActionTag.CREATE_MEET, time="5pm"), make_context())

        await MailHandler().handle(
            make_intent(ActionTag.SEND_EMAIL, to="bob@example.com", body="Hi Bob"),
            make_context("email bob@example.com saying hi"),
        )

        assert collaborators.gmail.send_email.await_args.kwargs["body"] == "Hi Bob"

    @pytest.mark.asyncio
    async def test_fetch_limit_capped(self, make_context, collaborators):
        await MailHandler().handle(make_intent(ActionTag.FETCH_EMAILS, limit=5000), make_context())

        assert collaborators.gmail.get_emails.await_args.kwargs["limit"] == settings.MAX_FETCH_LIMIT

    @pytest.mark.asyncio
    async def test_fetch_default_limit(self, make_context, collaborators):
        response = await MailHandler().handle(make_intent(ActionTag.FETCH_EMAILS), make_context())

        assert collaborators.gmail.get_emails.await_args.kwargs["limit"] == 50
        assert response.data == [{"id": "m1", "subject": "Hello"}]

    @pytest.mark.asyncio
    async def test_fetch_rejects_unreadable_date(self, make_context, collaborators):
        response = await MailHandler().handle(
            make_intent(ActionTag.FETCH_EMAILS, date="yesterday"), make_context()
        )

        assert response.message == "📅 I couldn't understand the date \"yesterday\". Please use YYYY-MM-DD."
        collaborators.gmail.get_emails.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fetch_answers_with_summary(self, make_context, collaborators):
        summary_provider = ScriptedProvider(["You have one email from Ann saying hello."])
        collaborators.summarizer = ResultSummarizer(provider=summary_provider)

        response = await MailHandler().handle(
            make_intent(ActionTag.FETCH_EMAILS), make_context("any mail from Ann?")
        )

        assert response.message == "You have one email from Ann saying hello."
        assert response.data == [{"id": "m1", "subject": "Hello"}]
        assert 'User asked: "any mail from Ann?"' in summary_provider.prompts[0]
        assert "(emails)" in summary_provider.prompts[0]

    @pytest.mark.asyncio
    async def test_fetch_summary_failure_gives_count(self, make_context, collaborators):
        response = await MailHandler().handle(make_intent(ActionTag.FETCH_EMAILS), make_context())

        assert response.message == "✅ Found 1 emails."

    @pytest.mark.asyncio
    async def test_outlook_send_defaults(self, make_context, collaborators):
        response = await MailHandler().handle(
            make_intent(ActionTag.SEND_OUTLOOK_EMAIL, to="ann@example.com"), make_context()
        )

        assert response.message == "✅ Outlook email sent successfully."
        assert collaborators.outlook.send_email.await_args.kwargs["subject"] == "No Subject"

    @pytest.mark.asyncio
    async def test_outlook_send_requires_recipient(self, make_context):
        response = await MailHandler().handle(make_intent(ActionTag.SEND_OUTLOOK_EMAIL), make_context())
        assert response.message == "Who should I email?"


# ===========================================================================
# DOCUMENT HANDLER
# ===========================================================================

class TestDocumentHandler:

    @pytest.mark.asyncio
    async def test_create_requires_title(self, make_context, collaborators):
        response = await DocumentHandler().handle(make_intent(ActionTag.CREATE_DOC), make_context())

        assert response.message == "Please provide a title."
        collaborators.docs.create_document.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_read_resolves_title(self, make_context, collaborators):
        response = await DocumentHandler().handle(
            make_intent(ActionTag.READ_DOC, title="Budget"), make_context()
        )

        collaborators.drive.list_by_name.assert_awaited_once_with("google-token", "Budget", GOOGLE_DOC_MIME)
        collaborators.docs.read_text.assert_awaited_once_with("google-token", "doc-1")
        assert response.data == {"documentId": "doc-1", "content": "Hello world"}

    @pytest.mark.asyncio
    async def test_explicit_id_skips_lookup(self, make_context, collaborators):
        await DocumentHandler().handle(
            make_intent(ActionTag.CLEAR_DOC, document_id="xyz"), make_context()
        )

        collaborators.drive.list_by_name.assert_not_awaited()
        collaborators.docs.clear.assert_awaited_once_with("google-token", "xyz")

    @pytest.mark.asyncio
    async def test_not_found_short_circuits(self, make_context, collaborators):
        collaborators.drive.list_by_name.return_value = []

        response = await DocumentHandler().handle(
            make_intent(ActionTag.APPEND_DOC, title="Ghost", text="hi"), make_context()
        )

        assert response.message == "❌ Could not find doc \"Ghost\"."
        collaborators.docs.append_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_append_requires_text(self, make_context, collaborators):
        response = await DocumentHandler().handle(
            make_intent(ActionTag.APPEND_DOC, title="Budget"), make_context()
        )

        assert response.message == "No text provided."
        collaborators.docs.append_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_replace_with_empty_string(self, make_context, collaborators):
        response = await DocumentHandler().handle(
            make_intent(ActionTag.REPLACE_DOC, title="Budget", find_text="DRAFT", replace_text=""),
            make_context(),
        )

        assert response.message == "✅ Text replaced."
        collaborators.docs.replace_text.assert_awaited_once_with("google-token", "doc-1", "DRAFT", "")

    @pytest.mark.asyncio
    async def test_replace_missing_parameters(self, make_context, collaborators):
        response = await DocumentHandler().handle(
            make_intent(ActionTag.REPLACE_DOC, title="Budget", find_text="DRAFT"), make_context()
        )

        assert response.message == "Missing parameters."
        collaborators.docs.replace_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_word_read_not_found(self, make_context, collaborators):
        collaborators.onedrive.list_by_name.return_value = []

        response = await DocumentHandler().handle(
            make_intent(ActionTag.READ_WORD_DOC, title="Report"), make_context()
        )

        assert response.message == "❌ Could not find Word doc \"Report\"."
        collaborators.word.read_document.assert_not_awaited()


# ===========================================================================
# SPREADSHEET HANDLER
# ===========================================================================

class TestSpreadsheetHandler:

    @pytest.mark.asyncio
    async def test_create_requires_title(self, make_context, collaborators):
        response = await SpreadsheetHandler().handle(make_intent(ActionTag.CREATE_SHEET), make_context())

        assert response.message == "Please provide a name for the Google Sheet."
        collaborators.sheets.create_spreadsheet.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_read_default_range(self, make_context, collaborators):
        response = await SpreadsheetHandler().handle(
            make_intent(ActionTag.READ_SHEET, title="Budget"), make_context()
        )

        collaborators.drive.list_by_name.assert_awaited_once_with("google-token", "Budget", GOOGLE_SHEET_MIME)
        collaborators.sheets.read_range.assert_awaited_once_with("google-token", "doc-1", "Sheet1!A1:E10")
        assert response.data == [{"values": ["a", "b"]}, {"values": ["c", "d"]}]

    @pytest.mark.asyncio
    async def test_update_requires_range_and_values(self, make_context, collaborators):
        response = await SpreadsheetHandler().handle(
            make_intent(ActionTag.UPDATE_SHEET, title="Budget", range="A1"), make_context()
        )

        assert response.message == "Please provide the range and values to update."
        collaborators.sheets.update_range.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_excel_append_first_row(self, make_context, collaborators):
        response = await SpreadsheetHandler().handle(
            make_intent(ActionTag.UPDATE_EXCEL_SHEET, title="Budget", values=[["1", "2"], ["3", "4"]]),
            make_context(),
        )

        collaborators.onedrive.list_by_name.assert_awaited_once_with("ms-token", "Budget", ".xlsx")
        collaborators.excel.append_row.assert_awaited_once_with("ms-token", "xl-1", ["1", "2"])
        assert response.message == "✅ Added row to \"Budget.xlsx\"."

    @pytest.mark.asyncio
    async def test_excel_requires_sign_in(self, make_context, collaborators):
        response = await SpreadsheetHandler().handle(
            make_intent(ActionTag.READ_EXCEL_SHEET, title="Budget"),
            make_context(creds=ProviderCredentials()),
        )

        assert response.message == MICROSOFT_SIGN_IN_MESSAGE
        collaborators.onedrive.list_by_name.assert_not_awaited()


# ===========================================================================
# TELEGRAM HANDLER
# ===========================================================================

class TestTelegramHandler:

    @pytest.mark.asyncio
    async def test_token_required(self, make_context, collaborators):
        response = await TelegramHandler().handle(
            make_intent(ActionTag.SEND_TELEGRAM_MESSAGE, chat_id="1", text="hi"),
            make_context(creds=ProviderCredentials()),
        )

        assert response.message == TELEGRAM_TOKEN_MESSAGE
        collaborators.telegram.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_send_requires_chat_and_text(self, make_context, collaborators):
        response = await TelegramHandler().handle(
            make_intent(ActionTag.SEND_TELEGRAM_MESSAGE, chat_id="1"), make_context()
        )

        assert "Chat ID" in response.message
        collaborators.telegram.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_kick(self, make_context, collaborators):
        response = await TelegramHandler().handle(
            make_intent(ActionTag.MANAGE_TELEGRAM_GROUP, chat_id="-100", action="kick", user_id="42"),
            make_context(),
        )

        collaborators.telegram.ban_chat_member.assert_awaited_once_with("123456:ABC", "-100", 42)
        assert response.message.startswith("✅")

    @pytest.mark.asyncio
    async def test_manage_requires_chat_and_action(self, make_context, collaborators):
        response = await TelegramHandler().handle(
            make_intent(ActionTag.MANAGE_TELEGRAM_GROUP, chat_id="-100"), make_context()
        )
        assert response.message == "Missing Chat ID or Action."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [
        {"action": "promote", "user_id": "42"},
        {"action": "kick"},
        {"action": "pin", "user_id": "42"},
        {"action": "title"},
    ])
    async def test_unsupported_makes_no_call(self, make_context, collaborators, params):
        response = await TelegramHandler().handle(
            make_intent(ActionTag.MANAGE_TELEGRAM_GROUP, chat_id="-100", **params), make_context()
        )

        assert response.message == f"⚠️ Action \"{params['action']}\" is not fully supported or missing parameters."
        collaborators.telegram.ban_chat_member.assert_not_awaited()
        collaborators.telegram.pin_chat_message.assert_not_awaited()
        collaborators.telegram.set_chat_title.assert_not_awaited()


# ===========================================================================
# OTHER HANDLERS
# ===========================================================================

class TestOtherHandlers:

    @pytest.mark.asyncio
    async def test_orders_need_shopify(self, make_context, collaborators):
        response = await CommerceHandler().handle(
            make_intent(ActionTag.FETCH_ORDERS), make_context(creds=ProviderCredentials())
        )

        assert response.message == SHOPIFY_CONNECT_MESSAGE
        collaborators.shopify.get_orders.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_orders_for_a_day(self, make_context, collaborators):
        collaborators.shopify.get_orders.return_value = [{"id": 1}]

        response = await CommerceHandler().handle(
            make_intent(ActionTag.FETCH_ORDERS, date="2025-03-01"), make_context()
        )

        collaborators.shopify.get_orders.assert_awaited_once_with(
            "demo.myshopify.com", "shpat_test", limit=5, day="2025-03-01"
        )
        assert response.message == "✅ Found 1 Shopify orders."

    @pytest.mark.asyncio
    async def test_orders_reject_unreadable_date(self, make_context, collaborators):
        response = await CommerceHandler().handle(
            make_intent(ActionTag.FETCH_ORDERS, date="last week"), make_context()
        )

        assert response.message == "📅 I couldn't understand the date \"last week\". Please use YYYY-MM-DD."
        collaborators.shopify.get_orders.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_teams_need_connection(self, make_context, collaborators):
        response = await TeamsHandler().handle(
            make_intent(ActionTag.FETCH_TEAMS_MESSAGES), make_context(creds=ProviderCredentials())
        )
        assert response.message == TEAMS_CONNECT_MESSAGE

    @pytest.mark.asyncio
    async def test_teams_channels_count_when_summary_fails(self, make_context, collaborators):
        collaborators.teams.get_channels.return_value = [{"id": "c1"}, {"id": "c2"}]

        response = await TeamsHandler().handle(make_intent(ActionTag.FETCH_TEAMS_CHANNELS), make_context())

        assert response.message == "✅ Found 2 Teams channels."
        collaborators.teams.get_channels.assert_awaited_once_with("ms-token", limit=10)

    @pytest.mark.asyncio
    async def test_drive_files(self, make_context, collaborators):
        collaborators.drive.list_files.return_value = [{"id": "f1"}, {"id": "f2"}]

        response = await FilesHandler().handle(make_intent(ActionTag.FETCH_FILES), make_context())

        assert response.message == "✅ Found 2 files."
        assert collaborators.drive.list_files.await_args.kwargs["limit"] == 5

    @pytest.mark.asyncio
    async def test_note_defaults(self, make_context, collaborators):
        response = await NotesHandler().handle(make_intent(ActionTag.CREATE_NOTE), make_context())

        collaborators.keep.create_note.assert_awaited_once_with("google-token", "New Note", "No content")
        assert response.message == "✅ Created note: \"New Note\""

    @pytest.mark.asyncio
    async def test_students_filtered_by_name(self, make_context, collaborators):
        collaborators.classroom.list_students.return_value = [
            {"profile": {"name": {"fullName": "Ada Lovelace"}}},
            {"profile": {"name": {"fullName": "Alan Turing"}}},
            {"profile": {}},
        ]

        response = await ClassroomHandler().handle(
            make_intent(ActionTag.FETCH_STUDENTS, course_name="Bio", student_name="ada"), make_context()
        )

        collaborators.classroom.list_students.assert_awaited_once_with("google-token", "course-1")
        assert response.data == [{"profile": {"name": {"fullName": "Ada Lovelace"}}}]

    @pytest.mark.asyncio
    async def test_create_course_requires_name(self, make_context, collaborators):
        response = await ClassroomHandler().handle(make_intent(ActionTag.CREATE_COURSE), make_context())

        assert response.message == "Please provide a name for the classroom."
        collaborators.classroom.create_course.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_course_uses_title(self, make_context, collaborators):
        collaborators.classroom.create_course.return_value = {"name": "Math", "enrollmentCode": "abc12"}

        response = await ClassroomHandler().handle(
            make_intent(ActionTag.CREATE_COURSE, title="Math"), make_context()
        )

        assert "abc12" in response.message
        assert collaborators.classroom.create_course.await_args.kwargs["name"] == "Math"
