"""
Intent Schemas - the typed result of parsing one user request.

An Intent names exactly one ActionTag plus the flat parameter bag the
handler for that tag reads. Field names are snake_case in Python and
camelCase on the wire (as the NLU model emits them).
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ActionTag(str, Enum):
    """
    The closed set of actions the agent can perform.

    HELP and NONE have no handler; their intents are answered with the
    intent's natural response.
    """
    # Mail
    FETCH_EMAILS = "fetch_emails"
    SEND_EMAIL = "send_email"
    FETCH_OUTLOOK_EMAILS = "fetch_outlook_emails"
    SEND_OUTLOOK_EMAIL = "send_outlook_email"

    # Files
    FETCH_FILES = "fetch_files"
    FETCH_ONEDRIVE_FILES = "fetch_onedrive_files"

    # Commerce
    FETCH_ORDERS = "fetch_orders"

    # Teams
    FETCH_TEAMS_MESSAGES = "fetch_teams_messages"
    FETCH_TEAMS_CHANNELS = "fetch_teams_channels"

    # Calendar
    CREATE_MEET = "create_meet"
    UPDATE_MEET = "update_meet"
    DELETE_MEET = "delete_meet"
    CREATE_OUTLOOK_EVENT = "create_outlook_event"

    # Spreadsheets
    CREATE_SHEET = "create_sheet"
    READ_SHEET = "read_sheet"
    UPDATE_SHEET = "update_sheet"
    CREATE_EXCEL_SHEET = "create_excel_sheet"
    READ_EXCEL_SHEET = "read_excel_sheet"
    UPDATE_EXCEL_SHEET = "update_excel_sheet"

    # Documents
    CREATE_DOC = "create_doc"
    READ_DOC = "read_doc"
    APPEND_DOC = "append_doc"
    REPLACE_DOC = "replace_doc"
    CLEAR_DOC = "clear_doc"
    CREATE_WORD_DOC = "create_word_doc"
    READ_WORD_DOC = "read_word_doc"

    # Notes
    FETCH_NOTES = "fetch_notes"
    CREATE_NOTE = "create_note"

    # Classroom
    FETCH_COURSES = "fetch_courses"
    FETCH_ASSIGNMENTS = "fetch_assignments"
    FETCH_STUDENTS = "fetch_students"
    CREATE_COURSE = "create_course"

    # Telegram
    FETCH_TELEGRAM_UPDATES = "fetch_telegram_updates"
    SEND_TELEGRAM_MESSAGE = "send_telegram_message"
    MANAGE_TELEGRAM_GROUP = "manage_telegram_group"

    # Meta
    HELP = "help"
    NONE = "none"

    @classmethod
    def from_value(cls, value) -> "ActionTag":
        """Map any raw value to a tag; unknown or missing → NONE."""
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


# Tags answered without a handler
META_ACTIONS = frozenset({ActionTag.HELP, ActionTag.NONE})


class IntentParameters(BaseModel):
    """
    Flat parameter bag. Every field is optional; a field the user did not
    mention stays None.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Fetch
    limit: Optional[int] = None
    search: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None

    # Mail
    to: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None

    # Sheets / Docs
    title: Optional[str] = None
    sheet_name: Optional[str] = None
    spreadsheet_id: Optional[str] = None
    range: Optional[str] = None
    values: Optional[List[List[str]]] = None
    document_id: Optional[str] = None
    content: Optional[str] = None
    text: Optional[str] = None
    find_text: Optional[str] = None
    replace_text: Optional[str] = None

    # Classroom
    course_id: Optional[str] = None
    course_name: Optional[str] = None
    student_name: Optional[str] = None
    name: Optional[str] = None
    section: Optional[str] = None
    description: Optional[str] = None
    room: Optional[str] = None

    # Telegram
    chat_id: Optional[str] = None
    action: Optional[str] = None
    user_id: Optional[str] = None
    message_id: Optional[str] = None
    value: Optional[str] = None


class Intent(BaseModel):
    """
    A parsed request.

    Attributes:
        action: The single action to perform
        parameters: Values taken from the user's text
        uses_context: True when the text refers to something created earlier
        natural_response: Friendly sentence, used verbatim for help/none
        source: "ai" when the NLU model produced it, "fallback" otherwise
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action: ActionTag
    parameters: IntentParameters = Field(default_factory=IntentParameters)
    uses_context: bool = False
    natural_response: str = "Okay."
    source: Literal["ai", "fallback"] = "ai"


# ---------------------------------------------------------------------------
# CAPABILITY SUMMARY
# ---------------------------------------------------------------------------
# Returned for "help" and whenever a request cannot be handled at all.
CAPABILITY_SUMMARY = (
    "I can help with Gmail, Outlook, OneDrive, Docs, Word, Excel, Keep, "
    "Classroom, Shopify, and Teams."
)
