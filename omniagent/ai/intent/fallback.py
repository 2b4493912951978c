"""
Keyword Intent Parser - deterministic parsing when the NLU model is
unavailable, slow, or returns something unusable.

Rule groups are checked in a fixed order on the lower-cased text and the
first matching group decides. Only values literally present in the text
are extracted: a time expression for meet actions and an e-mail address
for send_email. Everything else is left for a follow-up question.

    parser = KeywordIntentParser()
    intent = parser.parse("cancel the meet at 5pm")
    # → delete_meet, parameters.time == "5pm"
"""

import logging
import re
from typing import Callable, List, Optional

from omniagent.ai.intent.schemas import (
    ActionTag,
    CAPABILITY_SUMMARY,
    Intent,
    IntentParameters,
)


logger = logging.getLogger("omniagent.ai.intent.fallback")


# ---------------------------------------------------------------------------
# LITERAL EXTRACTION
# ---------------------------------------------------------------------------
_TIME_12H = re.compile(r"\b(\d{1,2}(?::\d{2})?\s*[ap]m)\b", re.IGNORECASE)
_TIME_24H = re.compile(r"\b(\d{1,2}:\d{2})\b")
_EMAIL = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")

_CONTEXT_PHRASES = (
    "this meet",
    "that meet",
    "that link",
    "previous meeting",
    "the meeting",
)


def extract_time(text: str) -> Optional[str]:
    """'Move it to 6:30 pm' → '6:30 pm'; '… at 17:00' → '17:00'."""
    match = _TIME_12H.search(text) or _TIME_24H.search(text)
    return match.group(1).strip() if match else None


def extract_email(text: str) -> Optional[str]:
    match = _EMAIL.search(text)
    return match.group(0) if match else None


def _has(text: str, *words: str) -> bool:
    return any(word in text for word in words)


class KeywordIntentParser:
    """
    Rule-based parser. ``parse`` never raises and never calls out.
    """

    def __init__(self):
        self._rules: List[Callable[[str, str], Optional[Intent]]] = [
            self._mail,
            self._telegram,
            self._teams,
            self._files,
            self._commerce,
            self._meet,
            self._sheets,
            self._docs,
            self._notes,
            self._classroom,
        ]

    def parse(self, text: str) -> Intent:
        lowered = text.lower()
        uses_context = _has(lowered, *_CONTEXT_PHRASES)

        for rule in self._rules:
            intent = rule(lowered, text)
            if intent is not None:
                intent.uses_context = uses_context
                logger.debug(f"Keyword rule {rule.__name__} matched → {intent.action.value}")
                return intent

        return self._intent(ActionTag.HELP, CAPABILITY_SUMMARY)

    # -----------------------------------------------------------------------
    # RULE GROUPS
    # -----------------------------------------------------------------------
    # Each group returns None when its trigger words are absent. A group
    # that triggers but matches no sub-keyword answers with help.

    def _mail(self, q: str, original: str) -> Optional[Intent]:
        if _has(q, "send") and _has(q, "email"):
            return self._intent(
                ActionTag.SEND_EMAIL,
                "Who should I send the email to?",
                to=extract_email(original),
            )
        if _has(q, "outlook"):
            if _has(q, "send"):
                return self._intent(ActionTag.SEND_OUTLOOK_EMAIL, "Who should I email?")
            return self._intent(ActionTag.FETCH_OUTLOOK_EMAILS, "Fetching your Outlook emails.", limit=5)
        if _has(q, "email", "gmail"):
            return self._intent(ActionTag.FETCH_EMAILS, "Fetching your recent emails.", limit=50)
        return None

    def _telegram(self, q: str, original: str) -> Optional[Intent]:
        if not _has(q, "telegram"):
            return None
        if _has(q, "send"):
            return self._intent(
                ActionTag.SEND_TELEGRAM_MESSAGE,
                "I need a Chat ID (or @username) and a message text.",
            )
        return self._intent(ActionTag.FETCH_TELEGRAM_UPDATES, "Fetching recent Telegram messages.", limit=5)

    def _teams(self, q: str, original: str) -> Optional[Intent]:
        if not _has(q, "teams", "message", "chat"):
            return None
        if _has(q, "channel"):
            return self._intent(ActionTag.FETCH_TEAMS_CHANNELS, "Fetching your Teams channels...", limit=10)
        return self._intent(ActionTag.FETCH_TEAMS_MESSAGES, "Fetching your latest Teams messages...", limit=5)

    def _files(self, q: str, original: str) -> Optional[Intent]:
        if _has(q, "onedrive"):
            return self._intent(ActionTag.FETCH_ONEDRIVE_FILES, "Fetching your OneDrive files.", limit=5)
        if _has(q, "drive", "file"):
            return self._intent(ActionTag.FETCH_FILES, "Fetching your Drive files.", limit=50)
        return None

    def _commerce(self, q: str, original: str) -> Optional[Intent]:
        if _has(q, "order", "shopify"):
            return self._intent(ActionTag.FETCH_ORDERS, "Fetching your Shopify orders.", limit=50)
        return None

    def _meet(self, q: str, original: str) -> Optional[Intent]:
        if not _has(q, "meet"):
            return None
        time_hint = extract_time(original)
        if _has(q, "delete", "cancel"):
            return self._intent(
                ActionTag.DELETE_MEET,
                "I can delete the last created Google Meet for you.",
                time=time_hint,
            )
        if _has(q, "update", "reschedule", "move"):
            return self._intent(
                ActionTag.UPDATE_MEET,
                "I can reschedule the last created Google Meet. Please provide new date and/or time.",
                time=time_hint,
            )
        return self._intent(
            ActionTag.CREATE_MEET,
            "I can create a Google Meet. Please provide a date and time if needed.",
            time=time_hint,
        )

    def _sheets(self, q: str, original: str) -> Optional[Intent]:
        if not _has(q, "sheet", "spreadsheet"):
            return None
        if _has(q, "create", "new"):
            return self._intent(ActionTag.CREATE_SHEET, "I can create a new Google Sheet for you.")
        if _has(q, "read", "view", "show"):
            return self._intent(ActionTag.READ_SHEET, "I can read data from the sheet.")
        if _has(q, "update", "edit", "change"):
            return self._intent(ActionTag.UPDATE_SHEET, "I can update values in the sheet.")
        return self._intent(ActionTag.HELP, CAPABILITY_SUMMARY)

    def _docs(self, q: str, original: str) -> Optional[Intent]:
        if not _has(q, "doc", "document"):
            return None
        if _has(q, "create", "new"):
            return self._intent(ActionTag.CREATE_DOC, "I can create a new Google Doc for you.")
        if _has(q, "read", "view", "open"):
            return self._intent(ActionTag.READ_DOC, "I can read the document content.")
        if _has(q, "append", "add"):
            return self._intent(ActionTag.APPEND_DOC, "I can add content to the document.")
        if _has(q, "replace"):
            return self._intent(ActionTag.REPLACE_DOC, "I can replace text in the document.")
        if _has(q, "clear"):
            return self._intent(ActionTag.CLEAR_DOC, "I can clear the document.")
        return self._intent(ActionTag.HELP, CAPABILITY_SUMMARY)

    def _notes(self, q: str, original: str) -> Optional[Intent]:
        if not _has(q, "note", "keep"):
            return None
        if _has(q, "create", "new", "add"):
            return self._intent(ActionTag.CREATE_NOTE, "Creating a new note.")
        return self._intent(ActionTag.FETCH_NOTES, "Fetching your notes.", limit=10)

    def _classroom(self, q: str, original: str) -> Optional[Intent]:
        if not _has(q, "classroom", "course"):
            return None
        if _has(q, "assignment"):
            return self._intent(ActionTag.FETCH_ASSIGNMENTS, "Fetching assignments.", limit=10)
        if _has(q, "student"):
            return self._intent(ActionTag.FETCH_STUDENTS, "Fetching students.")
        if _has(q, "create", "new"):
            return self._intent(ActionTag.CREATE_COURSE, "Please provide a name for the classroom.")
        return self._intent(ActionTag.FETCH_COURSES, "Fetching your classrooms.", limit=10)

    # -----------------------------------------------------------------------
    # HELPERS
    # -----------------------------------------------------------------------

    @staticmethod
    def _intent(action: ActionTag, natural_response: str, **params) -> Intent:
        return Intent(
            action=action,
            parameters=IntentParameters(**{k: v for k, v in params.items() if v is not None}),
            natural_response=natural_response,
            source="fallback",
        )
