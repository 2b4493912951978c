"""
Action Handlers - one handler per group of related actions.

    registry = HandlerRegistry()
    response = await registry.dispatch(intent, context)
"""

from omniagent.services.action_handlers.base import (
    ActionHandler,
    Collaborators,
    HandlerContext,
)
from omniagent.services.action_handlers.classroom import ClassroomHandler
from omniagent.services.action_handlers.commerce import CommerceHandler
from omniagent.services.action_handlers.document import DocumentHandler
from omniagent.services.action_handlers.files import FilesHandler
from omniagent.services.action_handlers.mail import MailHandler
from omniagent.services.action_handlers.meeting import MeetingHandler
from omniagent.services.action_handlers.notes import NotesHandler
from omniagent.services.action_handlers.registry import HandlerRegistry, default_handlers
from omniagent.services.action_handlers.spreadsheet import SpreadsheetHandler
from omniagent.services.action_handlers.teams import TeamsHandler
from omniagent.services.action_handlers.telegram import TelegramHandler

__all__ = [
    "ActionHandler",
    "Collaborators",
    "HandlerContext",
    "HandlerRegistry",
    "default_handlers",
    "ClassroomHandler",
    "CommerceHandler",
    "DocumentHandler",
    "FilesHandler",
    "MailHandler",
    "MeetingHandler",
    "NotesHandler",
    "SpreadsheetHandler",
    "TeamsHandler",
    "TelegramHandler",
]
