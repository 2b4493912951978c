"""
Google Workspace integrations.

google/
├── auth.py        # Stored-token access and refresh
├── gmail.py       # Gmail
├── drive.py       # Drive listing and lookup by name
├── docs.py        # Google Docs
├── sheets.py      # Google Sheets
├── calendar.py    # Calendar events with Meet links
├── keep.py        # Keep notes
└── classroom.py   # Classroom courses and rosters

All clients share one access token per request, obtained from GoogleAuth.
"""

from omniagent.environments.google.auth import GoogleAuth
from omniagent.environments.google.calendar import CalendarClient
from omniagent.environments.google.classroom import ClassroomClient
from omniagent.environments.google.docs import DocsClient
from omniagent.environments.google.drive import (
    DriveClient,
    GOOGLE_DOC_MIME,
    GOOGLE_SHEET_MIME,
)
from omniagent.environments.google.gmail import GmailClient
from omniagent.environments.google.keep import KeepClient
from omniagent.environments.google.sheets import SheetsClient


__all__ = [
    "GoogleAuth",
    "GmailClient",
    "DriveClient",
    "DocsClient",
    "SheetsClient",
    "CalendarClient",
    "KeepClient",
    "ClassroomClient",
    "GOOGLE_DOC_MIME",
    "GOOGLE_SHEET_MIME",
]
