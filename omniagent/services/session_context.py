"""
Session Context Store - meetings created during this session.

Follow-up requests ("cancel that meeting", "move the 5pm meet to 6") are
resolved against this list instead of the user's whole calendar. The list
is in memory only and belongs to one AgentService.

Concurrency:
    ``add`` takes the lock itself. Update/delete flows hold ``locked()``
    across match → calendar call → mutation, calling the plain
    ``find``/``reschedule``/``remove`` methods inside it, so two concurrent
    cancels cannot remove the same meeting twice.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, replace
from datetime import datetime
from typing import List, Optional

from omniagent.core.timeutils import TimeFormatError, normalize_time, pad_hour, to_hour_minute


logger = logging.getLogger("omniagent.services.session_context")


@dataclass
class CreatedMeeting:
    """
    A meeting created by this agent.

    ``start``/``end`` are timezone-aware. ``external_id`` is the calendar
    event id; without it the meeting cannot be moved or deleted.
    """
    link: str
    start: datetime
    end: datetime
    external_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


def find_matching(entries: List[CreatedMeeting], time_hint: Optional[str] = None) -> List[CreatedMeeting]:
    """
    Meetings a follow-up request refers to.

    - no entries → []
    - no hint → [most recent]
    - hint → entries starting at that HH:MM (configured timezone);
      an unparseable hint matches nothing
    """
    if not entries:
        return []
    if not time_hint:
        return [entries[-1]]

    try:
        wanted = pad_hour(normalize_time(time_hint))
    except TimeFormatError:
        logger.info(f"Unparseable time hint: {time_hint!r}")
        return []

    return [m for m in entries if to_hour_minute(m.start) == wanted]


class SessionContextStore:
    """Ordered, lock-guarded list of CreatedMeeting."""

    def __init__(self):
        self._meetings: List[CreatedMeeting] = []
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._meetings)

    @asynccontextmanager
    async def locked(self):
        async with self._lock:
            yield self

    async def add(self, meeting: CreatedMeeting) -> None:
        async with self._lock:
            self._meetings.append(meeting)
        logger.info(f"Session meeting added ({len(self._meetings)} total)")

    def find(self, time_hint: Optional[str] = None) -> List[CreatedMeeting]:
        return find_matching(self._meetings, time_hint)

    def last(self) -> Optional[CreatedMeeting]:
        return self._meetings[-1] if self._meetings else None

    def reschedule(self, meeting: CreatedMeeting, start: datetime, end: datetime) -> None:
        meeting.start = start
        meeting.end = end

    def remove(self, meeting: CreatedMeeting) -> None:
        # Identity, not equality: two meetings may share a link and time
        self._meetings = [m for m in self._meetings if m is not meeting]

    def snapshot(self) -> List[CreatedMeeting]:
        """Copies of the current entries, oldest first."""
        return [replace(m) for m in self._meetings]

    def clear(self) -> None:
        self._meetings = []
