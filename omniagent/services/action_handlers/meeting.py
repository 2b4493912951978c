"""
Meeting Handler - Google Meet events and Outlook calendar events.

Meetings created here are remembered in the session store so later
requests can say "cancel that meeting" or "move the 5pm meet to 6pm".

Matching rules:
- delete_meet, update_meet: entries starting at ``time``, or the latest one
  when no time is given. No match means nothing is changed.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.core.timeutils import (
    TimeFormatError,
    build_time_window,
    display_time,
    normalize_time,
    to_hour_minute,
)
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    INVALID_DATE_MESSAGE,
    MICROSOFT_SIGN_IN_MESSAGE,
    ActionHandler,
    HandlerContext,
    RouteFn,
)
from omniagent.services.session_context import CreatedMeeting

logger = logging.getLogger("omniagent.services.action_handlers.meeting")


class MeetingHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "meeting"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [
            ActionTag.CREATE_MEET,
            ActionTag.UPDATE_MEET,
            ActionTag.DELETE_MEET,
            ActionTag.CREATE_OUTLOOK_EVENT,
        ]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.CREATE_MEET: self._create_meet,
            ActionTag.UPDATE_MEET: self._update_meet,
            ActionTag.DELETE_MEET: self._delete_meet,
            ActionTag.CREATE_OUTLOOK_EVENT: self._create_outlook_event,
        }

    # -----------------------------------------------------------------------
    # GOOGLE MEET
    # -----------------------------------------------------------------------

    async def _create_meet(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        if not params.time:
            return self.respond(intent.action, "🕒 Please tell me the meeting time (e.g. 5pm)")

        window, problem = self._window(params.date, params.time)
        if problem:
            return self.respond(intent.action, problem)
        start, end = window

        token = await context.google_token()
        event = await context.collaborators.calendar.create_event(
            token,
            summary=params.subject or "Google Meet",
            start=start,
            end=end,
            description=params.body,
        )

        await context.session.add(CreatedMeeting(
            link=event["meetLink"],
            start=start,
            end=end,
            external_id=event.get("eventId"),
            title=event.get("summary"),
            description=event.get("description"),
        ))

        return self.respond(
            intent.action,
            f"✅ Google Meet created!\n🔗 {event['meetLink']}\n🕒 {display_time(start)}",
            event,
        )

    async def _update_meet(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters

        async with context.session.locked() as session:
            matches = session.find(params.time)
            if not matches:
                return self.respond(intent.action, _not_found(params.time))

            target = matches[0]
            if not target.external_id:
                return self.respond(intent.action, "Cannot reschedule this meeting.")

            day = params.date or target.start.date().isoformat()
            hhmm = params.time or to_hour_minute(target.start)
            window, problem = self._window(day, hhmm)
            if problem:
                return self.respond(intent.action, problem)
            start, end = window

            token = await context.google_token()
            await context.collaborators.calendar.update_event(token, target.external_id, start=start, end=end)
            session.reschedule(target, start, end)

        logger.info(f"[{context.request_id}] Meeting {target.external_id} moved to {start.isoformat()}")
        return self.respond(intent.action, f"✅ Meeting rescheduled to {display_time(start)}")

    async def _delete_meet(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        time_hint = intent.parameters.time

        async with context.session.locked() as session:
            matches = session.find(time_hint)
            if not matches:
                return self.respond(intent.action, _not_found(time_hint))

            target = matches[0]
            if not target.external_id:
                return self.respond(intent.action, "Cannot delete this meeting.")

            token = await context.google_token()
            await context.collaborators.calendar.delete_event(token, target.external_id)
            session.remove(target)

        logger.info(f"[{context.request_id}] Meeting {target.external_id} deleted")
        return self.respond(intent.action, "✅ Meeting deleted.")

    # -----------------------------------------------------------------------
    # OUTLOOK
    # -----------------------------------------------------------------------

    async def _create_outlook_event(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)

        params = intent.parameters
        if not params.time:
            return self.respond(intent.action, "🕒 Please provide a time for the event.")

        window, problem = self._window(params.date, params.time)
        if problem:
            return self.respond(intent.action, problem)
        start, end = window

        event = await context.collaborators.outlook.create_event(
            token,
            subject=params.subject or "Meeting",
            start=start,
            end=end,
        )
        return self.respond(
            intent.action,
            f"✅ Outlook Calendar event created: \"{event.get('subject')}\" at {display_time(start)}",
            event,
        )

    # -----------------------------------------------------------------------
    # HELPERS
    # -----------------------------------------------------------------------

    @staticmethod
    def _window(day: Optional[str], spoken_time: str) -> Tuple[Optional[Tuple[datetime, datetime]], Optional[str]]:
        """(start, end) or a clarifying message when the date/time is unusable."""
        try:
            hhmm = normalize_time(spoken_time)
        except TimeFormatError:
            return None, f"🕒 I couldn't understand the time \"{spoken_time}\". Try something like 5pm or 17:00."
        try:
            return build_time_window(day, hhmm), None
        except ValueError:
            return None, INVALID_DATE_MESSAGE.format(day=day)


def _not_found(time_hint: Optional[str]) -> str:
    return f"No meeting found{f' at {time_hint}' if time_hint else ''}."
