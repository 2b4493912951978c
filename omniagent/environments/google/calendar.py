"""
Google Calendar API client - events with a Google Meet conference attached.

API Reference: https://developers.google.com/calendar/api/v3/reference/events
"""

import logging
import uuid
from datetime import datetime
from typing import Optional

from omniagent.environments.base import APIError, RestClient


logger = logging.getLogger("omniagent.environments.google.calendar")


class CalendarClient(RestClient):
    """
    Create, move and delete events on a calendar.

    ``create_event`` always requests a Meet conference, so the returned
    dict carries ``meetLink`` next to the event id and times.
    """

    service_name = "Google Calendar"
    BASE_URL = "https://www.googleapis.com/calendar/v3"

    async def create_event(
        self,
        token: str,
        summary: str,
        start: datetime,
        end: datetime,
        description: Optional[str] = None,
        calendar_id: str = "primary",
    ) -> dict:
        event_body = {
            "summary": summary,
            "start": {"dateTime": start.isoformat()},
            "end": {"dateTime": end.isoformat()},
            "conferenceData": {
                "createRequest": {
                    "requestId": uuid.uuid4().hex,
                    "conferenceSolutionKey": {"type": "hangoutsMeet"},
                }
            },
        }
        if description:
            event_body["description"] = description

        logger.info(
            "Creating calendar event",
            extra={"summary": summary, "calendar_id": calendar_id},
        )

        event = await self._make_request(
            "POST",
            f"/calendars/{calendar_id}/events",
            token,
            params={"conferenceDataVersion": 1},
            json_body=event_body,
        )

        meet_link = event.get("hangoutLink")
        if not meet_link:
            for entry in event.get("conferenceData", {}).get("entryPoints", []):
                if entry.get("entryPointType") == "video":
                    meet_link = entry.get("uri")
                    break
        if not meet_link:
            raise APIError("Calendar event created without a Meet link", response=event)

        logger.info(f"Created event: {event.get('id')}")
        return {
            "eventId": event.get("id"),
            "meetLink": meet_link,
            "start": event.get("start", {}).get("dateTime", start.isoformat()),
            "end": event.get("end", {}).get("dateTime", end.isoformat()),
            "summary": event.get("summary", summary),
            "description": event.get("description"),
        }

    async def update_event(
        self,
        token: str,
        event_id: str,
        start: datetime,
        end: datetime,
        calendar_id: str = "primary",
    ) -> dict:
        logger.info("Updating calendar event", extra={"event_id": event_id})
        event = await self._make_request(
            "PATCH",
            f"/calendars/{calendar_id}/events/{event_id}",
            token,
            json_body={
                "start": {"dateTime": start.isoformat()},
                "end": {"dateTime": end.isoformat()},
            },
        )
        return event or {}

    async def delete_event(self, token: str, event_id: str, calendar_id: str = "primary") -> None:
        logger.info("Deleting calendar event", extra={"event_id": event_id})
        await self._make_request("DELETE", f"/calendars/{calendar_id}/events/{event_id}", token)
