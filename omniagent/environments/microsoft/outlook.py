"""
Outlook mail and calendar through Microsoft Graph.

API Reference: https://learn.microsoft.com/graph/api/resources/mail-api-overview
"""

import logging
from datetime import datetime
from typing import List, Optional

from omniagent.environments.microsoft.graph import GraphClient


logger = logging.getLogger("omniagent.environments.microsoft.outlook")


class OutlookClient(GraphClient):
    service_name = "Outlook"

    async def get_emails(self, token: str, limit: int, search: Optional[str] = None) -> List[dict]:
        params = {
            "$top": limit,
            "$select": "id,subject,from,receivedDateTime,bodyPreview,webLink",
        }
        if search:
            # $search cannot be combined with $orderby
            params["$search"] = f'"{search}"'
        else:
            params["$orderby"] = "receivedDateTime desc"

        data = await self._make_request("GET", "/me/messages", token, params=params)
        emails = [
            {
                "id": m.get("id"),
                "subject": m.get("subject") or "(no subject)",
                "from": m.get("from", {}).get("emailAddress", {}).get("address", ""),
                "receivedDateTime": m.get("receivedDateTime"),
                "preview": m.get("bodyPreview", ""),
                "webLink": m.get("webLink"),
            }
            for m in (data or {}).get("value", [])
        ]
        logger.info(f"Fetched {len(emails)} Outlook messages")
        return emails

    async def send_email(self, token: str, to: str, subject: str, body: str) -> None:
        await self._make_request(
            "POST",
            "/me/sendMail",
            token,
            json_body={
                "message": {
                    "subject": subject,
                    "body": {"contentType": "Text", "content": body},
                    "toRecipients": [{"emailAddress": {"address": to}}],
                },
                "saveToSentItems": True,
            },
        )
        logger.info(f"Sent Outlook message to {to}")

    async def create_event(self, token: str, subject: str, start: datetime, end: datetime) -> dict:
        event = await self._make_request(
            "POST",
            "/me/events",
            token,
            json_body={
                "subject": subject,
                "start": {"dateTime": start.replace(tzinfo=None).isoformat(), "timeZone": _tz_name(start)},
                "end": {"dateTime": end.replace(tzinfo=None).isoformat(), "timeZone": _tz_name(end)},
            },
        )
        logger.info(f"Created Outlook event {event.get('id')}")
        return {
            "id": event.get("id"),
            "subject": event.get("subject", subject),
            "start": start.isoformat(),
            "end": end.isoformat(),
            "webLink": event.get("webLink"),
        }


def _tz_name(moment: datetime) -> str:
    return getattr(moment.tzinfo, "key", None) or "UTC"
