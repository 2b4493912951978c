"""
Gmail API client - list recent messages and send mail.

API Reference: https://developers.google.com/gmail/api/reference/rest
"""

import base64
import logging
from datetime import date, timedelta
from email.message import EmailMessage
from typing import List, Optional

from omniagent.environments.base import RestClient


logger = logging.getLogger("omniagent.environments.google.gmail")


class GmailClient(RestClient):
    """Read and send mail for the signed-in Google account."""

    service_name = "Gmail"
    BASE_URL = "https://gmail.googleapis.com/gmail/v1/users/me"

    async def get_emails(
        self,
        token: str,
        limit: int,
        search: Optional[str] = None,
        day: Optional[str] = None,
    ) -> List[dict]:
        """
        Fetch message metadata, newest first.

        Args:
            search: Gmail search syntax ("from:alice invoice")
            day: YYYY-MM-DD; restricts results to that calendar day
        """
        query_parts = []
        if search:
            query_parts.append(search)
        if day:
            query_parts.append(f"after:{day.replace('-', '/')}")
            query_parts.append(f"before:{_next_day(day).replace('-', '/')}")

        params = {"maxResults": limit}
        if query_parts:
            params["q"] = " ".join(query_parts)

        listing = await self._make_request("GET", "/messages", token, params=params)
        emails = []
        for ref in (listing or {}).get("messages", []):
            message = await self._make_request(
                "GET",
                f"/messages/{ref['id']}",
                token,
                params={"format": "metadata", "metadataHeaders": ["Subject", "From", "Date"]},
            )
            headers = {
                h["name"].lower(): h["value"]
                for h in message.get("payload", {}).get("headers", [])
            }
            emails.append({
                "id": message["id"],
                "threadId": message.get("threadId", ""),
                "subject": headers.get("subject", "(no subject)"),
                "from": headers.get("from", ""),
                "snippet": message.get("snippet", ""),
                "date": headers.get("date", ""),
            })

        logger.info(f"Fetched {len(emails)} Gmail messages")
        return emails

    async def send_email(self, token: str, to: str, subject: str, body: str) -> dict:
        message = EmailMessage()
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)
        raw = base64.urlsafe_b64encode(message.as_bytes()).decode("ascii")

        result = await self._make_request("POST", "/messages/send", token, json_body={"raw": raw})
        logger.info(f"Sent Gmail message to {to}")
        return result or {}


def _next_day(day: str) -> str:
    return (date.fromisoformat(day) + timedelta(days=1)).isoformat()
