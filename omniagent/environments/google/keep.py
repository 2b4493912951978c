"""
Google Keep API client.

API Reference: https://developers.google.com/keep/api/reference/rest
"""

import logging
from typing import List

from omniagent.environments.base import RestClient


logger = logging.getLogger("omniagent.environments.google.keep")


class KeepClient(RestClient):
    service_name = "Google Keep"
    BASE_URL = "https://keep.googleapis.com/v1"

    async def list_notes(self, token: str, limit: int) -> List[dict]:
        data = await self._make_request("GET", "/notes", token, params={"pageSize": limit})
        return [_to_note(n) for n in (data or {}).get("notes", [])]

    async def create_note(self, token: str, title: str, content: str) -> dict:
        note = await self._make_request(
            "POST",
            "/notes",
            token,
            json_body={"title": title, "body": {"text": {"text": content}}},
        )
        logger.info(f"Created Keep note {note.get('name')}")
        return _to_note(note)


def _to_note(note: dict) -> dict:
    return {
        "id": note.get("name", ""),
        "title": note.get("title") or "Untitled",
        "content": note.get("body", {}).get("text", {}).get("text", ""),
        "updateTime": note.get("updateTime"),
    }
