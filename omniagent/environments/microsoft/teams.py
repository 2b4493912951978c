"""
Microsoft Teams channels and channel messages through Graph.

Reads walk joined teams → channels → messages and stop as soon as the
requested number of items has been collected.
"""

import logging
from typing import List

from bs4 import BeautifulSoup

from omniagent.environments.microsoft.graph import GraphClient


logger = logging.getLogger("omniagent.environments.microsoft.teams")

# Fan-out bounds for message collection
MAX_TEAMS_SCANNED = 2
MAX_CHANNELS_PER_TEAM = 2


class TeamsClient(GraphClient):
    service_name = "Microsoft Teams"

    async def _joined_teams(self, token: str) -> List[dict]:
        data = await self._make_request("GET", "/me/joinedTeams", token)
        return (data or {}).get("value", [])

    async def _channels(self, token: str, team_id: str) -> List[dict]:
        data = await self._make_request("GET", f"/teams/{team_id}/channels", token)
        return (data or {}).get("value", [])

    async def get_messages(self, token: str, limit: int) -> List[dict]:
        messages: List[dict] = []
        for team in (await self._joined_teams(token))[:MAX_TEAMS_SCANNED]:
            for channel in (await self._channels(token, team["id"]))[:MAX_CHANNELS_PER_TEAM]:
                data = await self._make_request(
                    "GET",
                    f"/teams/{team['id']}/channels/{channel['id']}/messages",
                    token,
                    params={"$top": limit},
                )
                for message in (data or {}).get("value", []):
                    body = message.get("body", {}).get("content")
                    user = (message.get("from") or {}).get("user") or {}
                    messages.append({
                        "id": message.get("id"),
                        "subject": message.get("subject"),
                        "body": strip_html(body) if body else "No content",
                        "from": user.get("displayName", "Unknown"),
                        "createdDateTime": message.get("createdDateTime"),
                        "webUrl": message.get("webUrl"),
                    })
                    if len(messages) >= limit:
                        return messages
        return messages

    async def get_channels(self, token: str, limit: int) -> List[dict]:
        channels: List[dict] = []
        for team in await self._joined_teams(token):
            for channel in await self._channels(token, team["id"]):
                channels.append({
                    "id": channel.get("id"),
                    "displayName": channel.get("displayName"),
                    "description": channel.get("description"),
                    "membershipType": channel.get("membershipType", "standard"),
                    "webUrl": channel.get("webUrl"),
                })
                if len(channels) >= limit:
                    return channels
        return channels


def strip_html(markup: str, max_length: int = 200) -> str:
    """Visible text of a Graph message body, truncated to ``max_length``."""
    text = BeautifulSoup(markup, "html.parser").get_text(" ", strip=True)
    return text[:max_length]
