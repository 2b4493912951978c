"""
OneDrive listing and lookup by name through Microsoft Graph.
"""

import logging
from typing import List, Optional

from omniagent.environments.base import NamedItem
from omniagent.environments.microsoft.graph import GraphClient


logger = logging.getLogger("omniagent.environments.microsoft.onedrive")


class OneDriveClient(GraphClient):
    service_name = "OneDrive"

    async def list_files(self, token: str, limit: int) -> List[dict]:
        data = await self._make_request(
            "GET",
            "/me/drive/recent",
            token,
            params={"$top": limit},
        )
        files = [
            {
                "id": item.get("id"),
                "name": item.get("name"),
                "webUrl": item.get("webUrl"),
                "lastModifiedDateTime": item.get("lastModifiedDateTime"),
                "size": item.get("size"),
            }
            for item in (data or {}).get("value", [])[:limit]
        ]
        logger.info(f"Fetched {len(files)} OneDrive files")
        return files

    async def list_by_name(self, token: str, name: str, type_hint: Optional[str] = None) -> List[NamedItem]:
        """
        Drive search, restricted to files whose name contains ``name``.

        ``type_hint`` is a file extension such as ".xlsx".
        """
        escaped = name.replace("'", "''")
        data = await self._make_request("GET", f"/me/drive/root/search(q='{escaped}')", token)
        needle = name.lower()
        matches = []
        for item in (data or {}).get("value", []):
            item_name = item.get("name", "")
            if needle not in item_name.lower():
                continue
            if type_hint and not item_name.lower().endswith(type_hint):
                continue
            matches.append(NamedItem(id=item["id"], name=item_name))
        return matches
