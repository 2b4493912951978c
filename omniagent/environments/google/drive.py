"""
Google Drive API client - recent files and lookup by name.

API Reference: https://developers.google.com/drive/api/reference/rest/v3/files
"""

import logging
from typing import List, Optional

from omniagent.environments.base import NamedItem, RestClient


logger = logging.getLogger("omniagent.environments.google.drive")


GOOGLE_DOC_MIME = "application/vnd.google-apps.document"
GOOGLE_SHEET_MIME = "application/vnd.google-apps.spreadsheet"


class DriveClient(RestClient):
    """Drive v3 listing for the signed-in account."""

    service_name = "Google Drive"
    BASE_URL = "https://www.googleapis.com/drive/v3"

    async def list_files(self, token: str, limit: int) -> List[dict]:
        """Most recently modified files first."""
        data = await self._make_request(
            "GET",
            "/files",
            token,
            params={
                "pageSize": limit,
                "fields": "files(id, name, mimeType, modifiedTime, size, webViewLink)",
                "orderBy": "modifiedTime desc",
            },
        )
        files = [
            {
                "id": f.get("id", ""),
                "name": f.get("name") or "Untitled",
                "mimeType": f.get("mimeType", ""),
                "modifiedTime": f.get("modifiedTime", ""),
                "size": f.get("size"),
                "webViewLink": f.get("webViewLink"),
            }
            for f in (data or {}).get("files", [])
        ]
        logger.info(f"Fetched {len(files)} Drive files")
        return files

    async def list_by_name(
        self,
        token: str,
        name: str,
        type_hint: Optional[str] = None,
    ) -> List[NamedItem]:
        """
        Files whose name contains ``name``, optionally restricted to a MIME type.

        Trashed files are excluded.
        """
        escaped = name.replace("\\", "\\\\").replace("'", "\\'")
        query = f"name contains '{escaped}' and trashed = false"
        if type_hint:
            query += f" and mimeType = '{type_hint}'"

        data = await self._make_request(
            "GET",
            "/files",
            token,
            params={
                "q": query,
                "pageSize": 10,
                "fields": "files(id, name)",
                "orderBy": "modifiedTime desc",
            },
        )
        return [NamedItem(id=f["id"], name=f.get("name", name)) for f in (data or {}).get("files", [])]
