"""
Word documents stored in OneDrive.

Graph exposes Word files only as drive items: creation uploads an empty
.docx, and body text is not readable without a format conversion.
"""

import logging

from omniagent.environments.microsoft.graph import GraphClient


logger = logging.getLogger("omniagent.environments.microsoft.word")


class WordClient(GraphClient):
    service_name = "Word"

    async def create_document(self, token: str, title: str) -> dict:
        filename = title if title.endswith(".docx") else f"{title}.docx"
        item = await self._make_request(
            "PUT",
            f"/me/drive/root:/{filename}:/content",
            token,
            content=b"",
        )
        logger.info(f"Created Word document {item.get('id')}")
        return {"id": item.get("id"), "name": item.get("name", filename), "webUrl": item.get("webUrl")}

    async def read_document(self, token: str, file_id: str) -> dict:
        """Metadata and link for a Word document; content stays in Word Online."""
        item = await self._make_request("GET", f"/me/drive/items/{file_id}", token)
        return {"id": item.get("id"), "name": item.get("name"), "webUrl": item.get("webUrl")}
