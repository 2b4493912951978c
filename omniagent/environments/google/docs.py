"""
Google Docs API client - create, read and edit documents.

Edits go through ``documents.batchUpdate``; reads flatten the structural
body into plain text.

API Reference: https://developers.google.com/docs/api/reference/rest/v1/documents
"""

import logging
from typing import Optional

from omniagent.environments.base import RestClient


logger = logging.getLogger("omniagent.environments.google.docs")


class DocsClient(RestClient):
    service_name = "Google Docs"
    BASE_URL = "https://docs.googleapis.com/v1/documents"

    async def create_document(self, token: str, title: str, content: Optional[str] = None) -> dict:
        doc = await self._make_request("POST", "", token, json_body={"title": title})
        document_id = doc["documentId"]
        if content:
            await self._batch_update(token, document_id, [
                {"insertText": {"location": {"index": 1}, "text": content}},
            ])
        logger.info(f"Created Google Doc {document_id}")
        return {
            "documentId": document_id,
            "title": doc.get("title", title),
            "url": f"https://docs.google.com/document/d/{document_id}/edit",
        }

    async def read_text(self, token: str, document_id: str) -> str:
        doc = await self._make_request("GET", f"/{document_id}", token)
        return extract_text(doc or {})

    async def append_text(self, token: str, document_id: str, text: str) -> None:
        await self._batch_update(token, document_id, [
            {"insertText": {"endOfSegmentLocation": {}, "text": f"\n{text}"}},
        ])

    async def replace_text(self, token: str, document_id: str, find_text: str, replace_text: str) -> int:
        """Replace every occurrence (case-sensitive). Returns the number of replacements."""
        result = await self._batch_update(token, document_id, [
            {
                "replaceAllText": {
                    "containsText": {"text": find_text, "matchCase": True},
                    "replaceText": replace_text,
                }
            },
        ])
        replies = (result or {}).get("replies") or [{}]
        return replies[0].get("replaceAllText", {}).get("occurrencesChanged", 0)

    async def clear(self, token: str, document_id: str) -> None:
        doc = await self._make_request("GET", f"/{document_id}", token)
        content = (doc or {}).get("body", {}).get("content", [])
        end_index = content[-1].get("endIndex", 1) if content else 1
        # The final newline of the body cannot be deleted
        if end_index <= 2:
            return
        await self._batch_update(token, document_id, [
            {"deleteContentRange": {"range": {"startIndex": 1, "endIndex": end_index - 1}}},
        ])

    async def _batch_update(self, token: str, document_id: str, requests: list) -> dict:
        return await self._make_request(
            "POST",
            f"/{document_id}:batchUpdate",
            token,
            json_body={"requests": requests},
        )


def extract_text(document: dict) -> str:
    """Concatenate the text runs of every paragraph in the document body."""
    parts = []
    for element in document.get("body", {}).get("content", []):
        paragraph = element.get("paragraph")
        if not paragraph:
            continue
        for run in paragraph.get("elements", []):
            text_run = run.get("textRun")
            if text_run:
                parts.append(text_run.get("content", ""))
    return "".join(parts)
