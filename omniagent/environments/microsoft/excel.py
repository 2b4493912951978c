"""
Excel workbooks stored in OneDrive, through the Graph workbook API.

API Reference: https://learn.microsoft.com/graph/api/resources/excel
"""

import logging
from typing import List

from omniagent.environments.base import APIError
from omniagent.environments.microsoft.graph import GraphClient


logger = logging.getLogger("omniagent.environments.microsoft.excel")


class ExcelClient(GraphClient):
    service_name = "Excel"

    async def create_workbook(self, token: str, title: str) -> dict:
        filename = title if title.endswith(".xlsx") else f"{title}.xlsx"
        item = await self._make_request(
            "PUT",
            f"/me/drive/root:/{filename}:/content",
            token,
            content=b"",
        )
        logger.info(f"Created Excel workbook {item.get('id')}")
        return {"id": item.get("id"), "name": item.get("name", filename), "webUrl": item.get("webUrl")}

    async def read_rows(self, token: str, file_id: str) -> List[list]:
        """Used range of the first worksheet, row by row."""
        sheet = await self._first_worksheet(token, file_id)
        data = await self._make_request("GET", f"{sheet}/usedRange", token)
        return (data or {}).get("values") or []

    async def append_row(self, token: str, file_id: str, values: List[str]) -> None:
        """
        Append one row to the first table on the first worksheet.

        A table spanning the row width is created when the sheet has none.
        """
        sheet = await self._first_worksheet(token, file_id)
        tables = await self._make_request("GET", f"{sheet}/tables", token)
        existing = (tables or {}).get("value", [])

        if existing:
            table_id = existing[0]["id"]
        else:
            last_column = chr(ord("A") + max(len(values), 1) - 1)
            table = await self._make_request(
                "POST",
                f"{sheet}/tables/add",
                token,
                json_body={"address": f"A1:{last_column}1", "hasHeaders": True},
            )
            table_id = table["id"]

        await self._make_request(
            "POST",
            f"/me/drive/items/{file_id}/workbook/tables/{table_id}/rows",
            token,
            json_body={"values": [values]},
        )
        logger.info(f"Appended row to workbook {file_id}")

    async def _first_worksheet(self, token: str, file_id: str) -> str:
        """Graph path of the workbook's first worksheet."""
        data = await self._make_request("GET", f"/me/drive/items/{file_id}/workbook/worksheets", token)
        sheets = (data or {}).get("value", [])
        if not sheets:
            raise APIError(f"Workbook {file_id} has no worksheets")
        return f"/me/drive/items/{file_id}/workbook/worksheets/{sheets[0]['id']}"
