"""
Google Sheets API client.

API Reference: https://developers.google.com/sheets/api/reference/rest
"""

import logging
from typing import List, Optional

from omniagent.environments.base import RestClient


logger = logging.getLogger("omniagent.environments.google.sheets")


class SheetsClient(RestClient):
    service_name = "Google Sheets"
    BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"

    async def create_spreadsheet(self, token: str, title: str, sheet_name: Optional[str] = None) -> dict:
        body = {"properties": {"title": title}}
        if sheet_name:
            body["sheets"] = [{"properties": {"title": sheet_name}}]

        sheet = await self._make_request("POST", "", token, json_body=body)
        logger.info(f"Created spreadsheet {sheet.get('spreadsheetId')}")
        return {
            "spreadsheetId": sheet.get("spreadsheetId"),
            "title": sheet.get("properties", {}).get("title", title),
            "spreadsheetUrl": sheet.get("spreadsheetUrl"),
        }

    async def read_range(self, token: str, spreadsheet_id: str, cell_range: str) -> List[list]:
        data = await self._make_request("GET", f"/{spreadsheet_id}/values/{cell_range}", token)
        return (data or {}).get("values", [])

    async def update_range(
        self,
        token: str,
        spreadsheet_id: str,
        cell_range: str,
        values: List[List[str]],
    ) -> dict:
        result = await self._make_request(
            "PUT",
            f"/{spreadsheet_id}/values/{cell_range}",
            token,
            params={"valueInputOption": "USER_ENTERED"},
            json_body={"range": cell_range, "majorDimension": "ROWS", "values": values},
        )
        return result or {}
