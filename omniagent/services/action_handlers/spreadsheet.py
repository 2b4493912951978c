"""
Spreadsheet Handler - Google Sheets and Excel workbooks.

Sheets are referred to by title or id; titles are resolved through the
Drive listing (Google) or OneDrive search (Excel).
"""

from typing import Dict, List

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.environments.google import GOOGLE_SHEET_MIME
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    MICROSOFT_SIGN_IN_MESSAGE,
    ActionHandler,
    HandlerContext,
    RouteFn,
)
from omniagent.services.reference_resolver import ReferenceResolver


DEFAULT_SHEET_RANGE = "Sheet1!A1:E10"


class SpreadsheetHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "spreadsheet"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [
            ActionTag.CREATE_SHEET,
            ActionTag.READ_SHEET,
            ActionTag.UPDATE_SHEET,
            ActionTag.CREATE_EXCEL_SHEET,
            ActionTag.READ_EXCEL_SHEET,
            ActionTag.UPDATE_EXCEL_SHEET,
        ]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.CREATE_SHEET: self._create_sheet,
            ActionTag.READ_SHEET: self._read_sheet,
            ActionTag.UPDATE_SHEET: self._update_sheet,
            ActionTag.CREATE_EXCEL_SHEET: self._create_excel,
            ActionTag.READ_EXCEL_SHEET: self._read_excel,
            ActionTag.UPDATE_EXCEL_SHEET: self._update_excel,
        }

    # -----------------------------------------------------------------------
    # GOOGLE SHEETS
    # -----------------------------------------------------------------------

    async def _create_sheet(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        if not params.title:
            return self.respond(intent.action, "Please provide a name for the Google Sheet.")

        token = await context.google_token()
        sheet = await context.collaborators.sheets.create_spreadsheet(
            token,
            title=params.title,
            sheet_name=params.sheet_name,
        )
        return self.respond(
            intent.action,
            f"✅ Google Sheet created successfully!\n📄 {sheet.get('spreadsheetUrl')}",
            sheet,
        )

    async def _read_sheet(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        token = await context.google_token()
        ref = await self._google_resolver(context).resolve(
            token, params.title, params.spreadsheet_id, GOOGLE_SHEET_MIME
        )
        if not ref.id:
            return self.respond(intent.action, f"❌ Could not find a spreadsheet named \"{ref.name}\".")

        raw_rows = await context.collaborators.sheets.read_range(
            token, ref.id, params.range or DEFAULT_SHEET_RANGE
        )
        rows = [{"values": row} for row in raw_rows]
        return self.respond(intent.action, f"✅ Read {len(rows)} rows from \"{ref.name}\".", rows)

    async def _update_sheet(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        token = await context.google_token()
        ref = await self._google_resolver(context).resolve(
            token, params.title, params.spreadsheet_id, GOOGLE_SHEET_MIME
        )
        if not ref.id:
            return self.respond(intent.action, f"❌ Could not find spreadsheet \"{ref.name}\".")
        if not params.range or not params.values:
            return self.respond(intent.action, "Please provide the range and values to update.")

        await context.collaborators.sheets.update_range(token, ref.id, params.range, params.values)
        return self.respond(intent.action, f"✅ Updated \"{ref.name}\" successfully.")

    # -----------------------------------------------------------------------
    # EXCEL
    # -----------------------------------------------------------------------

    async def _create_excel(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)
        if not intent.parameters.title:
            return self.respond(intent.action, "Please provide a title.")

        workbook = await context.collaborators.excel.create_workbook(token, intent.parameters.title)
        return self.respond(intent.action, f"✅ Excel workbook created: \"{workbook.get('name')}\"", workbook)

    async def _read_excel(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)

        params = intent.parameters
        ref = await self._onedrive_resolver(context).resolve(token, params.title, params.spreadsheet_id, ".xlsx")
        if not ref.id:
            return self.respond(intent.action, f"❌ Could not find Excel file \"{ref.name}\".")

        raw_rows = await context.collaborators.excel.read_rows(token, ref.id)
        rows = [{"values": row} for row in raw_rows]
        return self.respond(intent.action, f"✅ Read {len(rows)} rows from \"{ref.name}\".", rows)

    async def _update_excel(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)

        params = intent.parameters
        ref = await self._onedrive_resolver(context).resolve(token, params.title, params.spreadsheet_id, ".xlsx")
        if not ref.id:
            return self.respond(intent.action, f"❌ Could not find Excel file \"{ref.name}\".")
        if not params.values or not params.values[0]:
            return self.respond(intent.action, "Please provide values to append (row data).")

        await context.collaborators.excel.append_row(token, ref.id, params.values[0])
        return self.respond(intent.action, f"✅ Added row to \"{ref.name}\".")

    # -----------------------------------------------------------------------
    # HELPERS
    # -----------------------------------------------------------------------

    @staticmethod
    def _google_resolver(context: HandlerContext) -> ReferenceResolver:
        return ReferenceResolver(context.collaborators.drive.list_by_name)

    @staticmethod
    def _onedrive_resolver(context: HandlerContext) -> ReferenceResolver:
        return ReferenceResolver(context.collaborators.onedrive.list_by_name)
