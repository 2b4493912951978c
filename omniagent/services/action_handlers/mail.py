"""
Mail Handler - Gmail and Outlook.

Handles:
- fetch_emails / send_email (Gmail, server-side Google account)
- fetch_outlook_emails / send_outlook_email (Microsoft token per request)

send_email attaches the most recent session meeting (link and time) when
the request talks about a meet/meeting.

Gmail reads answer with a short summary of what was found.
"""

import logging
import re
from typing import Dict, List

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.ai.summarizer import SummaryKind
from omniagent.core.timeutils import display_time
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    MICROSOFT_SIGN_IN_MESSAGE,
    ActionHandler,
    HandlerContext,
    RouteFn,
)

logger = logging.getLogger("omniagent.services.action_handlers.mail")


_MENTIONS_MEETING = re.compile(r"meet|meeting", re.IGNORECASE)


class MailHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "mail"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [
            ActionTag.FETCH_EMAILS,
            ActionTag.SEND_EMAIL,
            ActionTag.FETCH_OUTLOOK_EMAILS,
            ActionTag.SEND_OUTLOOK_EMAIL,
        ]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {
            ActionTag.FETCH_EMAILS: self._fetch_emails,
            ActionTag.SEND_EMAIL: self._send_email,
            ActionTag.FETCH_OUTLOOK_EMAILS: self._fetch_outlook_emails,
            ActionTag.SEND_OUTLOOK_EMAIL: self._send_outlook_email,
        }

    # -----------------------------------------------------------------------
    # GMAIL
    # -----------------------------------------------------------------------

    async def _fetch_emails(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        problem = self.date_problem(params.date)
        if problem:
            return self.respond(intent.action, problem)

        token = await context.google_token()
        emails = await context.collaborators.gmail.get_emails(
            token,
            limit=self.limit(intent, 50),
            search=params.search,
            day=params.date,
        )
        if not emails:
            return self.respond(intent.action, "✅ Found 0 emails. No matching emails found.", emails)
        summary = await context.collaborators.summarizer.summarize(
            emails, context.original_text, SummaryKind.EMAILS
        )
        return self.respond(intent.action, summary, emails)

    async def _send_email(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        params = intent.parameters
        if not params.to:
            return self.respond(intent.action, "Who should I send the email to?")

        body = params.body or ""
        last = context.session.last()
        if last is not None and _MENTIONS_MEETING.search(context.original_text):
            body += (
                f"\n\n📅 Google Meet\n🔗 {last.link}\n"
                f"🕒 {display_time(last.start)} – {display_time(last.end)}"
            )

        token = await context.google_token()
        await context.collaborators.gmail.send_email(
            token,
            to=params.to,
            subject=params.subject or "Meeting Details",
            body=body,
        )
        logger.info(f"[{context.request_id}] Gmail message sent")
        return self.respond(intent.action, "✅ Email sent.")

    # -----------------------------------------------------------------------
    # OUTLOOK
    # -----------------------------------------------------------------------

    async def _fetch_outlook_emails(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)

        emails = await context.collaborators.outlook.get_emails(
            token,
            limit=self.limit(intent, 5),
            search=intent.parameters.search,
        )
        return self.respond(intent.action, f"✅ Found {len(emails)} Outlook emails.", emails)

    async def _send_outlook_email(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        token = context.credentials.microsoft_access_token
        if not token:
            return self.respond(intent.action, MICROSOFT_SIGN_IN_MESSAGE)

        params = intent.parameters
        if not params.to:
            return self.respond(intent.action, "Who should I email?")

        await context.collaborators.outlook.send_email(
            token,
            to=params.to,
            subject=params.subject or "No Subject",
            body=params.body or "",
        )
        return self.respond(intent.action, "✅ Outlook email sent successfully.")
