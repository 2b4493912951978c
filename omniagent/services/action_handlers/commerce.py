"""
Commerce Handler - Shopify orders for the store connected in the request.
"""

from typing import Dict, List

from omniagent.ai.intent.schemas import ActionTag, Intent
from omniagent.ai.summarizer import SummaryKind
from omniagent.schemas.agent import ActionResponse
from omniagent.services.action_handlers.base import (
    SHOPIFY_CONNECT_MESSAGE,
    ActionHandler,
    HandlerContext,
    RouteFn,
)


class CommerceHandler(ActionHandler):

    @property
    def handler_name(self) -> str:
        return "commerce"

    @property
    def supported_actions(self) -> List[ActionTag]:
        return [ActionTag.FETCH_ORDERS]

    def routes(self) -> Dict[ActionTag, RouteFn]:
        return {ActionTag.FETCH_ORDERS: self._fetch_orders}

    async def _fetch_orders(self, intent: Intent, context: HandlerContext) -> ActionResponse:
        config = context.credentials.shopify_config
        if not config or not config.store_url or not config.access_token:
            return self.respond(intent.action, SHOPIFY_CONNECT_MESSAGE)

        problem = self.date_problem(intent.parameters.date)
        if problem:
            return self.respond(intent.action, problem)

        orders = await context.collaborators.shopify.get_orders(
            config.store_url,
            config.access_token,
            limit=self.limit(intent, 5),
            day=intent.parameters.date,
        )
        summary = await context.collaborators.summarizer.summarize(
            orders, context.original_text, SummaryKind.ORDERS
        )
        return self.respond(intent.action, summary, orders)
