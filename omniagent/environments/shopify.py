"""
Shopify Admin REST client - recent orders for a connected store.

Credentials (store URL + Admin API access token) come with each request.

API Reference: https://shopify.dev/docs/api/admin-rest/latest/resources/order
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional

from omniagent.core.config import settings
from omniagent.core.timeutils import local_timezone
from omniagent.environments.base import RestClient


logger = logging.getLogger("omniagent.environments.shopify")


class ShopifyClient(RestClient):
    service_name = "Shopify"

    def _get_headers(self, token: str) -> Dict[str, str]:
        return {
            "X-Shopify-Access-Token": token,
            "Accept": "application/json",
        }

    @staticmethod
    def store_base_url(store_url: str) -> str:
        host = store_url.strip().rstrip("/")
        for prefix in ("https://", "http://"):
            if host.startswith(prefix):
                host = host[len(prefix):]
        return f"https://{host}/admin/api/{settings.SHOPIFY_API_VERSION}"

    async def get_orders(
        self,
        store_url: str,
        access_token: str,
        limit: int,
        day: Optional[str] = None,
    ) -> List[dict]:
        """
        Latest orders, newest first.

        Args:
            day: YYYY-MM-DD; restricts to orders created on that day
        """
        params = {"status": "any", "limit": limit, "order": "created_at desc"}
        if day:
            start = datetime.combine(date.fromisoformat(day), time.min, tzinfo=local_timezone())
            params["created_at_min"] = start.isoformat()
            params["created_at_max"] = (start + timedelta(days=1)).isoformat()

        data = await self._make_request(
            "GET",
            "/orders.json",
            access_token,
            params=params,
            base_url=self.store_base_url(store_url),
        )
        orders = [
            {
                "id": o.get("id"),
                "name": o.get("name"),
                "createdAt": o.get("created_at"),
                "totalPrice": o.get("total_price"),
                "currency": o.get("currency"),
                "financialStatus": o.get("financial_status"),
                "fulfillmentStatus": o.get("fulfillment_status"),
                "customer": _customer_name(o.get("customer")),
            }
            for o in (data or {}).get("orders", [])
        ]
        logger.info(f"Fetched {len(orders)} Shopify orders")
        return orders


def _customer_name(customer: Optional[dict]) -> Optional[str]:
    if not customer:
        return None
    name = " ".join(p for p in (customer.get("first_name"), customer.get("last_name")) if p)
    return name or customer.get("email")
