"""
Base classes for vendor API integrations.

Every collaborator (Gmail, Drive, Graph, Shopify, Telegram, ...) talks HTTP
through RestClient, so status handling and error mapping live in one place.

Design Pattern: Template Method
===============================
RestClient implements the request/response cycle; subclasses only provide
BASE_URL, headers and the endpoint-level methods.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from omniagent.core.config import settings


logger = logging.getLogger("omniagent.environments")


# ---------------------------------------------------------------------------
# CUSTOM EXCEPTIONS
# ---------------------------------------------------------------------------
# Handlers translate these into user-facing messages; nothing else from a
# collaborator should escape a handler.


class EnvironmentError(Exception):
    """Base exception for all environment-related errors."""
    pass


class AuthenticationError(EnvironmentError):
    """Raised when credentials for a provider are missing or rejected."""
    pass


class TokenExpiredError(AuthenticationError):
    """Raised when an OAuth token has expired and refresh failed."""
    pass


class APIError(EnvironmentError):
    """Raised when an API call to the provider fails."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


# ---------------------------------------------------------------------------
# DATA STRUCTURES
# ---------------------------------------------------------------------------


@dataclass
class NamedItem:
    """
    Minimal listing entry returned by every ``list_by_name`` collaborator.

    The Reference Resolver only needs an id and the canonical name.
    """
    id: str
    name: str


# ---------------------------------------------------------------------------
# REST CLIENT
# ---------------------------------------------------------------------------


class RestClient:
    """
    Shared async HTTP plumbing for vendor clients.

    Subclasses set ``BASE_URL`` and ``service_name`` and may override
    ``_get_headers``. Methods take the access token per call, so a single
    client instance serves every request.

    Args:
        transport: optional httpx transport (tests pass httpx.MockTransport)
    """

    BASE_URL: str = ""
    service_name: str = ""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    def _get_headers(self, token: str) -> Dict[str, str]:
        """Get authorization headers for API requests."""
        return {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        token: str,
        params: Optional[dict] = None,
        json_body: Any = None,
        content: Optional[bytes] = None,
        base_url: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Make an authenticated request and return the decoded JSON body.

        Returns None for empty (204) responses.

        Raises:
            TokenExpiredError: on 401
            APIError: on any other non-2xx status or network failure
        """
        url = f"{base_url or self.BASE_URL}{endpoint}"
        request_headers = self._get_headers(token)
        if headers:
            request_headers.update(headers)

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=request_headers,
                    params=params,
                    json=json_body,
                    content=content,
                    timeout=settings.HTTP_TIMEOUT,
                )
            except httpx.RequestError as e:
                logger.error(f"Network error in {self.service_name} API: {e}")
                raise APIError(f"Network error: {e}")

        if response.status_code == 401:
            logger.error(f"{self.service_name} API: Unauthorized (token may be expired)")
            raise TokenExpiredError(f"{self.service_name} rejected the access token")

        if response.status_code >= 400:
            logger.error(f"{self.service_name} API error: {response.status_code} - {response.text}")
            raise APIError(
                f"{self.service_name} request failed ({response.status_code})",
                status_code=response.status_code,
                response=response.text,
            )

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError:
            return response.text
