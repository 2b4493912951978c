"""
Environments Module - the third-party services actions run against.

environments/
├── __init__.py      # Module exports
├── base.py          # Exceptions + shared httpx RestClient
├── google/          # Gmail, Drive, Docs, Sheets, Calendar, Keep, Classroom
├── microsoft/       # Outlook, OneDrive, Word, Excel, Teams (Graph)
├── shopify.py       # Shopify Admin orders
└── telegram.py      # Telegram Bot API

Every client is stateless apart from its transport and takes the access
token per call. Failures surface as AuthenticationError (missing or
rejected credentials) or APIError (anything else the vendor returns).
"""

from omniagent.environments.base import (
    APIError,
    AuthenticationError,
    EnvironmentError,
    NamedItem,
    RestClient,
    TokenExpiredError,
)
from omniagent.environments.shopify import ShopifyClient
from omniagent.environments.telegram import TelegramClient

__all__ = [
    "EnvironmentError",
    "AuthenticationError",
    "TokenExpiredError",
    "APIError",
    "NamedItem",
    "RestClient",
    "ShopifyClient",
    "TelegramClient",
]
