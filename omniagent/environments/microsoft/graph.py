"""
Microsoft Graph base client.

Every Microsoft collaborator (Outlook, OneDrive, Word, Excel, Teams) talks to
the same v1.0 endpoint with the user's delegated access token.
"""

import logging
from typing import Dict

from omniagent.environments.base import RestClient


logger = logging.getLogger("omniagent.environments.microsoft")


class GraphClient(RestClient):
    service_name = "Microsoft Graph"
    BASE_URL = "https://graph.microsoft.com/v1.0"

    def _get_headers(self, token: str) -> Dict[str, str]:
        headers = super()._get_headers(token)
        headers["Content-Type"] = "application/json"
        return headers
