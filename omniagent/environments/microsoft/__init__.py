"""
Microsoft 365 integrations over Microsoft Graph.

The delegated access token arrives with each request; nothing here
refreshes it.
"""

from omniagent.environments.microsoft.excel import ExcelClient
from omniagent.environments.microsoft.graph import GraphClient
from omniagent.environments.microsoft.onedrive import OneDriveClient
from omniagent.environments.microsoft.outlook import OutlookClient
from omniagent.environments.microsoft.teams import TeamsClient
from omniagent.environments.microsoft.word import WordClient


__all__ = [
    "GraphClient",
    "OutlookClient",
    "OneDriveClient",
    "WordClient",
    "ExcelClient",
    "TeamsClient",
]
