"""
Cellsynt Gateway Client
=======================
Client, configuration and response handling.

Usage:
    from cellsynt.client import new_client

    client = new_client("username", "password", "MyCompany")
    response = client.send_message(message)
    print(response.tracking_ids)
"""

from .config import ClientConfig, DEFAULT_API_URL
from .response import Response, parse_response
from .client import BaseClient, CellsyntClient, AsyncCellsyntClient, new_client

__all__ = [
    "ClientConfig",
    "DEFAULT_API_URL",
    "Response",
    "parse_response",
    "BaseClient",
    "CellsyntClient",
    "AsyncCellsyntClient",
    "new_client",
]
