"""
Owner service.

Owners are assigned to records through the `hubspot_owner_id` property; this
service looks up their identifying details.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.owners import Owner
from ..query import build_query_string

if TYPE_CHECKING:
    from ..clients.http import AsyncHTTPClient, HTTPClient


class OwnerService:
    """Read access to the owners available in the account."""

    def __init__(self, client: HTTPClient):
        self._client = client

    def read(self, id: str, archived: bool = False) -> Owner:
        """Get the owner with the given ID."""
        query = build_query_string(False, [], [], [], archived)
        req = self._client.begin("GET", f"crm/v3/owners/{id}{query}")
        return self._client.send(req, Owner)


class AsyncOwnerService:
    """Async version of OwnerService."""

    def __init__(self, client: AsyncHTTPClient):
        self._client = client

    async def read(self, id: str, archived: bool = False) -> Owner:
        query = build_query_string(False, [], [], [], archived)
        req = self._client.begin("GET", f"crm/v3/owners/{id}{query}")
        return await self._client.send(req, Owner)
