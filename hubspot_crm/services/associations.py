"""
Associations (v4) between CRM records.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..models.associations import (
    AssociationCreationDetails,
    AssociationLink,
    CreatedAssociationResult,
)
from ..models.pagination import ListResult
from ..models.types import ToPath, path_of
from ..query import build_paging_query
from .base import ObjectApi

if TYPE_CHECKING:
    from ..clients.http import AsyncHTTPClient, HTTPClient


class AssociationsApi(ObjectApi["HTTPClient"]):
    """Manage links between records of this object type and other records."""

    def _pair_path(self, id: str, to_object_type: ToPath | str, to_object_id: str) -> str:
        return (
            f"crm/v4/objects/{self.path()}/{id}/associations/"
            f"{path_of(to_object_type)}/{to_object_id}"
        )

    def list(
        self,
        id: str,
        to_object_type: ToPath | str,
        *,
        limit: int | None = None,
        after: str | None = None,
    ) -> ListResult[AssociationLink]:
        """List a record's associations to one object type. At most 1000 per call."""
        paging_query, _ = build_paging_query(limit, after)
        req = self._client.begin(
            "GET",
            f"crm/v4/objects/{self.path()}/{id}/associations/"
            f"{path_of(to_object_type)}{paging_query}",
        )
        return self._client.send(req, ListResult[AssociationLink])

    def create(
        self,
        id: str,
        to_object_type: ToPath | str,
        to_object_id: str,
        associations_to_create: Sequence[AssociationCreationDetails],
    ) -> CreatedAssociationResult:
        """Set association labels between two records."""
        req = self._client.begin(
            "PUT",
            self._pair_path(id, to_object_type, to_object_id),
            json=list(associations_to_create),
        )
        return self._client.send(req, CreatedAssociationResult)

    def delete(self, id: str, to_object_type: ToPath | str, to_object_id: str) -> None:
        """Delete all associations between two records, whatever their labels."""
        req = self._client.begin("DELETE", self._pair_path(id, to_object_type, to_object_id))
        self._client.send(req, None)


class AsyncAssociationsApi(ObjectApi["AsyncHTTPClient"]):
    """Async version of AssociationsApi."""

    def _pair_path(self, id: str, to_object_type: ToPath | str, to_object_id: str) -> str:
        return (
            f"crm/v4/objects/{self.path()}/{id}/associations/"
            f"{path_of(to_object_type)}/{to_object_id}"
        )

    async def list(
        self,
        id: str,
        to_object_type: ToPath | str,
        *,
        limit: int | None = None,
        after: str | None = None,
    ) -> ListResult[AssociationLink]:
        paging_query, _ = build_paging_query(limit, after)
        req = self._client.begin(
            "GET",
            f"crm/v4/objects/{self.path()}/{id}/associations/"
            f"{path_of(to_object_type)}{paging_query}",
        )
        return await self._client.send(req, ListResult[AssociationLink])

    async def create(
        self,
        id: str,
        to_object_type: ToPath | str,
        to_object_id: str,
        associations_to_create: Sequence[AssociationCreationDetails],
    ) -> CreatedAssociationResult:
        req = self._client.begin(
            "PUT",
            self._pair_path(id, to_object_type, to_object_id),
            json=list(associations_to_create),
        )
        return await self._client.send(req, CreatedAssociationResult)

    async def delete(self, id: str, to_object_type: ToPath | str, to_object_id: str) -> None:
        req = self._client.begin("DELETE", self._pair_path(id, to_object_type, to_object_id))
        await self._client.send(req, None)
