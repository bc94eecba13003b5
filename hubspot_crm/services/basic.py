"""
Basic CRUD operations on CRM objects.

Every method is generic over three shapes: properties, properties with history,
and associations. Where nothing is sent, the caller names the shape types and
their declared fields become the query's field selection. Where a value is sent
(create, update), its type is the decoded shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ..models.pagination import ListResult
from ..models.records import (
    HubspotRecord,
    OptionNotDesired,
    field_names,
    shape_type,
)
from ..query import build_query
from .base import ObjectApi

if TYPE_CHECKING:
    from ..clients.http import AsyncHTTPClient, HTTPClient

P = TypeVar("P")
H = TypeVar("H")
A = TypeVar("A")


def _selection_query(
    properties: Any,
    properties_with_history: Any,
    associations: Any,
    *,
    limit: int | None = None,
    after: str | None = None,
    archived: bool = False,
) -> str:
    return build_query(
        limit=limit,
        after=after,
        properties=field_names(properties),
        properties_with_history=field_names(properties_with_history),
        associations=field_names(associations),
        archived=archived,
    )


def _create_body(record: HubspotRecord[Any, Any, Any]) -> dict[str, Any]:
    payload: dict[str, Any] = {"properties": record.properties}
    if isinstance(record.associations, list) and record.associations:
        payload["associations"] = record.associations
    return payload


class BasicApi(ObjectApi["HTTPClient"]):
    """Basic operations for one object type."""

    def list(
        self,
        properties: type[P],
        properties_with_history: type[H] = OptionNotDesired,
        associations: type[A] = OptionNotDesired,
        *,
        limit: int | None = None,
        after: str | None = None,
        archived: bool = False,
    ) -> ListResult[HubspotRecord[P, H, A]]:
        """
        Get a page of objects.

        Args:
            properties: Shape of the properties to return
            properties_with_history: Shape of the properties whose history to return
            associations: Shape of the associations to return
            limit: Maximum number of results per page
            after: Paging cursor from a previous page's `next_cursor`
            archived: Whether to return only archived results

        Returns:
            A page of records. Properties the object has no value for are
            omitted by HubSpot, so shapes should give them defaults.
        """
        query = _selection_query(
            properties,
            properties_with_history,
            associations,
            limit=limit,
            after=after,
            archived=archived,
        )
        req = self._client.begin("GET", f"crm/v3/objects/{self.path()}{query}")
        return self._client.send(
            req, ListResult[HubspotRecord[properties, properties_with_history, associations]]
        )

    def create(
        self,
        record: HubspotRecord[P, Any, Any],
        *,
        properties_with_history: type[H] = OptionNotDesired,
        associations: type[A] = OptionNotDesired,
    ) -> HubspotRecord[P, H, A]:
        """
        Create an object with the record's properties and associations.

        Build `record` with `HubspotRecord.with_properties_and_associations`.
        """
        req = self._client.begin(
            "POST", f"crm/v3/objects/{self.path()}", json=_create_body(record)
        )
        return self._client.send(
            req,
            HubspotRecord[
                shape_type(record.properties), properties_with_history, associations
            ],
        )

    def read(
        self,
        id: str,
        properties: type[P],
        properties_with_history: type[H] = OptionNotDesired,
        associations: type[A] = OptionNotDesired,
        *,
        archived: bool = False,
    ) -> HubspotRecord[P, H, A]:
        """
        Read an object by ID.

        Args:
            id: The object ID
            properties: Shape of the properties to return
            properties_with_history: Shape of the properties whose history to return
            associations: Shape of the associations to return
            archived: Whether to return only archived results
        """
        query = _selection_query(
            properties, properties_with_history, associations, archived=archived
        )
        req = self._client.begin("GET", f"crm/v3/objects/{self.path()}/{id}{query}")
        return self._client.send(
            req, HubspotRecord[properties, properties_with_history, associations]
        )

    def update(
        self, id: str, properties: P
    ) -> HubspotRecord[P, OptionNotDesired, OptionNotDesired]:
        """
        Update an object's properties.

        Properties not provided are left unchanged; read-only and non-existent
        properties cause an error.
        """
        req = self._client.begin(
            "PATCH", f"crm/v3/objects/{self.path()}/{id}", json={"properties": properties}
        )
        return self._client.send(
            req, HubspotRecord[shape_type(properties), OptionNotDesired, OptionNotDesired]
        )

    def archive(self, id: str) -> None:
        """Move an object to the recycling bin."""
        req = self._client.begin("DELETE", f"crm/v3/objects/{self.path()}/{id}")
        self._client.send(req, None)


class AsyncBasicApi(ObjectApi["AsyncHTTPClient"]):
    """Async version of BasicApi."""

    async def list(
        self,
        properties: type[P],
        properties_with_history: type[H] = OptionNotDesired,
        associations: type[A] = OptionNotDesired,
        *,
        limit: int | None = None,
        after: str | None = None,
        archived: bool = False,
    ) -> ListResult[HubspotRecord[P, H, A]]:
        query = _selection_query(
            properties,
            properties_with_history,
            associations,
            limit=limit,
            after=after,
            archived=archived,
        )
        req = self._client.begin("GET", f"crm/v3/objects/{self.path()}{query}")
        return await self._client.send(
            req, ListResult[HubspotRecord[properties, properties_with_history, associations]]
        )

    async def create(
        self,
        record: HubspotRecord[P, Any, Any],
        *,
        properties_with_history: type[H] = OptionNotDesired,
        associations: type[A] = OptionNotDesired,
    ) -> HubspotRecord[P, H, A]:
        req = self._client.begin(
            "POST", f"crm/v3/objects/{self.path()}", json=_create_body(record)
        )
        return await self._client.send(
            req,
            HubspotRecord[
                shape_type(record.properties), properties_with_history, associations
            ],
        )

    async def read(
        self,
        id: str,
        properties: type[P],
        properties_with_history: type[H] = OptionNotDesired,
        associations: type[A] = OptionNotDesired,
        *,
        archived: bool = False,
    ) -> HubspotRecord[P, H, A]:
        query = _selection_query(
            properties, properties_with_history, associations, archived=archived
        )
        req = self._client.begin("GET", f"crm/v3/objects/{self.path()}/{id}{query}")
        return await self._client.send(
            req, HubspotRecord[properties, properties_with_history, associations]
        )

    async def update(
        self, id: str, properties: P
    ) -> HubspotRecord[P, OptionNotDesired, OptionNotDesired]:
        req = self._client.begin(
            "PATCH", f"crm/v3/objects/{self.path()}/{id}", json={"properties": properties}
        )
        return await self._client.send(
            req, HubspotRecord[shape_type(properties), OptionNotDesired, OptionNotDesired]
        )

    async def archive(self, id: str) -> None:
        req = self._client.begin("DELETE", f"crm/v3/objects/{self.path()}/{id}")
        await self._client.send(req, None)
