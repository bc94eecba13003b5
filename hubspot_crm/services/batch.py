"""
Batch operations on CRM objects.

Batch inputs are always sent in the order the caller supplied them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from ..models.batch import BatchIdInput, BatchInputs, BatchReadInputs, BatchResult
from ..models.records import OptionNotDesired, shape_type
from .base import ObjectApi

if TYPE_CHECKING:
    from ..clients.http import AsyncHTTPClient, HTTPClient

P = TypeVar("P")
H = TypeVar("H")
A = TypeVar("A")


def _read_body(
    ids: Sequence[str],
    properties: Any,
    properties_with_history: Any,
    associations: Any,
    archived: bool | None,
) -> BatchReadInputs:
    return BatchReadInputs(
        properties=properties,
        properties_with_history=properties_with_history,
        associations=associations,
        archived=archived or False,
        inputs=[BatchIdInput(id=i) for i in ids],
    )


def _created_type(objects_to_create: Sequence[Any]) -> Any:
    if not objects_to_create:
        return BatchResult[Any, OptionNotDesired, OptionNotDesired]
    return BatchResult[shape_type(objects_to_create[0]), OptionNotDesired, OptionNotDesired]


class BatchApi(ObjectApi["HTTPClient"]):
    """Batch operations for one object type."""

    def archive(self, ids: Sequence[str]) -> None:
        """Archive a batch of objects by ID."""
        req = self._client.begin(
            "DELETE",
            f"crm/v3/objects/{self.path()}/batch/archive",
            json=BatchInputs.of_ids(ids),
        )
        self._client.send(req, None)

    def create(
        self, objects_to_create: Sequence[P]
    ) -> BatchResult[P, OptionNotDesired, OptionNotDesired]:
        """Create a batch of objects, one per properties value."""
        req = self._client.begin(
            "POST",
            f"crm/v4/objects/{self.path()}",
            json=BatchInputs.of_properties(objects_to_create),
        )
        return self._client.send(req, _created_type(objects_to_create))

    def read(
        self,
        ids: Sequence[str],
        properties: P,
        properties_with_history: H | None = None,
        associations: A | None = None,
        archived: bool | None = None,
    ) -> BatchResult[P, H, A]:
        """
        Read a batch of objects by internal ID.

        The selections are sent in the request body as given, and each result
        is decoded with the type of the corresponding selection value.

        Args:
            ids: Object IDs to read
            properties: Properties selection
            properties_with_history: Properties-with-history selection
            associations: Associations selection
            archived: Whether to read archived objects (default False)
        """
        if properties_with_history is None:
            properties_with_history = OptionNotDesired()  # type: ignore[assignment]
        if associations is None:
            associations = OptionNotDesired()  # type: ignore[assignment]
        req = self._client.begin(
            "POST",
            f"crm/v3/objects/{self.path()}/batch/read",
            json=_read_body(ids, properties, properties_with_history, associations, archived),
        )
        return self._client.send(
            req,
            BatchResult[
                shape_type(properties),
                shape_type(properties_with_history),
                shape_type(associations),
            ],
        )

    def update(
        self, ids: Sequence[str], properties: P
    ) -> BatchResult[P, OptionNotDesired, OptionNotDesired]:
        """Apply the same properties update to every object in `ids`."""
        req = self._client.begin(
            "PATCH",
            f"crm/v3/objects/{self.path()}/batch/update",
            json=BatchInputs.of_updates(ids, properties),
        )
        return self._client.send(
            req, BatchResult[shape_type(properties), OptionNotDesired, OptionNotDesired]
        )


class AsyncBatchApi(ObjectApi["AsyncHTTPClient"]):
    """Async version of BatchApi."""

    async def archive(self, ids: Sequence[str]) -> None:
        req = self._client.begin(
            "DELETE",
            f"crm/v3/objects/{self.path()}/batch/archive",
            json=BatchInputs.of_ids(ids),
        )
        await self._client.send(req, None)

    async def create(
        self, objects_to_create: Sequence[P]
    ) -> BatchResult[P, OptionNotDesired, OptionNotDesired]:
        req = self._client.begin(
            "POST",
            f"crm/v4/objects/{self.path()}",
            json=BatchInputs.of_properties(objects_to_create),
        )
        return await self._client.send(req, _created_type(objects_to_create))

    async def read(
        self,
        ids: Sequence[str],
        properties: P,
        properties_with_history: H | None = None,
        associations: A | None = None,
        archived: bool | None = None,
    ) -> BatchResult[P, H, A]:
        if properties_with_history is None:
            properties_with_history = OptionNotDesired()  # type: ignore[assignment]
        if associations is None:
            associations = OptionNotDesired()  # type: ignore[assignment]
        req = self._client.begin(
            "POST",
            f"crm/v3/objects/{self.path()}/batch/read",
            json=_read_body(ids, properties, properties_with_history, associations, archived),
        )
        return await self._client.send(
            req,
            BatchResult[
                shape_type(properties),
                shape_type(properties_with_history),
                shape_type(associations),
            ],
        )

    async def update(
        self, ids: Sequence[str], properties: P
    ) -> BatchResult[P, OptionNotDesired, OptionNotDesired]:
        req = self._client.begin(
            "PATCH",
            f"crm/v3/objects/{self.path()}/batch/update",
            json=BatchInputs.of_updates(ids, properties),
        )
        return await self._client.send(
            req, BatchResult[shape_type(properties), OptionNotDesired, OptionNotDesired]
        )
