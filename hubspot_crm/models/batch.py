"""
Batch request envelopes and results.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from .base import HubspotModel
from .records import AssociationsT, HistoryT, HubspotRecord, PropertiesT

InputT = TypeVar("InputT")


class BatchIdInput(HubspotModel):
    id: str


class BatchPropertiesInput(HubspotModel):
    properties: Any


class BatchUpdateInput(HubspotModel):
    id: str
    properties: Any


class BatchInputs(HubspotModel, Generic[InputT]):
    """The `{"inputs": [...]}` envelope shared by batch archive/create/update."""

    inputs: list[InputT] = Field(default_factory=list)

    @classmethod
    def of_ids(cls, ids: Sequence[str]) -> BatchInputs[BatchIdInput]:
        return BatchInputs[BatchIdInput](inputs=[BatchIdInput(id=i) for i in ids])

    @classmethod
    def of_properties(cls, objects: Sequence[Any]) -> BatchInputs[BatchPropertiesInput]:
        return BatchInputs[BatchPropertiesInput](
            inputs=[BatchPropertiesInput(properties=p) for p in objects]
        )

    @classmethod
    def of_updates(cls, ids: Sequence[str], properties: Any) -> BatchInputs[BatchUpdateInput]:
        return BatchInputs[BatchUpdateInput](
            inputs=[BatchUpdateInput(id=i, properties=properties) for i in ids]
        )


class BatchReadInputs(BaseModel):
    """
    Body of a batch read.

    Unlike single-object reads, the selections are sent as the shape values
    themselves rather than as query-string field names. Keys go out in
    snake_case (``properties_with_history``).
    """

    properties: Any
    properties_with_history: Any
    associations: Any
    archived: bool = False
    inputs: list[BatchIdInput] = Field(default_factory=list)


class BatchResult(HubspotModel, Generic[PropertiesT, HistoryT, AssociationsT]):
    status: str
    results: list[HubspotRecord[PropertiesT, HistoryT, AssociationsT]] = Field(
        default_factory=list
    )
    requested_at: datetime | None = None
    started_at: datetime
    completed_at: datetime
    links: dict[str, str] = Field(default_factory=dict)
