"""HubSpot API services."""

from __future__ import annotations

from .associations import AssociationsApi, AsyncAssociationsApi
from .basic import AsyncBasicApi, BasicApi
from .batch import AsyncBatchApi, BatchApi
from .objects import (
    AsyncEngagementsManager,
    AsyncObjectApiCollection,
    AsyncObjectsManager,
    EngagementsManager,
    ObjectApiCollection,
    ObjectsManager,
)
from .owners import AsyncOwnerService, OwnerService

__all__ = [
    "AssociationsApi",
    "AsyncAssociationsApi",
    "AsyncBasicApi",
    "AsyncBatchApi",
    "AsyncEngagementsManager",
    "AsyncObjectApiCollection",
    "AsyncObjectsManager",
    "AsyncOwnerService",
    "BasicApi",
    "BatchApi",
    "EngagementsManager",
    "ObjectApiCollection",
    "ObjectsManager",
    "OwnerService",
]
