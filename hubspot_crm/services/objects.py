"""
Per-resource entry points.

One `ObjectApiCollection` is built per resource kind; all of them share the
client's single transport.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models.types import EngagementType, ObjectType, ToPath
from .associations import AssociationsApi, AsyncAssociationsApi
from .basic import AsyncBasicApi, BasicApi
from .batch import AsyncBatchApi, BatchApi

if TYPE_CHECKING:
    from ..clients.http import AsyncHTTPClient, HTTPClient


class ObjectApiCollection:
    """The basic, batch and associations operation sets of one resource kind."""

    def __init__(self, name: ToPath, client: HTTPClient):
        self.name = name
        self.basic = BasicApi(name, client)
        self.batch = BatchApi(name, client)
        self.associations = AssociationsApi(name, client)

    def __repr__(self) -> str:
        return f"ObjectApiCollection({self.name!r})"


class AsyncObjectApiCollection:
    """Async version of ObjectApiCollection."""

    def __init__(self, name: ToPath, client: AsyncHTTPClient):
        self.name = name
        self.basic = AsyncBasicApi(name, client)
        self.batch = AsyncBatchApi(name, client)
        self.associations = AsyncAssociationsApi(name, client)

    def __repr__(self) -> str:
        return f"AsyncObjectApiCollection({self.name!r})"


class ObjectsManager:
    """
    Objects represent types of relationships or processes.

    Records are individual instances of an object (e.g. John Smith is a
    contact). Associations between records describe how they relate.

    Attributes:
        contacts: Individual people that interact with the business
        companies: Businesses or organizations
        deals: Revenue opportunities tracked through pipeline stages
        line_items: Individual products sold as part of a deal
    """

    def __init__(self, client: HTTPClient):
        self.contacts = ObjectApiCollection(ObjectType.CONTACTS, client)
        self.companies = ObjectApiCollection(ObjectType.COMPANIES, client)
        self.deals = ObjectApiCollection(ObjectType.DEALS, client)
        self.line_items = ObjectApiCollection(ObjectType.LINE_ITEMS, client)


class AsyncObjectsManager:
    """Async version of ObjectsManager."""

    def __init__(self, client: AsyncHTTPClient):
        self.contacts = AsyncObjectApiCollection(ObjectType.CONTACTS, client)
        self.companies = AsyncObjectApiCollection(ObjectType.COMPANIES, client)
        self.deals = AsyncObjectApiCollection(ObjectType.DEALS, client)
        self.line_items = AsyncObjectApiCollection(ObjectType.LINE_ITEMS, client)


class EngagementsManager:
    """
    Engagements, also called activities, store data from interactions with records.

    Attributes:
        notes: Notes add information to the record timeline
    """

    def __init__(self, client: HTTPClient):
        self.notes = ObjectApiCollection(EngagementType.NOTES, client)


class AsyncEngagementsManager:
    """Async version of EngagementsManager."""

    def __init__(self, client: AsyncHTTPClient):
        self.notes = AsyncObjectApiCollection(EngagementType.NOTES, client)
