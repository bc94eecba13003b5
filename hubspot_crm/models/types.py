"""
Resource kinds and their URL path segments.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

DEFAULT_DOMAIN = "api.hubapi.com"


@runtime_checkable
class ToPath(Protocol):
    """Anything addressable by a CRM path segment."""

    def to_path(self) -> str: ...


class ObjectType(Enum):
    """Objects represent types of relationships or processes."""

    CONTACTS = "contacts"
    COMPANIES = "companies"
    DEALS = "deals"
    LINE_ITEMS = "line_items"

    def to_path(self) -> str:
        return _OBJECT_PATHS[self]


class EngagementType(Enum):
    """Engagements store data from interactions with records."""

    NOTES = "notes"

    def to_path(self) -> str:
        return _ENGAGEMENT_PATHS[self]


# Wire contract, kept separate from enum values and display names.
_OBJECT_PATHS: dict[ObjectType, str] = {
    ObjectType.CONTACTS: "contacts",
    ObjectType.COMPANIES: "companies",
    ObjectType.DEALS: "deals",
    ObjectType.LINE_ITEMS: "line_items",
}

_ENGAGEMENT_PATHS: dict[EngagementType, str] = {
    EngagementType.NOTES: "notes",
}


def path_of(target: ToPath | str) -> str:
    """Resolve a resource kind, or an already-resolved segment, to its path."""
    if isinstance(target, str):
        return target
    return target.to_path()
