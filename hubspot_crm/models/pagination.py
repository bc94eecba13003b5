"""
Paged results.

Pages are decoded per response. Following the cursor to fetch more pages is left
to the caller.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import Field

from .base import HubspotModel

T = TypeVar("T")


class PagingNext(HubspotModel):
    after: str = ""
    link: str = ""


class Paging(HubspotModel):
    next: PagingNext = Field(default_factory=PagingNext)


class ListResult(HubspotModel, Generic[T]):
    """A page of results plus the cursor for the next page."""

    results: list[T] = Field(default_factory=list)
    paging: Paging = Field(default_factory=Paging)

    @property
    def has_next(self) -> bool:
        return bool(self.paging.next.after)

    @property
    def next_cursor(self) -> str | None:
        """Cursor to pass as `after` for the next page, or None on the last page."""
        return self.paging.next.after or None
