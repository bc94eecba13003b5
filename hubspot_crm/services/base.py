"""Common state for operation sets bound to one resource kind."""

from __future__ import annotations

from typing import Generic, TypeVar

from ..models.types import ToPath

ClientT = TypeVar("ClientT")


class ObjectApi(Generic[ClientT]):
    """
    An operation set for one resource kind.

    Holds no state beyond the resource kind and a shared reference to the
    transport client, so instances are safe to use concurrently.
    """

    def __init__(self, name: ToPath, client: ClientT):
        self._name = name
        self._client = client

    @property
    def name(self) -> ToPath:
        return self._name

    def path(self) -> str:
        """The resource kind's path segment for API routes."""
        return self._name.to_path()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
