"""HubSpot's structured error body."""

from __future__ import annotations

from .base import HubspotModel


class PlatformErrorContext(HubspotModel):
    properties: list[str]


class PlatformErrorResponse(HubspotModel):
    message: str
    category: str
    context: PlatformErrorContext

    def formatted(self) -> str:
        return f"{self.category}: {self.message}, {self.context.model_dump()}"
