"""
Main HubSpot API client.

Provides a unified interface to the CRM object, engagement and owner endpoints.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from .clients.http import AsyncHTTPClient, ClientConfig, HTTPClient
from .models.types import DEFAULT_DOMAIN
from .services.objects import (
    AsyncEngagementsManager,
    AsyncObjectsManager,
    EngagementsManager,
    ObjectsManager,
)
from .services.owners import AsyncOwnerService, OwnerService

if TYPE_CHECKING:
    from .builder import HubspotBuilder


class Hubspot:
    """
    Synchronous HubSpot API client.

    Every operation set shares one transport, so a single client can be used
    for all resource kinds of a portal.

    Example:
        ```python
        from pydantic import BaseModel

        from hubspot_crm import Hubspot, HubspotRecord, OptionNotDesired

        class DealProperties(BaseModel):
            dealname: str | None = None
            pipeline: str | None = None

        with Hubspot(domain="api.hubapi.com", token="pat-...", portal_id="123") as hubspot:
            deal = hubspot.objects.deals.basic.read("9694916196", DealProperties)

            page = hubspot.objects.deals.basic.list(DealProperties, limit=10)
            while page.has_next:
                page = hubspot.objects.deals.basic.list(
                    DealProperties, limit=10, after=page.next_cursor
                )
        ```

    Attributes:
        portal_id: The HubSpot portal (account) ID
        objects: Contacts, companies, deals and line items
        engagements: Notes
        owners: Owner lookups
    """

    def __init__(
        self,
        domain: str = DEFAULT_DOMAIN,
        token: str = "",
        portal_id: str = "",
        *,
        timeout: float = 30.0,
        log_requests: bool = False,
        http_client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the HubSpot client.

        Args:
            domain: API domain (default: api.hubapi.com)
            token: Private app access token
            portal_id: The portal (account) ID
            timeout: Request timeout in seconds
            log_requests: Log all HTTP requests at INFO instead of DEBUG
            http_client: Pre-configured httpx client to send requests with
            transport: httpx transport for the client created here

        Raises:
            HubspotBuilderError: If domain, token or portal_id is empty
        """
        config = ClientConfig(
            domain=domain,
            token=token,
            portal_id=portal_id,
            timeout=timeout,
            log_requests=log_requests,
            http_client=http_client,
            transport=transport,
        )
        self._http = HTTPClient(config)
        self.portal_id = config.portal_id

        self._objects: ObjectsManager | None = None
        self._engagements: EngagementsManager | None = None
        self._owners: OwnerService | None = None

    @staticmethod
    def builder() -> HubspotBuilder:
        """Create a HubspotBuilder."""
        from .builder import HubspotBuilder

        return HubspotBuilder()

    def __enter__(self) -> Hubspot:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._http.close()

    # =========================================================================
    # Service Properties (lazy initialization)
    # =========================================================================

    @property
    def objects(self) -> ObjectsManager:
        """Objects represent types of relationships or processes."""
        if self._objects is None:
            self._objects = ObjectsManager(self._http)
        return self._objects

    @property
    def engagements(self) -> EngagementsManager:
        """Engagements store data from interactions with records."""
        if self._engagements is None:
            self._engagements = EngagementsManager(self._http)
        return self._engagements

    @property
    def owners(self) -> OwnerService:
        """Owner lookups."""
        if self._owners is None:
            self._owners = OwnerService(self._http)
        return self._owners


# =============================================================================
# Async Client (same interface, async methods)
# =============================================================================


class AsyncHubspot:
    """
    Asynchronous HubSpot API client.

    Same interface as Hubspot but with async/await support.

    Example:
        ```python
        async with AsyncHubspot(token="pat-...", portal_id="123") as hubspot:
            deal = await hubspot.objects.deals.basic.read("9694916196", DealProperties)
        ```
    """

    def __init__(
        self,
        domain: str = DEFAULT_DOMAIN,
        token: str = "",
        portal_id: str = "",
        *,
        timeout: float = 30.0,
        log_requests: bool = False,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        config = ClientConfig(
            domain=domain,
            token=token,
            portal_id=portal_id,
            timeout=timeout,
            log_requests=log_requests,
            async_http_client=http_client,
            async_transport=transport,
        )
        self._http = AsyncHTTPClient(config)
        self.portal_id = config.portal_id

        self._objects: AsyncObjectsManager | None = None
        self._engagements: AsyncEngagementsManager | None = None
        self._owners: AsyncOwnerService | None = None

    @property
    def objects(self) -> AsyncObjectsManager:
        if self._objects is None:
            self._objects = AsyncObjectsManager(self._http)
        return self._objects

    @property
    def engagements(self) -> AsyncEngagementsManager:
        if self._engagements is None:
            self._engagements = AsyncEngagementsManager(self._http)
        return self._engagements

    @property
    def owners(self) -> AsyncOwnerService:
        if self._owners is None:
            self._owners = AsyncOwnerService(self._http)
        return self._owners

    async def __aenter__(self) -> AsyncHubspot:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._http.close()
