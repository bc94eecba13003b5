"""
Fluent construction of HubSpot clients.

The builder validates its options when `build()` is called: domain, token and
portal ID must all be set and non-empty.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

import httpx

from .client import AsyncHubspot, Hubspot
from .models.types import DEFAULT_DOMAIN

logger = logging.getLogger(__name__)

ENV_DOMAIN = "HUBSPOT_DOMAIN"
ENV_TOKEN = "HUBSPOT_TOKEN"
ENV_PORTAL_ID = "HUBSPOT_PORTAL_ID"


class HubspotBuilder:
    """HubSpot client builder."""

    def __init__(self) -> None:
        self._domain: str | None = None
        self._token: str | None = None
        self._portal_id: str | None = None
        self._timeout = 30.0
        self._log_requests = False
        self._client: httpx.Client | None = None
        self._async_client: httpx.AsyncClient | None = None
        self._transport: httpx.BaseTransport | None = None
        self._async_transport: httpx.AsyncBaseTransport | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HubspotBuilder:
        """
        Seed a builder from `HUBSPOT_DOMAIN`, `HUBSPOT_TOKEN` and `HUBSPOT_PORTAL_ID`.

        The domain defaults to api.hubapi.com. Missing token or portal ID are
        reported when the client is built.
        """
        env = os.environ if environ is None else environ
        builder = cls().domain(env.get(ENV_DOMAIN) or DEFAULT_DOMAIN)
        if env.get(ENV_TOKEN):
            builder = builder.token(env[ENV_TOKEN])
        if env.get(ENV_PORTAL_ID):
            builder = builder.portal_id(env[ENV_PORTAL_ID])
        logger.debug("Loaded HubSpot settings from environment (domain=%s)", builder._domain)
        return builder

    def build(self) -> Hubspot:
        """
        Create a synchronous client.

        Raises:
            MissingDomainError, MissingTokenError, MissingPortalIdError
        """
        return Hubspot(
            domain=self._domain or "",
            token=self._token or "",
            portal_id=self._portal_id or "",
            timeout=self._timeout,
            log_requests=self._log_requests,
            http_client=self._client,
            transport=self._transport,
        )

    def build_async(self) -> AsyncHubspot:
        """Create an asynchronous client; validates like `build()`."""
        return AsyncHubspot(
            domain=self._domain or "",
            token=self._token or "",
            portal_id=self._portal_id or "",
            timeout=self._timeout,
            log_requests=self._log_requests,
            http_client=self._async_client,
            transport=self._async_transport,
        )

    def domain(self, domain: str) -> HubspotBuilder:
        """The HubSpot API domain, e.g. api.hubapi.com."""
        self._domain = domain
        return self

    def token(self, token: str) -> HubspotBuilder:
        """The private app access token."""
        self._token = token
        return self

    def portal_id(self, portal_id: str) -> HubspotBuilder:
        """The portal (account) ID."""
        self._portal_id = portal_id
        return self

    def client(self, client: httpx.Client) -> HubspotBuilder:
        """A pre-configured httpx client for `build()`."""
        self._client = client
        return self

    def async_client(self, client: httpx.AsyncClient) -> HubspotBuilder:
        """A pre-configured httpx client for `build_async()`."""
        self._async_client = client
        return self

    def timeout(self, seconds: float) -> HubspotBuilder:
        self._timeout = seconds
        return self

    def log_requests(self, enabled: bool = True) -> HubspotBuilder:
        self._log_requests = enabled
        return self

    def transport(self, transport: httpx.BaseTransport) -> HubspotBuilder:
        self._transport = transport
        return self

    def async_transport(self, transport: httpx.AsyncBaseTransport) -> HubspotBuilder:
        self._async_transport = transport
        return self
