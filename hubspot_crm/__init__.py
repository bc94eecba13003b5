"""
Typed client for the HubSpot CRM API.

Example:
    ```python
    from hubspot_crm import Hubspot

    hubspot = Hubspot.builder().domain("api.hubapi.com").token("pat-...").portal_id("123").build()
    ```
"""

from __future__ import annotations

from .builder import HubspotBuilder
from .client import AsyncHubspot, Hubspot
from .exceptions import (
    HttpError,
    HubspotBuilderError,
    HubspotError,
    HubspotServiceError,
    JsonError,
    MissingDomainError,
    MissingPortalIdError,
    MissingTokenError,
    ResponseDecodeError,
)
from .models import (
    AssociationCreationDetails,
    AssociationLinks,
    AssociationsResults,
    AssociationType,
    BatchResult,
    EngagementType,
    HubspotRecord,
    HubspotUpdatedRecord,
    ListResult,
    NoteProperties,
    ObjectType,
    OptionNotDesired,
    Owner,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncHubspot",
    "Hubspot",
    "HubspotBuilder",
    # Errors
    "HttpError",
    "HubspotBuilderError",
    "HubspotError",
    "HubspotServiceError",
    "JsonError",
    "MissingDomainError",
    "MissingPortalIdError",
    "MissingTokenError",
    "ResponseDecodeError",
    # Models
    "AssociationCreationDetails",
    "AssociationLinks",
    "AssociationsResults",
    "AssociationType",
    "BatchResult",
    "EngagementType",
    "HubspotRecord",
    "HubspotUpdatedRecord",
    "ListResult",
    "NoteProperties",
    "ObjectType",
    "OptionNotDesired",
    "Owner",
]
