"""
HubSpot data models.

All Pydantic models and type definitions are available from this module.
"""

from __future__ import annotations

from .associations import (
    AssociationCreationDetails,
    AssociationLink,
    AssociationTypes,
    CreatedAssociationResult,
)
from .base import HubspotModel
from .batch import (
    BatchIdInput,
    BatchInputs,
    BatchPropertiesInput,
    BatchReadInputs,
    BatchResult,
    BatchUpdateInput,
)
from .engagements import NoteProperties
from .errors import PlatformErrorContext, PlatformErrorResponse
from .owners import Owner, Team
from .pagination import ListResult, Paging, PagingNext
from .records import (
    Association,
    AssociationLinks,
    AssociationsResults,
    AssociationTo,
    AssociationType,
    CreateAssociation,
    HubspotRecord,
    HubspotUpdatedRecord,
    OptionNotDesired,
    field_names,
)
from .types import EngagementType, ObjectType, ToPath

__all__ = [
    # Base
    "HubspotModel",
    # Records
    "HubspotRecord",
    "HubspotUpdatedRecord",
    "OptionNotDesired",
    "field_names",
    "Association",
    "AssociationsResults",
    "AssociationLinks",
    "AssociationTo",
    "AssociationType",
    "CreateAssociation",
    # Pagination
    "ListResult",
    "Paging",
    "PagingNext",
    # Batch
    "BatchIdInput",
    "BatchInputs",
    "BatchPropertiesInput",
    "BatchReadInputs",
    "BatchResult",
    "BatchUpdateInput",
    # Associations (v4)
    "AssociationCreationDetails",
    "AssociationLink",
    "AssociationTypes",
    "CreatedAssociationResult",
    # Owners
    "Owner",
    "Team",
    # Engagements
    "NoteProperties",
    # Errors
    "PlatformErrorContext",
    "PlatformErrorResponse",
    # Types
    "EngagementType",
    "ObjectType",
    "ToPath",
]
