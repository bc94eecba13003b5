"""
Association (v4) models.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from .base import HubspotModel


class AssociationTypes(HubspotModel):
    # HUBSPOT_DEFINED or USER_DEFINED
    category: str
    type_id: str
    label: str | None = None


class AssociationLink(HubspotModel):
    """A directed link from the requested record to another record."""

    to_object_id: str
    association_types: list[AssociationTypes] = Field(default_factory=list)


class AssociationCreationDetails(BaseModel):
    """
    One label to set between two records.

    Sent as ``{"category": ..., "type_id": ...}``; the camelCase spellings are
    accepted when reading.
    """

    category: str = Field(validation_alias=AliasChoices("category", "associationCategory"))
    type_id: str = Field(validation_alias=AliasChoices("type_id", "associationTypeId"))


class CreatedAssociationResult(HubspotModel):
    from_object_type_id: str
    from_object_id: str
    to_object_type_id: str | None = None
    to_object_id: str
    labels: list[str] = Field(default_factory=list)
