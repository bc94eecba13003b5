"""
Generic CRM record envelope and association helpers.

A record composes three caller-chosen shapes:

- ``Properties``: the object's properties, always required.
- ``PropertiesWithHistory``: property history, `OptionNotDesired` when unused.
- ``Associations``: associated records, `OptionNotDesired` when unused.

Shapes are usually pydantic models whose declared field names double as the
field selection sent to HubSpot (see `field_names`). Declare property shapes on
plain `pydantic.BaseModel`: `HubspotModel` renames fields to camelCase when
sending, which HubSpot property names are not.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar, get_origin

from pydantic import BaseModel, Field, model_validator

from .base import HubspotModel

PropertiesT = TypeVar("PropertiesT")
HistoryT = TypeVar("HistoryT")
AssociationsT = TypeVar("AssociationsT")


class OptionNotDesired(HubspotModel):
    """Empty shape for a record option a request does not need."""


def field_names(shape: Any) -> list[str]:
    """
    Return the serialized field names declared on a shape type.

    Only pydantic model classes declare fields; any other shape (dicts, `Any`,
    lists) selects nothing. Explicit aliases (``Field(alias="hs_note_body")``)
    name the property; aliases produced by an alias generator do not, since
    HubSpot property names are snake_case.
    """
    if get_origin(shape) is not None or not isinstance(shape, type):
        return []
    if not issubclass(shape, BaseModel):
        return []
    names: list[str] = []
    for name, info in shape.model_fields.items():
        if info.alias_priority is not None and info.alias_priority > 1:
            names.append(info.serialization_alias or info.alias or name)
        else:
            names.append(name)
    return names


def shape_type(value: Any) -> Any:
    """Infer the decode type for a shape from a value the caller is sending."""
    if isinstance(value, BaseModel):
        return type(value)
    return Any


def _empty_shape(annotation: Any) -> Any:
    """Empty value of a shape type, or None when the shape has no empty form."""
    origin = get_origin(annotation) or annotation
    if not isinstance(origin, type):
        return None
    if issubclass(origin, BaseModel):
        return origin.model_validate({})
    if issubclass(origin, Mapping):
        return {}
    if issubclass(origin, (list, tuple)) or origin is Sequence:
        return []
    return None


class HubspotRecord(HubspotModel, Generic[PropertiesT, HistoryT, AssociationsT]):
    """A representation of a generic HubSpot record, regardless of object type."""

    id: str = ""
    properties: PropertiesT
    properties_with_history: HistoryT = None  # type: ignore[assignment]
    associations: AssociationsT = None  # type: ignore[assignment]
    created_at: datetime | None = None
    updated_at: datetime | None = None
    archived: bool | None = None
    archived_at: datetime | None = None

    @model_validator(mode="after")
    def default_absent_shapes(self) -> HubspotRecord[PropertiesT, HistoryT, AssociationsT]:
        # Absent history/associations take the empty value of their declared shape.
        fields = type(self).model_fields
        for name in ("properties_with_history", "associations"):
            if getattr(self, name) is None:
                empty = _empty_shape(fields[name].annotation)
                if empty is not None:
                    setattr(self, name, empty)
        return self

    @classmethod
    def with_properties(
        cls, properties: PropertiesT
    ) -> HubspotRecord[PropertiesT, OptionNotDesired, OptionNotDesired]:
        """
        Create a record carrying only properties.

        Suggested use for the update endpoint.
        """
        return HubspotRecord[Any, OptionNotDesired, OptionNotDesired](properties=properties)

    @classmethod
    def with_properties_and_associations(
        cls, properties: PropertiesT
    ) -> HubspotRecord[PropertiesT, OptionNotDesired, list[CreateAssociation]]:
        """
        Create a record with properties and an empty list of associations to create.

        Suggested use for the create endpoint; chain `attach_associations` or
        `attach_built_in_associations` to link the new record.
        """
        return HubspotRecord[Any, OptionNotDesired, list[CreateAssociation]](
            properties=properties
        )

    def attach_built_in_associations(
        self, association_type: AssociationLinks, ids: Iterable[str]
    ) -> HubspotRecord[PropertiesT, HistoryT, AssociationsT]:
        """Attach associations of one built-in type to each of `ids`."""
        return self.attach_associations(association_type.build(), ids)

    def attach_associations(
        self, association_type: AssociationType, ids: Iterable[str]
    ) -> HubspotRecord[PropertiesT, HistoryT, AssociationsT]:
        """Attach associations of one (possibly custom) type to each of `ids`."""
        if not isinstance(self.associations, list):
            raise TypeError("Record was not created with a list of associations to create")
        for record_id in ids:
            self.associations.append(CreateAssociation.new(record_id, association_type))
        return self


# =============================================================================
# Associations attached at creation time
# =============================================================================


class AssociationTo(HubspotModel):
    """The record to associate with."""

    id: str


class AssociationType(HubspotModel):
    """The association type a new association should be."""

    id: str = Field(alias="associationTypeId")
    # HUBSPOT_DEFINED or USER_DEFINED
    category: str = Field(alias="associationCategory")

    @classmethod
    def new(cls, id: str, category: str) -> AssociationType:
        return cls(id=id, category=category)


class CreateAssociation(HubspotModel):
    """An association to create between a new record and an existing one."""

    to: AssociationTo
    types: list[AssociationType] = Field(default_factory=list)

    @classmethod
    def new(cls, id: str, association_type: AssociationType) -> CreateAssociation:
        return cls(to=AssociationTo(id=id), types=[association_type.model_copy()])

    @classmethod
    def new_built_in(cls, id: str, association_type: AssociationLinks) -> CreateAssociation:
        return cls.new(id, association_type.build())


class AssociationLinks(Enum):
    """Built-in HubSpot association types."""

    NOTE_TO_CONTACT = "202"
    NOTE_TO_COMPANY = "190"
    NOTE_TO_DEAL = "214"

    def build(self) -> AssociationType:
        return AssociationType(id=self.value, category="HUBSPOT_DEFINED")


# =============================================================================
# Associations returned with a record
# =============================================================================


class Association(HubspotModel):
    """An association as returned inside a record's `associations` block."""

    id: str
    association_type: str = Field(alias="type")


class AssociationsResults(HubspotModel):
    """
    A list of association results.

    Use as the field type when declaring an associations shape, e.g.
    ``class DealAssociations(BaseModel): companies: AssociationsResults = AssociationsResults()``.
    """

    results: list[Association] = Field(default_factory=list)


HubspotUpdatedRecord = HubspotRecord[PropertiesT, OptionNotDesired, OptionNotDesired]
