"""Pydantic base model shared by every HubSpot payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class HubspotModel(BaseModel):
    """
    Base model for HubSpot payloads.

    HubSpot speaks camelCase on the wire; models are declared in snake_case and
    accept either spelling when validating.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )
