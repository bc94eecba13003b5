"""
Owner models.

HubSpot uses owners to assign users to contacts, companies, deals, tickets and
engagements. Owners can only be created in HubSpot; the API exposes their
identifying details so they can be assigned through the `hubspot_owner_id`
property.
"""

from __future__ import annotations

from datetime import datetime

from .base import HubspotModel


class Team(HubspotModel):
    id: str
    name: str
    primary: bool = False


class Owner(HubspotModel):
    id: str
    email: str
    first_name: str
    last_name: str
    user_id: int
    created_at: datetime
    updated_at: datetime
    archived: bool
    # Only present on tiers with teams.
    teams: list[Team] | None = None
