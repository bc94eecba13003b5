"""
Engagement property shapes.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NoteProperties(BaseModel):
    """
    Properties of a note.

    Notes add information to the record timeline, e.g. details of an offline
    conversation with a contact. The timestamp defaults to the time the
    properties are created.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Limited to 65,536 characters.
    body: str = Field(alias="hs_note_body")
    # Determines where the note sits on the record timeline.
    timestamp: datetime = Field(default_factory=_utc_now, alias="hs_timestamp")
    hubspot_owner_id: str | None = None
