"""
Pydantic models for attendees.

An attendee may reference an event through ``eventId``.  The reference
is stored as given; read endpoints replace it with the full event
(``AttendeeDetail``) or ``null`` when it cannot be resolved.
"""

from typing import Optional

from pydantic import Field

from .common import DocumentModel
from .event import EventRead


class AttendeeCreate(DocumentModel):
    """Schema for registering an attendee."""

    name: Optional[str] = Field(None, examples=["Ada Lovelace"])
    eventId: Optional[str] = Field(None, examples=["65a1f0c2e4b0a1b2c3d4e5f6"])


class AttendeeRead(AttendeeCreate):
    """Attendee as stored, with the event reference left unexpanded."""

    id: str


class AttendeeDetail(DocumentModel):
    """Attendee with its event reference expanded."""

    id: str
    name: Optional[str] = None
    eventId: Optional[EventRead] = None
