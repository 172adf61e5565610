"""
Pydantic models for events.

``EventBase`` declares the known fields.  Creation and update share the
same shape because updates merge whatever is supplied; ``EventRead``
adds the store-assigned ``id`` for responses.
"""

from typing import Optional

from pydantic import Field

from .common import DocumentModel


class EventBase(DocumentModel):
    name: Optional[str] = Field(None, examples=["Conf"])
    date: Optional[str] = Field(None, examples=["2025-01-01"])
    venue: Optional[str] = Field(None, examples=["Hall A"])


class EventCreate(EventBase):
    """Schema for creating an event."""


class EventUpdate(EventBase):
    """Schema for updating an event.

    Used by both PUT and PATCH: supplied fields overwrite stored ones,
    everything else is left as it was.
    """


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    id: str
