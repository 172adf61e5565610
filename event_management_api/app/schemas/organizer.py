"""Pydantic models for organizers."""

from typing import Optional

from pydantic import Field

from .common import DocumentModel


class OrganizerBase(DocumentModel):
    name: Optional[str] = Field(None, examples=["Events Ltd"])
    contact: Optional[str] = Field(None, examples=["events@example.com"])


class OrganizerCreate(OrganizerBase):
    """Schema for creating an organizer."""


class OrganizerUpdate(OrganizerBase):
    """Schema for updating an organizer; omitted fields are kept."""


class OrganizerRead(OrganizerBase):
    id: str
