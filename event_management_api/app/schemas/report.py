"""Pydantic models for reports."""

from pydantic import BaseModel


class EventStats(BaseModel):
    """Live record counts."""

    totalEvents: int
    totalAttendees: int
