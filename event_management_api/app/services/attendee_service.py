"""
Business logic for attendees.

Attendees carry an optional ``eventId`` reference.  Reads expand it
with a second lookup against the ``events`` collection: a reference
that resolves is replaced by the full event, one that does not
(deleted event, unknown or malformed id) becomes ``None``.  Writes
never check the reference.
"""

import logging
from typing import Any, Dict, List

from ..core.db import DocumentStore, RecordNotFound, is_valid_object_id
from ..schemas.attendee import AttendeeCreate

logger = logging.getLogger(__name__)

COLLECTION = "attendees"
EVENTS = "events"


class AttendeeService:
    """Service for managing attendees."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def _expand_events(self, attendees: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Replace each attendee's ``eventId`` with the referenced event."""
        refs = [a["eventId"] for a in attendees if a.get("eventId") is not None]
        events = self.store.find_by_ids(EVENTS, refs)
        for attendee in attendees:
            ref = attendee.get("eventId")
            if ref is None:
                continue
            attendee["eventId"] = events.get(ref.lower()) if is_valid_object_id(ref) else None
        return attendees

    async def list_attendees(self) -> List[Dict[str, Any]]:
        """Return every attendee with its event expanded."""
        attendees = self.store.find(COLLECTION)
        logger.debug("Fetched %d attendees", len(attendees))
        return self._expand_events(attendees)

    async def get_attendee(self, attendee_id: str) -> Dict[str, Any]:
        attendee = self.store.find_by_id(COLLECTION, attendee_id)
        if attendee is None:
            raise RecordNotFound(COLLECTION, attendee_id)
        return self._expand_events([attendee])[0]

    async def create_attendee(self, data: AttendeeCreate) -> Dict[str, Any]:
        """Register an attendee; the event reference is returned unexpanded."""
        attendee = self.store.insert(COLLECTION, data.provided_fields())
        logger.info("Created attendee %s for event %s", attendee["id"], attendee.get("eventId"))
        return attendee

    async def delete_attendee(self, attendee_id: str) -> None:
        deleted = self.store.delete_by_id(COLLECTION, attendee_id)
        if deleted is None:
            raise RecordNotFound(COLLECTION, attendee_id)
        logger.info("Removed attendee %s", deleted["id"])
