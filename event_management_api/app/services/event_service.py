"""
Business logic for events.

``EventService`` is a thin layer over the ``events`` collection.  All
by-id methods raise ``InvalidIdentifier`` for malformed ids (from the
store) and ``RecordNotFound`` when no event matches.
"""

import logging
from typing import Any, Dict, List

from ..core.db import DocumentStore, RecordNotFound
from ..schemas.event import EventCreate, EventUpdate

logger = logging.getLogger(__name__)

COLLECTION = "events"


class EventService:
    """Service for managing events."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def list_events(self) -> List[Dict[str, Any]]:
        """Return every event in store order."""
        events = self.store.find(COLLECTION)
        logger.debug("Fetched %d events", len(events))
        return events

    async def get_event(self, event_id: str) -> Dict[str, Any]:
        event = self.store.find_by_id(COLLECTION, event_id)
        if event is None:
            raise RecordNotFound(COLLECTION, event_id)
        return event

    async def create_event(self, data: EventCreate) -> Dict[str, Any]:
        """Store a new event.

        Unknown fields in ``data`` are persisted as-is and omitted
        fields stay absent.
        """
        event = self.store.insert(COLLECTION, data.provided_fields())
        logger.info("Created event %s (%s)", event["id"], event.get("name"))
        return event

    async def update_event(self, event_id: str, data: EventUpdate) -> Dict[str, Any]:
        """Merge the supplied fields into an existing event.

        Used for both replacement (PUT) and partial (PATCH) updates;
        fields not present in ``data`` are left unchanged either way.
        """
        updates = data.provided_fields()
        event = self.store.update_by_id(COLLECTION, event_id, updates)
        if event is None:
            raise RecordNotFound(COLLECTION, event_id)
        logger.info("Updated event %s: %s", event["id"], sorted(updates))
        return event

    async def delete_event(self, event_id: str) -> None:
        """Delete an event.

        Attendees referencing the event are kept; their reference
        simply stops resolving.
        """
        deleted = self.store.delete_by_id(COLLECTION, event_id)
        if deleted is None:
            raise RecordNotFound(COLLECTION, event_id)
        logger.info("Deleted event %s", deleted["id"])
