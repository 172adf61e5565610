"""Business logic for organizers."""

import logging
from typing import Any, Dict, List

from ..core.db import DocumentStore, RecordNotFound
from ..schemas.organizer import OrganizerCreate, OrganizerUpdate

logger = logging.getLogger(__name__)

COLLECTION = "organizers"


class OrganizerService:
    """Service for managing organizers.

    Organizers are standalone records with no relationship to events
    or attendees.
    """

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def list_organizers(self) -> List[Dict[str, Any]]:
        return self.store.find(COLLECTION)

    async def get_organizer(self, organizer_id: str) -> Dict[str, Any]:
        organizer = self.store.find_by_id(COLLECTION, organizer_id)
        if organizer is None:
            raise RecordNotFound(COLLECTION, organizer_id)
        return organizer

    async def create_organizer(self, data: OrganizerCreate) -> Dict[str, Any]:
        organizer = self.store.insert(COLLECTION, data.provided_fields())
        logger.info("Created organizer %s", organizer["id"])
        return organizer

    async def update_organizer(self, organizer_id: str, data: OrganizerUpdate) -> Dict[str, Any]:
        organizer = self.store.update_by_id(COLLECTION, organizer_id, data.provided_fields())
        if organizer is None:
            raise RecordNotFound(COLLECTION, organizer_id)
        logger.info("Updated organizer %s", organizer["id"])
        return organizer

    async def delete_organizer(self, organizer_id: str) -> None:
        deleted = self.store.delete_by_id(COLLECTION, organizer_id)
        if deleted is None:
            raise RecordNotFound(COLLECTION, organizer_id)
        logger.info("Deleted organizer %s", deleted["id"])
