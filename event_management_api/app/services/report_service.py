"""
Service layer for reports.

Counts are taken from the store on every call; nothing is cached.
"""

from typing import Dict

from ..core.db import DocumentStore


class ReportService:
    """Aggregated counts across collections."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def event_stats(self) -> Dict[str, int]:
        return {
            "totalEvents": self.store.count("events"),
            "totalAttendees": self.store.count("attendees"),
        }
