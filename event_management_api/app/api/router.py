"""
Top-level API router.

Aggregates the domain routers; ``main.create_app`` mounts the result
under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import attendees, events, organizers, reports

router = APIRouter()

router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(attendees.router, prefix="/attendees", tags=["attendees"])
router.include_router(organizers.router, prefix="/organizers", tags=["organizers"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
