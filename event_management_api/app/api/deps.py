"""
Request dependencies.

Each service is built per request around the store held on
``app.state``, so handlers never reach for a global connection.
"""

from fastapi import Depends

from event_management_api.app.core.db import DocumentStore, get_store
from event_management_api.app.services.attendee_service import AttendeeService
from event_management_api.app.services.event_service import EventService
from event_management_api.app.services.organizer_service import OrganizerService
from event_management_api.app.services.report_service import ReportService


def get_event_service(store: DocumentStore = Depends(get_store)) -> EventService:
    return EventService(store)


def get_attendee_service(store: DocumentStore = Depends(get_store)) -> AttendeeService:
    return AttendeeService(store)


def get_organizer_service(store: DocumentStore = Depends(get_store)) -> OrganizerService:
    return OrganizerService(store)


def get_report_service(store: DocumentStore = Depends(get_store)) -> ReportService:
    return ReportService(store)
