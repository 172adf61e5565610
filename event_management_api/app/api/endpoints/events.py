"""
Event endpoints.

List and create let store failures propagate to the framework's
default error handling.  Routes addressing a single event answer
400 for a malformed id and 404 for an unknown one.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from event_management_api.app.api.deps import get_event_service
from event_management_api.app.api.errors import BY_ID_RESPONSES, invalid_id, not_found
from event_management_api.app.core.db import InvalidIdentifier, RecordNotFound
from event_management_api.app.schemas.common import Message
from event_management_api.app.schemas.event import EventCreate, EventRead, EventUpdate
from event_management_api.app.services.event_service import EventService

router = APIRouter()

ENTITY = "Event"


@router.get("", response_model=List[EventRead], summary="Get all events")
async def list_events(service: EventService = Depends(get_event_service)):
    return await service.list_events()


@router.get("/{event_id}", response_model=EventRead, responses=BY_ID_RESPONSES)
async def get_event(event_id: str, service: EventService = Depends(get_event_service)):
    """Retrieve a single event by its id."""
    try:
        return await service.get_event(event_id)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
async def create_event(event: EventCreate, service: EventService = Depends(get_event_service)):
    """Create a new event.

    Fields beyond ``name``, ``date`` and ``venue`` are stored as sent.
    """
    return await service.create_event(event)


@router.put("/{event_id}", response_model=EventRead, responses=BY_ID_RESPONSES)
async def update_event(
    event_id: str,
    updates: EventUpdate,
    service: EventService = Depends(get_event_service),
):
    """Update an event.

    Only the supplied fields are changed; unspecified fields remain as
    they were, exactly as with PATCH.
    """
    try:
        return await service.update_event(event_id, updates)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)


@router.patch("/{event_id}", response_model=EventRead, responses=BY_ID_RESPONSES)
async def patch_event(
    event_id: str,
    updates: EventUpdate,
    service: EventService = Depends(get_event_service),
):
    """Partially update an event."""
    try:
        return await service.update_event(event_id, updates)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)


@router.delete("/{event_id}", response_model=Message, responses=BY_ID_RESPONSES)
async def delete_event(event_id: str, service: EventService = Depends(get_event_service)):
    """Delete an event.

    Attendees registered for it are not removed.
    """
    try:
        await service.delete_event(event_id)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)
    return {"message": "Event deleted"}
