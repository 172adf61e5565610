"""
Attendee endpoints.

Read routes return each attendee with ``eventId`` expanded to the full
event (or ``null`` when the event no longer exists).  Creation returns
the reference exactly as stored.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from event_management_api.app.api.deps import get_attendee_service
from event_management_api.app.api.errors import BY_ID_RESPONSES, invalid_id, not_found
from event_management_api.app.core.db import InvalidIdentifier, RecordNotFound
from event_management_api.app.schemas.attendee import AttendeeCreate, AttendeeDetail, AttendeeRead
from event_management_api.app.schemas.common import Message
from event_management_api.app.services.attendee_service import AttendeeService

router = APIRouter()

ENTITY = "Attendee"


@router.get("", response_model=List[AttendeeDetail])
async def list_attendees(service: AttendeeService = Depends(get_attendee_service)):
    return await service.list_attendees()


@router.get("/{attendee_id}", response_model=AttendeeDetail, responses=BY_ID_RESPONSES)
async def get_attendee(attendee_id: str, service: AttendeeService = Depends(get_attendee_service)):
    try:
        return await service.get_attendee(attendee_id)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)


@router.post("", response_model=AttendeeRead, status_code=status.HTTP_201_CREATED)
async def create_attendee(
    attendee: AttendeeCreate,
    service: AttendeeService = Depends(get_attendee_service),
):
    """Register an attendee.

    ``eventId`` is not checked against existing events.
    """
    return await service.create_attendee(attendee)


@router.delete("/{attendee_id}", response_model=Message, responses=BY_ID_RESPONSES)
async def delete_attendee(attendee_id: str, service: AttendeeService = Depends(get_attendee_service)):
    try:
        await service.delete_attendee(attendee_id)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)
    return {"message": "Attendee removed"}
