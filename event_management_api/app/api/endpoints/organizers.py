"""Organizer endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from event_management_api.app.api.deps import get_organizer_service
from event_management_api.app.api.errors import BY_ID_RESPONSES, invalid_id, not_found
from event_management_api.app.core.db import InvalidIdentifier, RecordNotFound
from event_management_api.app.schemas.common import Message
from event_management_api.app.schemas.organizer import OrganizerCreate, OrganizerRead, OrganizerUpdate
from event_management_api.app.services.organizer_service import OrganizerService

router = APIRouter()

ENTITY = "Organizer"


@router.get("", response_model=List[OrganizerRead])
async def list_organizers(service: OrganizerService = Depends(get_organizer_service)):
    return await service.list_organizers()


@router.get("/{organizer_id}", response_model=OrganizerRead, responses=BY_ID_RESPONSES)
async def get_organizer(organizer_id: str, service: OrganizerService = Depends(get_organizer_service)):
    try:
        return await service.get_organizer(organizer_id)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)


@router.post("", response_model=OrganizerRead, status_code=status.HTTP_201_CREATED)
async def create_organizer(
    organizer: OrganizerCreate,
    service: OrganizerService = Depends(get_organizer_service),
):
    return await service.create_organizer(organizer)


@router.put("/{organizer_id}", response_model=OrganizerRead, responses=BY_ID_RESPONSES)
async def update_organizer(
    organizer_id: str,
    updates: OrganizerUpdate,
    service: OrganizerService = Depends(get_organizer_service),
):
    """Update an organizer; omitted fields keep their stored values."""
    try:
        return await service.update_organizer(organizer_id, updates)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)


@router.delete("/{organizer_id}", response_model=Message, responses=BY_ID_RESPONSES)
async def delete_organizer(organizer_id: str, service: OrganizerService = Depends(get_organizer_service)):
    try:
        await service.delete_organizer(organizer_id)
    except RecordNotFound:
        return not_found(ENTITY)
    except InvalidIdentifier:
        return invalid_id(ENTITY)
    return {"message": "Organizer deleted"}
