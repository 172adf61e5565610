"""
Report endpoints.

Counts are computed live on every request.
"""

from fastapi import APIRouter, Depends

from event_management_api.app.api.deps import get_report_service
from event_management_api.app.schemas.report import EventStats
from event_management_api.app.services.report_service import ReportService

router = APIRouter()


@router.get("/event-stats", response_model=EventStats)
async def event_stats(service: ReportService = Depends(get_report_service)):
    """Return the number of stored events and attendees."""
    return await service.event_stats()
