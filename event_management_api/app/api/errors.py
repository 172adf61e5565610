"""
Error responses shared by the by-id routes.

Errors are returned as ``{"message": ...}`` bodies rather than
FastAPI's default ``{"detail": ...}``.
"""

from typing import Any, Dict

from fastapi import status
from fastapi.responses import JSONResponse

from event_management_api.app.schemas.common import Message

# OpenAPI documentation for routes that look a record up by id.
BY_ID_RESPONSES: Dict[int, Dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": Message, "description": "Malformed id"},
    status.HTTP_404_NOT_FOUND: {"model": Message, "description": "Record not found"},
}


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def not_found(entity: str) -> JSONResponse:
    return message_response(status.HTTP_404_NOT_FOUND, f"{entity} not found")


def invalid_id(entity: str) -> JSONResponse:
    return message_response(status.HTTP_400_BAD_REQUEST, f"Invalid {entity.lower()} ID")
