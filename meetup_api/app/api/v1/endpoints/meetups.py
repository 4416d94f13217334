"""
Meetup endpoints for API v1.

All routes act on behalf of the authenticated caller.  Update and delete
take the target ``id`` in the request body.  Business rule failures are
raised by ``MeetupService`` and rendered as ``400 {"error": ...}`` by
the handlers in ``core.errors``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from meetup_api.app.core.db import get_session
from meetup_api.app.core.security import get_current_user_id
from meetup_api.app.schemas.meetup import MeetupCreated, MeetupRead, MessageResponse
from meetup_api.app.services.meetup_service import MeetupService


router = APIRouter()


def get_meetup_service(session: Session = Depends(get_session)) -> MeetupService:
    return MeetupService(session)


@router.get("/", response_model=List[MeetupRead])
async def list_meetups(
    user_id: int = Depends(get_current_user_id),
    service: MeetupService = Depends(get_meetup_service),
) -> List[MeetupRead]:
    """List the caller's meetups, earliest first."""
    meetups = await service.list_meetups(user_id)
    return [MeetupRead.model_validate(m) for m in meetups]


@router.post("/", response_model=MeetupCreated)
async def create_meetup(
    payload: Dict[str, Any] = Body(...),
    user_id: int = Depends(get_current_user_id),
    service: MeetupService = Depends(get_meetup_service),
) -> MeetupCreated:
    """Create a meetup owned by the caller.

    The date must be in the future.
    """
    meetup = await service.create_meetup(user_id, payload)
    return MeetupCreated(meetup=MeetupRead.model_validate(meetup))


@router.put("/", response_model=MeetupRead)
async def update_meetup(
    payload: Dict[str, Any] = Body(...),
    user_id: int = Depends(get_current_user_id),
    service: MeetupService = Depends(get_meetup_service),
) -> MeetupRead:
    """Update a meetup owned by the caller."""
    meetup = await service.update_meetup(user_id, payload)
    return MeetupRead.model_validate(meetup)


@router.delete("/", response_model=MessageResponse)
async def delete_meetup(
    payload: Dict[str, Any] = Body(...),
    user_id: int = Depends(get_current_user_id),
    service: MeetupService = Depends(get_meetup_service),
) -> MessageResponse:
    """Delete a meetup owned by the caller that has not happened yet."""
    result = await service.delete_meetup(user_id, payload)
    return MessageResponse(**result)
