"""
Pydantic models for meetup payloads.

``MeetupCreate`` describes the body of a creation request,
``MeetupUpdate`` and ``MeetupDelete`` carry the target ``id`` in the
body, and ``MeetupRead`` is the response representation built from the
ORM model.  Unknown fields are ignored, so ``user_id`` can never be
supplied by a client.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from ..models.meetup import as_utc

# Largest primary key a 64-bit INTEGER column can hold.
MAX_ID = 2**63 - 1


def _utc_date(value: datetime) -> datetime:
    try:
        return as_utc(value)
    except OverflowError as exc:
        raise ValueError("date is out of range once converted to UTC") from exc


class MeetupBase(BaseModel):
    title: str = Field(..., min_length=4, examples=["Python Meetup"])
    description: str = Field(
        ...,
        min_length=50,
        examples=["Monthly gathering to talk about web services, packaging and testing."],
    )
    locate: str = Field(..., min_length=1, examples=["Room A"])
    banner: str = Field(..., min_length=1, examples=["banner.png"])
    date: datetime = Field(..., examples=["2030-09-01T19:00:00Z"])

    normalise_date = field_validator("date")(_utc_date)


class MeetupCreate(MeetupBase):
    """Schema for creating a meetup."""
    pass


class MeetupUpdate(BaseModel):
    """Schema for updating a meetup.

    Every field is required; the whole meetup is replaced except for its
    owner.  Unlike creation, the title has no minimum length.
    """

    id: int = Field(..., ge=1, le=MAX_ID)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=50)
    locate: str = Field(..., min_length=1)
    banner: str = Field(..., min_length=1)
    date: datetime

    normalise_date = field_validator("date")(_utc_date)


class MeetupDelete(BaseModel):
    id: int = Field(..., ge=1, le=MAX_ID)


class MeetupRead(BaseModel):
    """Schema for reading a meetup from the API.

    Carries no length constraints: an update may legitimately shorten
    the title below the creation minimum.
    """

    id: int
    title: str
    description: str
    locate: str
    banner: str
    date: datetime
    user_id: int
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True,
    }


class MeetupCreated(BaseModel):
    meetup: MeetupRead


class MessageResponse(BaseModel):
    message: str
