"""
Business logic for meetups.

``MeetupService`` implements the four operations of the meetups
resource (list, create, update, delete) on top of a SQLAlchemy session
handed in by the caller.  Each operation validates its payload, checks
the date and ownership rules and then performs a single mutation.  Rule
violations are raised as ``MeetupError`` subclasses and rendered by the
application's exception handlers.

The current time is obtained through the injectable ``now`` callable so
tests can freeze the clock.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import ForbiddenError, InvalidDateError, NotFoundError, ValidationError
from ..models.meetup import Meetup, as_utc, utc_now
from ..schemas.meetup import MeetupCreate, MeetupDelete, MeetupUpdate


logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _validate(schema: Type[SchemaT], payload: Any) -> SchemaT:
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        logger.info("Rejected %s payload: %s", schema.__name__, exc.errors(include_url=False))
        raise ValidationError() from exc


class MeetupService:
    """Meetups owned by users.

    Parameters
    ----------
    session : Session
        Persistence handle; one per request.
    now : Callable[[], datetime]
        Returns the current time as an aware UTC datetime.
    """

    def __init__(self, session: Session, now: Callable[[], datetime] = utc_now) -> None:
        self.session = session
        self._now = now

    def now(self) -> datetime:
        return as_utc(self._now())

    async def list_meetups(self, caller_id: int) -> List[Meetup]:
        """Return the caller's meetups ordered by date, earliest first."""
        stmt = (
            select(Meetup)
            .where(Meetup.user_id == caller_id)
            .order_by(Meetup.date.asc(), Meetup.id.asc())
        )
        return list(self.session.scalars(stmt).all())

    async def create_meetup(self, caller_id: int, payload: Any) -> Meetup:
        """Create a meetup owned by ``caller_id``.

        The date must lie strictly in the future.
        """
        data = _validate(MeetupCreate, payload)
        date = as_utc(data.date)
        if not date > self.now():
            logger.info("User %s tried to create a meetup dated %s", caller_id, date.isoformat())
            raise InvalidDateError("Date can't be before")

        meetup = Meetup(
            user_id=caller_id,
            title=data.title,
            description=data.description,
            locate=data.locate,
            banner=data.banner,
            date=date,
        )
        self.session.add(meetup)
        self._commit()
        self.session.refresh(meetup)
        logger.info("User %s created meetup %s '%s'", caller_id, meetup.id, meetup.title)
        return meetup

    async def update_meetup(self, caller_id: int, payload: Any) -> Meetup:
        """Replace the fields of a meetup the caller owns.

        Meetups cannot be rescheduled into the past.  The owner is never
        changed.
        """
        data = _validate(MeetupUpdate, payload)
        date = as_utc(data.date)
        if date < self.now():
            raise InvalidDateError("Date can't be before.")

        meetup = self._get_or_raise(data.id)
        if meetup.user_id != caller_id:
            logger.warning(
                "User %s tried to change meetup %s owned by %s", caller_id, meetup.id, meetup.user_id
            )
            raise ForbiddenError("You can only change meetups your own.")

        meetup.title = data.title
        meetup.description = data.description
        meetup.locate = data.locate
        meetup.banner = data.banner
        meetup.date = date
        self._commit()
        self.session.refresh(meetup)
        logger.info("User %s updated meetup %s", caller_id, meetup.id)
        return meetup

    async def delete_meetup(self, caller_id: int, payload: Any) -> Dict[str, str]:
        """Delete a meetup the caller owns, provided it has not happened yet."""
        data = _validate(MeetupDelete, payload)

        meetup = self._get_or_raise(data.id)
        if meetup.user_id != caller_id:
            logger.warning(
                "User %s tried to delete meetup %s owned by %s", caller_id, meetup.id, meetup.user_id
            )
            raise ForbiddenError("You can only delete meetups your own.")

        if meetup.date < self.now():
            raise InvalidDateError("You can only delete meetups haven't passed yet.")

        self.session.delete(meetup)
        self._commit()
        logger.info("User %s deleted meetup %s", caller_id, data.id)
        return {"message": "Meetup deleted."}

    def _get_or_raise(self, meetup_id: int) -> Meetup:
        meetup = self.session.get(Meetup, meetup_id)
        if meetup is None:
            raise NotFoundError("Meetup not found.")
        return meetup

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
