"""
Error taxonomy for the meetups resource and the handlers that render it.

Every business rule failure is raised as a ``MeetupError`` subclass
carrying a human readable message.  ``register_error_handlers`` turns
them into ``{"error": "<message>"}`` responses so that endpoints stay
free of try/except blocks.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


VALIDATION_FAILED = "Validation failed."


class MeetupError(Exception):
    """Base class for errors surfaced to the caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(MeetupError):
    """Payload shape or type failure."""

    def __init__(self, message: str = VALIDATION_FAILED) -> None:
        super().__init__(message)


class InvalidDateError(MeetupError):
    """A date business rule was violated."""


class ForbiddenError(MeetupError):
    """The caller tried to mutate a meetup it does not own."""


class NotFoundError(MeetupError):
    """The referenced meetup does not exist."""


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers producing ``{"error": ...}`` bodies."""

    @app.exception_handler(MeetupError)
    async def meetup_error_handler(_: Request, exc: MeetupError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(_: Request, __: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": VALIDATION_FAILED},
        )
