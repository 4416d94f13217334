"""
Application package initializer.

The meetups resource is organised into logical pieces: configuration,
logging, persistence and errors live in ``core``; the ORM model in
``models``; request/response payloads in ``schemas``; business rules in
``services``; and HTTP routes in ``api/v1/endpoints``.
"""

from .main import app, create_app  # noqa: F401
