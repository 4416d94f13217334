"""
Relational persistence wiring built on SQLAlchemy.

This module defines the declarative ``Base`` shared by ORM models and the
``Database`` handle that owns an engine and a session factory.  The
handle is constructed explicitly by ``create_app`` and stored on
``app.state.database``; request handlers obtain a session through the
``get_session`` dependency instead of reaching for a module-level
connection.

Schema migrations are out of scope: ``Database.create_all`` creates any
missing tables from the model metadata at startup.
"""

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base class for all ORM models."""


def resolve_database_url(value: str) -> str:
    """Turn a configured database location into a SQLAlchemy URL.

    Values containing ``://`` are returned unchanged.  Anything else is
    treated as a path to a SQLite file; relative paths are resolved
    against the project root (the directory containing ``meetup_api``).
    """
    if "://" in value:
        return value
    if os.path.isabs(value):
        return f"sqlite:///{value}"
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return f"sqlite:///{(base_dir / value).resolve()}"


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine with SQLite specific connection arguments.

    SQLite connections are opened with ``check_same_thread=False``
    because FastAPI may run a dependency and its route in different
    threads.  An in-memory database uses ``StaticPool`` so that every
    session sees the same connection (and therefore the same tables).
    """
    sa_url = make_url(url)
    kwargs: dict = {"echo": echo, "future": True}
    if sa_url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if sa_url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True
    return create_engine(sa_url, **kwargs)


class Database:
    """Explicitly constructed persistence handle.

    Parameters
    ----------
    url : str
        SQLAlchemy URL or SQLite file path (see ``resolve_database_url``).
    echo : bool
        Log emitted SQL statements.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = resolve_database_url(url)
        self.engine = build_engine(self.url, echo=echo)
        self.session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            class_=Session,
        )

    def create_all(self) -> None:
        """Create any missing tables for the registered models."""
        # Register models with ``Base.metadata`` before creating tables.
        from meetup_api.app.models import meetup  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready at %s", self.engine.url.render_as_string(hide_password=True))

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Context manager that yields a session and closes it on exit."""
        session = self.session_factory()
        try:
            yield session
        finally:
            session.close()


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a session from the application's handle."""
    database: Database = request.app.state.database
    with database.session() as session:
        yield session
