"""
Shared test configuration.

Every test gets a fresh in-memory SQLite database and a clock frozen at
``tests.support.NOW`` so that date rules are deterministic.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from meetup_api.app.api.v1.endpoints.meetups import get_meetup_service  # noqa: E402
from meetup_api.app.core.config import Settings  # noqa: E402
from meetup_api.app.core.db import Database, get_session  # noqa: E402
from meetup_api.app.main import create_app  # noqa: E402
from meetup_api.app.services.meetup_service import MeetupService  # noqa: E402
from tests.support import SECRET, frozen_now  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    return Settings(
        project_name="Meetup API (test)",
        log_level="WARNING",
        log_file=None,
        secret_key=SECRET,
        database_url="sqlite://",
    )


@pytest.fixture
def database(settings: Settings) -> Iterator[Database]:
    db = Database(settings.database_url)
    db.create_all()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def session(database: Database) -> Iterator[Session]:
    with database.session() as s:
        yield s


@pytest.fixture
def service(session: Session) -> MeetupService:
    return MeetupService(session, now=frozen_now)


@pytest.fixture
def app(settings: Settings, database: Database) -> FastAPI:
    application = create_app(settings, database=database)

    def _frozen_service(s: Session = Depends(get_session)) -> MeetupService:
        return MeetupService(s, now=frozen_now)

    application.dependency_overrides[get_meetup_service] = _frozen_service
    return application


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c
