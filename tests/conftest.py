"""Fixtures shared by the db, service and api tests: a throw-away SQLite database living in memory."""

from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

# StaticPool: every session (and every TestClient worker thread) sees the same in-memory database
test_engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSession = sessionmaker(bind=test_engine, autoflush=False)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Session on freshly created tables. Dropped again afterwards, so no game leaks from one test into the next."""
    Base.metadata.create_all(bind=test_engine)
    session = TestSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)
