"""
Shared fixtures: an in-memory database seeded with the demo cards and a
TestClient wired to it.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cashcard.db.base import Base
from cashcard.db.init_db import seed_demo_cashcards
from cashcard.db.repository import CashCardRepository
from cashcard.db.session import get_db
from cashcard.main import app

SARAH = ("sarah1", "abc123")
KUMAR = ("kumar2", "xyz789")
HANK = ("hank-owns-no-cards", "qrs456")


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    db = factory()
    seed_demo_cashcards(db)
    db.close()

    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def repo(db):
    return CashCardRepository(db)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
