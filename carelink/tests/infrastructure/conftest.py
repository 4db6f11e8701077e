"""Fixtures backed by an in-memory SQLite database."""

import pytest

from carelink.infrastructure.database.engine import create_db_engine, get_session, init_db


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with get_session(engine) as session:
        yield session
