import pytest

from app.db import create_session_factory, init_database


@pytest.fixture
def session_factory():
    """Fresh in-memory SQLite database holding the seeded users table."""
    factory = create_session_factory("sqlite://")
    init_database(factory)
    yield factory
    factory.kw["bind"].dispose()
