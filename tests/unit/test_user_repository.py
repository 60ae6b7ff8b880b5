from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from app.db import SEED_USERS, UserRecord, create_session_factory, init_database, seed_users
from app.models import User
from app.repositories.user_repository import SqlUserRepository


@pytest.fixture
def repository(session_factory):
    with session_factory() as session:
        yield SqlUserRepository(session)


def test_find_all_returns_seed_rows_in_insertion_order(repository):
    users = repository.find_all()

    assert [user.username for user in users] == [
        "admin@example.com",
        "user1@example.com",
        "user2@example.com",
        "user3@example.com",
    ]
    assert [user.id for user in users] == [user_id for user_id, _, _ in SEED_USERS]


def test_find_all_maps_every_column(repository):
    admin = repository.find_all()[0]

    assert isinstance(admin, User)
    assert admin.id == "550e8400-e29b-41d4-a716-446655440000"
    assert admin.password.startswith("$2a$10$")
    assert admin.enabled is True
    assert isinstance(admin.created_at, datetime)
    assert isinstance(admin.updated_at, datetime)


def test_disabled_users_are_still_listed(repository):
    users = {user.username: user for user in repository.find_all()}

    assert users["user3@example.com"].enabled is False


def test_find_all_on_empty_table_returns_empty_list():
    factory = create_session_factory("sqlite://")
    init_database(factory, seed=False)

    with factory() as session:
        assert SqlUserRepository(session).find_all() == []


def test_seeding_twice_does_not_duplicate_rows(session_factory):
    init_database(session_factory)

    with session_factory() as session:
        assert seed_users(session) == 0
        assert len(SqlUserRepository(session).find_all()) == len(SEED_USERS)


def test_username_uniqueness_is_enforced_by_the_store(session_factory):
    with session_factory() as session:
        session.add(UserRecord(username="admin@example.com", password="x"))
        with pytest.raises(IntegrityError):
            session.flush()
