"""
Database package: the users table mapping plus engine/session helpers.

    from app.db import create_session_factory, init_database

    factory = create_session_factory("sqlite:///./app.db")
    init_database(factory)
"""

from .models import Base, UserRecord
from .session import SEED_USERS, create_session_factory, init_database, seed_users

__all__ = [
    "Base",
    "UserRecord",
    "SEED_USERS",
    "create_session_factory",
    "init_database",
    "seed_users",
]
