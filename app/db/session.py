import logging

from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.models import Base, UserRecord

logger = logging.getLogger(__name__)

# Passwords are bcrypt hashes of 'password'
SEED_PASSWORD_HASH = "$2a$10$GRLdNijSQMUvl/au9ofL.eDwmoohzzS7.rmNSJZ.0FxO/BTk76klW"

SEED_USERS = [
    ("550e8400-e29b-41d4-a716-446655440000", "admin@example.com", True),
    ("550e8400-e29b-41d4-a716-446655440001", "user1@example.com", True),
    ("550e8400-e29b-41d4-a716-446655440002", "user2@example.com", True),
    ("550e8400-e29b-41d4-a716-446655440003", "user3@example.com", False),
]


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def create_session_factory(database_url: str, *, echo: bool = False) -> sessionmaker[Session]:
    """
    Build an engine for `database_url` and return a session factory bound to it.

    SQLite needs check_same_thread=False because FastAPI runs sync routes in
    a thread pool; an in-memory SQLite database is pinned to one connection
    so every session sees the same data.
    """
    kwargs: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, echo=echo, **kwargs)
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def seed_users(session: Session) -> int:
    """Insert the fixed users that are not already present. Returns the number inserted."""
    existing = set(session.scalars(select(UserRecord.id)))
    missing = [
        UserRecord(id=user_id, username=username, password=SEED_PASSWORD_HASH, enabled=enabled)
        for user_id, username, enabled in SEED_USERS
        if user_id not in existing
    ]
    # Flushed one at a time so rows land in seed order
    for record in missing:
        session.add(record)
        session.flush()
    return len(missing)


def init_database(session_factory: sessionmaker[Session], *, seed: bool = True) -> None:
    """Create the schema and, when asked, insert the seed users."""
    engine = session_factory.kw["bind"]
    Base.metadata.create_all(engine)
    if not seed:
        return

    with session_factory() as session:
        try:
            inserted = seed_users(session)
            session.commit()
        except Exception:
            session.rollback()
            raise
    logger.info(f"Database ready, {inserted} seed user(s) inserted")
