import enum
import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they are registered with SQLModel metadata
from .models import Employee, Task  # noqa: F401

logger = logging.getLogger(__name__)


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign key enforcement off; ON DELETE CASCADE and
    # the tasks.employee_id reference both depend on it.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str) -> Engine:
    """Build an engine for the given URL.

    In-memory SQLite gets a StaticPool so every session sees the same
    database; each engine is otherwise independent, which keeps tests isolated.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if _is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=False, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    # Postgres: disable pooling for serverless and enable pre-ping
    return create_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
        poolclass=NullPool,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        class_=Session,
        autoflush=False,
        expire_on_commit=False,
    )


def create_tables(engine: Engine) -> None:
    """Create all database tables (no-op for tables that already exist)."""
    SQLModel.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Dependency to get a database session bound to the app's engine."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


class ConstraintKind(str, enum.Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    OTHER = "other"


_SQLITE_CONSTRAINTS = {
    "SQLITE_CONSTRAINT_UNIQUE": ConstraintKind.UNIQUE,
    "SQLITE_CONSTRAINT_FOREIGNKEY": ConstraintKind.FOREIGN_KEY,
}

_SQLSTATE_CONSTRAINTS = {
    "23505": ConstraintKind.UNIQUE,
    "23503": ConstraintKind.FOREIGN_KEY,
}


def classify_integrity_error(exc: IntegrityError) -> ConstraintKind:
    """Map a driver constraint error to its kind using the driver's error code."""
    orig = exc.orig
    sqlite_name = getattr(orig, "sqlite_errorname", None)
    if sqlite_name is not None:
        return _SQLITE_CONSTRAINTS.get(sqlite_name, ConstraintKind.OTHER)

    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return _SQLSTATE_CONSTRAINTS.get(sqlstate, ConstraintKind.OTHER)
