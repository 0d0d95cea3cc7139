"""Database configuration and session management."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from src.config import get_settings

settings = get_settings()


def _unicode_lower(value: Any) -> Any:
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    # SQLite's built-in lower() only folds ASCII
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def create_engine_from_url(database_url: str, echo: bool = False) -> Engine:
    """Build an engine, with the extra arguments SQLite needs under FastAPI."""
    if not database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=10,
        )

    # FastAPI runs sync endpoints in a threadpool
    connect_args = {"check_same_thread": False}
    if database_url in {"sqlite://", "sqlite:///:memory:"}:
        # One shared connection, otherwise every session sees a fresh empty database
        sqlite_engine = create_engine(
            database_url, echo=echo, connect_args=connect_args, poolclass=StaticPool
        )
    else:
        sqlite_engine = create_engine(database_url, echo=echo, connect_args=connect_args)
    event.listen(sqlite_engine, "connect", _register_sqlite_functions)
    return sqlite_engine


engine = create_engine_from_url(settings.database_url, echo=settings.sql_echo)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base: Any = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
