"""Database session management for Hogar."""
from contextlib import contextmanager
from typing import Generator
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.engine import Engine
import sqlite3

from hogar.config.settings import get_settings

settings = get_settings()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Configure SQLite connection."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DB_URL,
    echo=settings.DB_ECHO,
    connect_args=_connect_args(settings.DB_URL)
)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_session() -> Session:
    """Get a new database session."""
    return SessionLocal()


class TransactionManager:
    """Rolls the session back when a service operation fails."""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self) -> Generator[Session, None, None]:
        """
        Context manager around a unit of work.

        Committing is left to the block, so an early return for a validation
        failure writes nothing. Any exception rolls back and is re-raised.

        Yields:
            Session: The database session
        """
        try:
            yield self.session
        except Exception:
            self.session.rollback()
            raise
