"""
Database configuration and session management

The estimator runs synchronously, so sessions are plain (sync) SQLAlchemy
sessions. Engines are created on demand rather than at import time.
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from shipping_rates.core.config import settings

Base = declarative_base()


def create_session_factory(database_url: Optional[str] = None, echo: Optional[bool] = None) -> sessionmaker:
    """
    Build a session factory bound to a new engine.

    Args:
        database_url: SQLAlchemy URL (defaults to settings.DATABASE_URL)
        echo: Log SQL statements (defaults to settings.DEBUG)
    """
    url = database_url or settings.DATABASE_URL
    engine_kwargs = {"echo": settings.DEBUG if echo is None else echo}

    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs["pool_pre_ping"] = True

    engine = create_engine(url, **engine_kwargs)
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)


@contextmanager
def get_db_session(session_factory: Optional[sessionmaker] = None) -> Iterator[Session]:
    """Session scope: commit on success, roll back on error, always close."""
    factory = session_factory or create_session_factory()
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
