from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .schema import Base


def get_engine(database_url: str) -> Engine:
    """Create an engine and make sure the blueprint tables exist."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sessions are used from request threads; sqlite waits on locks for `timeout` seconds.
        connect_args = {"check_same_thread": False, "timeout": 30}
    engine = create_engine(database_url, future=True, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return engine


def get_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def session_context(factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Context manager for SQLAlchemy sessions.

    Rolls back on any exception and always closes the session. Callers
    commit explicitly.

    Usage:
        with session_context(factory) as session:
            # use session
            session.commit()
    """
    session = factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
