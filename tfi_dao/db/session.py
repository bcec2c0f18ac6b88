"""Engine, session factories and transaction scope for the configured database."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, scoped_session, sessionmaker

from tfi_dao.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

engine = create_engine(settings.database_url, echo=settings.database_echo, future=True)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Thread-local session registry; long-lived DAOs can share it as their store handle.
ScopedSession = scoped_session(SessionLocal)


def get_db() -> Iterator[Session]:
    """Provide a SQLAlchemy session scoped to the caller's unit of work."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope(factory: sessionmaker | None = None) -> Iterator[Session]:
    """Run a block inside one transaction.

    Commits when the block finishes, rolls back and re-raises on any error,
    and closes the session in both cases.
    """
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        logger.warning("Rolling back transaction after error", exc_info=True)
        session.rollback()
        raise
    finally:
        session.close()
