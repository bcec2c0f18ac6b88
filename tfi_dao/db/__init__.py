"""Database helpers and base objects."""

from .base import Base, metadata
from .session import ScopedSession, SessionLocal, engine, get_db, session_scope

__all__ = [
    "Base",
    "ScopedSession",
    "SessionLocal",
    "engine",
    "get_db",
    "metadata",
    "session_scope",
]
