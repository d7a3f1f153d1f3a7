"""Core configuration, database session, password hashing and error taxonomy."""

from app.core.config import Settings, get_settings, settings
from app.core.database import SessionLocal, get_db, init_db
from app.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ServiceError,
    UnexpectedError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "NotFoundError",
    "ServiceError",
    "SessionLocal",
    "Settings",
    "UnexpectedError",
    "ValidationError",
    "get_db",
    "get_settings",
    "init_db",
    "settings",
]
