"""Idempotent seeding of the initial admin account."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import ConflictError
from app.models import Role
from app.repositories import user as user_repo
from app.services.user_service import PasswordHasher, create_user

logger = logging.getLogger(__name__)


def ensure_admin_user(
    db: Session,
    hasher: PasswordHasher,
    *,
    username: str,
    password: str,
    email: str,
) -> bool:
    """
    Create an ADMIN user named username unless one with that username exists.

    Returns True if a user was created. Safe to run on every start.
    """
    if user_repo.get_by_username(db, username) is not None:
        logger.info("Admin user '%s' already exists.", username)
        return False
    try:
        create_user(
            db,
            username=username,
            password=password,
            email=email,
            role=Role.ADMIN,
            hasher=hasher,
        )
    except ConflictError:
        # Another process seeded it between our check and the commit.
        if user_repo.get_by_username(db, username) is not None:
            logger.info("Admin user '%s' already exists.", username)
            return False
        raise
    logger.warning(
        "Initial ADMIN user '%s' created with the configured bootstrap password. Change it.",
        username,
    )
    return True
