"""
User registration, credential checks and role management.

Passwords are hashed with the injected one-way hasher (bcrypt by default) and
never leave this module in clear form; responses carry only id, username,
email and role.
"""

import logging
from collections.abc import Callable

from sqlalchemy.orm import Session

from app.core.errors import AuthenticationError, ConflictError, NotFoundError, ValidationError
from app.core.security import hash_password, verify_password
from app.models import Role, User
from app.repositories import user as user_repo
from app.repositories.base import commit_or_conflict
from app.schemas.user import UserRegisterRequest, UserResponse

logger = logging.getLogger(__name__)

PasswordHasher = Callable[[str], str]


def _to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


def create_user(
    db: Session,
    *,
    username: str,
    password: str,
    email: str,
    role: Role,
    hasher: PasswordHasher = hash_password,
) -> UserResponse:
    """
    Persist a user with an explicit role.

    Username uniqueness is checked before email uniqueness; either collision
    raises ConflictError.
    """
    if user_repo.exists_by_username(db, username):
        logger.warning("User creation rejected, username exists: %s", username)
        raise ConflictError(f"Username '{username}' is already taken.")
    if user_repo.exists_by_email(db, email):
        logger.warning("User creation rejected, email exists: %s", email)
        raise ConflictError(f"Email '{email}' is already registered.")

    user = user_repo.add(
        db,
        User(
            username=username,
            password_hash=hasher(password),
            email=email,
            role=Role(role).value,
        ),
    )
    commit_or_conflict(db, f"Username '{username}' or email '{email}' is already in use.")
    db.refresh(user)
    logger.info("User created: id=%s username=%s role=%s", user.id, user.username, user.role)
    return _to_response(user)


def register_user(
    db: Session,
    body: UserRegisterRequest,
    hasher: PasswordHasher = hash_password,
) -> UserResponse:
    """Self-registration. The role is always NORMAL_USER."""
    logger.info("Registering user: username=%s", body.username)
    return create_user(
        db,
        username=body.username,
        password=body.password,
        email=str(body.email),
        role=Role.NORMAL_USER,
        hasher=hasher,
    )


def find_by_username(db: Session, username: str) -> User | None:
    """Fetch the stored user (with hash) for credential verification only."""
    return user_repo.get_by_username(db, username)


def authenticate(db: Session, username: str, password: str) -> User:
    """Return the user whose stored hash matches password; raise AuthenticationError otherwise."""
    user = find_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        logger.warning("Authentication failed for username=%s", username)
        raise AuthenticationError("Invalid username or password.")
    return user


def list_users(db: Session) -> list[UserResponse]:
    return [_to_response(u) for u in user_repo.list_all(db)]


def update_user_role(db: Session, user_id: int, new_role: str) -> UserResponse:
    """
    Overwrite a user's role.

    Raises NotFoundError if the user does not exist, ValidationError if
    new_role is not ADMIN or NORMAL_USER (the stored role is left unchanged).
    """
    logger.info("Updating role: user_id=%s role=%s", user_id, new_role)
    user = user_repo.get(db, user_id)
    if user is None:
        logger.warning("User not found: id=%s", user_id)
        raise NotFoundError(f"User not found with ID: {user_id}")

    try:
        role = Role(new_role)
    except ValueError as e:
        logger.warning("Invalid role specified: %s", new_role)
        raise ValidationError(
            f"Invalid role: {new_role}. Role must be 'ADMIN' or 'NORMAL_USER'."
        ) from e

    user.role = role.value
    commit_or_conflict(db, f"Role of user {user_id} could not be updated.")
    db.refresh(user)
    return _to_response(user)
