"""User administration endpoints (ADMIN only)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.params import RecordId
from app.api.v1.auth import require_permission
from app.core.authorization import Operation
from app.core.database import get_db
from app.schemas.user import CurrentUser, RoleUpdateRequest, UserResponse
from app.services import user_service

router = APIRouter()


@router.get("", response_model=list[UserResponse])
def list_users(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_permission(Operation.USER_LIST))],
) -> list[UserResponse]:
    """List all users without password hashes."""
    return user_service.list_users(db)


@router.put("/{user_id}/role", response_model=UserResponse)
def update_user_role(
    user_id: RecordId,
    body: RoleUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_permission(Operation.USER_UPDATE_ROLE))],
) -> UserResponse:
    """Set a user's role to ADMIN or NORMAL_USER (400 for anything else)."""
    return user_service.update_user_role(db, user_id, body.role)
