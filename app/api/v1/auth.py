"""Registration endpoint and auth dependencies (get_current_user, require_permission)."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session

from app.core.authorization import Operation, authorize
from app.core.database import get_db
from app.core.errors import AuthenticationError
from app.schemas.user import CurrentUser, UserRegisterRequest, UserResponse
from app.services import user_service

router = APIRouter()
security = HTTPBasic(auto_error=False)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: UserRegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """
    Register a new account. No credentials required.
    The account always gets role NORMAL_USER, whatever the request says.
    """
    return user_service.register_user(db, body)


def get_current_user(
    credentials: Annotated[HTTPBasicCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require valid HTTP Basic credentials and return the current user. Raises 401 otherwise."""
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    user = user_service.authenticate(db, credentials.username, credentials.password)
    return CurrentUser.model_validate(user)


def require_permission(operation: Operation) -> Callable[..., CurrentUser]:
    """Build a dependency that authenticates, then checks the role against the policy table (403 on deny)."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        authorize(current_user.role, operation)
        return current_user

    return dependency
