"""Request/response schemas for registration, authentication and user admin."""

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.models.user import Role
from app.schemas.common import require_not_blank


class UserRegisterRequest(BaseModel):
    """Self-registration payload. Any 'role' sent by the client is ignored."""

    model_config = {"extra": "ignore"}

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    email: EmailStr

    @field_validator("username", "password")
    @classmethod
    def validate_not_blank(cls, v: str, info: ValidationInfo) -> str:
        return require_not_blank(v, info.field_name)


class RoleUpdateRequest(BaseModel):
    """New role for a user. Checked against Role by the user service, not here."""

    role: str = Field(..., description="ADMIN or NORMAL_USER")


class UserResponse(BaseModel):
    """User entry returned to clients (no password hash)."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    email: str
    role: Role


class CurrentUser(BaseModel):
    """Authenticated user (id, username, role) for dependency injection."""

    model_config = {"from_attributes": True}

    id: int
    username: str
    role: Role
