"""Pydantic request/response schemas."""

from app.schemas.department import DepartmentRequest, DepartmentResponse
from app.schemas.employee import EmployeeRequest, EmployeeResponse
from app.schemas.user import (
    CurrentUser,
    RoleUpdateRequest,
    UserRegisterRequest,
    UserResponse,
)

__all__ = [
    "CurrentUser",
    "DepartmentRequest",
    "DepartmentResponse",
    "EmployeeRequest",
    "EmployeeResponse",
    "RoleUpdateRequest",
    "UserRegisterRequest",
    "UserResponse",
]
