"""
Role-based authorization policy.

A single static table maps each operation to the roles allowed to invoke it.
The request boundary consults it once per request, after authentication and
before the service layer runs.
"""

from enum import Enum

from app.core.errors import AuthorizationError
from app.models.user import Role


class Operation(str, Enum):
    """Operations exposed over HTTP."""

    REGISTER_USER = "user:register"
    USER_LIST = "user:list"
    USER_UPDATE_ROLE = "user:update_role"

    DEPARTMENT_CREATE = "department:create"
    DEPARTMENT_READ = "department:read"
    DEPARTMENT_UPDATE = "department:update"
    DEPARTMENT_DELETE = "department:delete"

    EMPLOYEE_CREATE = "employee:create"
    EMPLOYEE_READ = "employee:read"
    EMPLOYEE_UPDATE = "employee:update"
    EMPLOYEE_DELETE = "employee:delete"


_ADMIN_ONLY = frozenset({Role.ADMIN})
_ANY_ROLE = frozenset({Role.ADMIN, Role.NORMAL_USER})

# Operations reachable without credentials.
ANONYMOUS_OPERATIONS: frozenset[Operation] = frozenset({Operation.REGISTER_USER})

PERMISSIONS: dict[Operation, frozenset[Role]] = {
    Operation.REGISTER_USER: frozenset(),
    Operation.USER_LIST: _ADMIN_ONLY,
    Operation.USER_UPDATE_ROLE: _ADMIN_ONLY,
    Operation.DEPARTMENT_CREATE: _ADMIN_ONLY,
    Operation.DEPARTMENT_READ: _ANY_ROLE,
    Operation.DEPARTMENT_UPDATE: _ADMIN_ONLY,
    Operation.DEPARTMENT_DELETE: _ADMIN_ONLY,
    Operation.EMPLOYEE_CREATE: _ANY_ROLE,
    Operation.EMPLOYEE_READ: _ANY_ROLE,
    Operation.EMPLOYEE_UPDATE: _ANY_ROLE,
    Operation.EMPLOYEE_DELETE: _ANY_ROLE,
}


def is_allowed(role: Role | str | None, operation: Operation) -> bool:
    """True if the role (None for anonymous) may invoke the operation."""
    if role is None:
        return operation in ANONYMOUS_OPERATIONS
    try:
        role = Role(role)
    except ValueError:
        return False
    return role in PERMISSIONS.get(operation, frozenset())


def authorize(role: Role | str | None, operation: Operation) -> None:
    """Raise AuthorizationError unless the role may invoke the operation."""
    if not is_allowed(role, operation):
        raise AuthorizationError("Insufficient role for this operation")
