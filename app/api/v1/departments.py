"""Department endpoints. Reads are open to every role; writes are ADMIN only."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.params import RecordId
from app.api.v1.auth import require_permission
from app.core.authorization import Operation
from app.core.database import get_db
from app.core.errors import NotFoundError
from app.schemas.department import DepartmentRequest, DepartmentResponse
from app.schemas.user import CurrentUser
from app.services import department_service

router = APIRouter()


@router.post("", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
def create_department(
    body: DepartmentRequest,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.DEPARTMENT_CREATE))],
) -> DepartmentResponse:
    """Create a department. Names are unique (400 on collision)."""
    return department_service.create_department(db, body)


@router.get("", response_model=list[DepartmentResponse])
def list_departments(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.DEPARTMENT_READ))],
) -> list[DepartmentResponse]:
    return department_service.list_departments(db)


@router.get("/{department_id}", response_model=DepartmentResponse)
def get_department(
    department_id: RecordId,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.DEPARTMENT_READ))],
) -> DepartmentResponse:
    department = department_service.get_department(db, department_id)
    if department is None:
        raise NotFoundError("Department not found")
    return department


@router.put("/{department_id}", response_model=DepartmentResponse)
def update_department(
    department_id: RecordId,
    body: DepartmentRequest,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.DEPARTMENT_UPDATE))],
) -> DepartmentResponse:
    """Replace name and location of a department (both fields, no partial update)."""
    return department_service.update_department(db, department_id, body)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(
    department_id: RecordId,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.DEPARTMENT_DELETE))],
) -> Response:
    """
    Delete a department. Employees still pointing at it are neither deleted nor
    reassigned; they report a null department_name afterwards.
    """
    department_service.delete_department(db, department_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
