"""Employee endpoints. Every operation is open to ADMIN and NORMAL_USER."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.params import RecordId
from app.api.v1.auth import require_permission
from app.core.authorization import Operation
from app.core.database import get_db
from app.core.errors import NotFoundError
from app.schemas.employee import EmployeeRequest, EmployeeResponse
from app.schemas.user import CurrentUser
from app.services import employee_service

router = APIRouter()


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    body: EmployeeRequest,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.EMPLOYEE_CREATE))],
) -> EmployeeResponse:
    """
    Create an employee in an existing department.

    400 if the email is already used; 404 if the department does not exist.
    """
    return employee_service.create_employee(db, body)


@router.get("", response_model=list[EmployeeResponse])
def list_employees(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.EMPLOYEE_READ))],
) -> list[EmployeeResponse]:
    return employee_service.list_employees(db)


@router.get("/by-department/{department_id}", response_model=list[EmployeeResponse])
def list_employees_by_department(
    department_id: RecordId,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.EMPLOYEE_READ))],
) -> list[EmployeeResponse]:
    """Employees of one department sorted by last name, then first name. 404 if the department does not exist."""
    return employee_service.list_employees_by_department(db, department_id)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: RecordId,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.EMPLOYEE_READ))],
) -> EmployeeResponse:
    employee = employee_service.get_employee(db, employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: RecordId,
    body: EmployeeRequest,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.EMPLOYEE_UPDATE))],
) -> EmployeeResponse:
    """Replace every field of an employee, including its department."""
    return employee_service.update_employee(db, employee_id, body)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: RecordId,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(require_permission(Operation.EMPLOYEE_DELETE))],
) -> Response:
    employee_service.delete_employee(db, employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
