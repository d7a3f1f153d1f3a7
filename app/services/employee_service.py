"""
Employee lifecycle with referential and uniqueness checks.

Every write checks email uniqueness and that the target department exists
before anything is persisted. Responses carry the department name as it is at
read time; it is never stored on the employee.
"""

import logging

from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError
from app.models import Employee
from app.repositories import department as department_repo
from app.repositories import employee as employee_repo
from app.repositories.base import commit_or_conflict
from app.schemas.employee import EmployeeRequest, EmployeeResponse
from app.services.department_service import require_department

logger = logging.getLogger(__name__)


def _to_response(employee: Employee, department_name: str | None) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        email=employee.email,
        phone_number=employee.phone_number,
        hire_date=employee.hire_date,
        salary=employee.salary,
        job_role=employee.job_role,
        department_id=employee.department_id,
        department_name=department_name,
    )


def _email_taken(email: str) -> ConflictError:
    return ConflictError(f"Employee with email '{email}' already exists.")


def _require_employee(db: Session, employee_id: int) -> Employee:
    employee = employee_repo.get(db, employee_id)
    if employee is None:
        logger.warning("Employee not found: id=%s", employee_id)
        raise NotFoundError(f"Employee not found with ID: {employee_id}")
    return employee


def _apply(employee: Employee, body: EmployeeRequest) -> None:
    employee.first_name = body.first_name
    employee.last_name = body.last_name
    employee.email = str(body.email)
    employee.phone_number = body.phone_number
    employee.hire_date = body.hire_date
    employee.salary = body.salary
    employee.job_role = body.job_role
    employee.department_id = body.department_id


def create_employee(db: Session, body: EmployeeRequest) -> EmployeeResponse:
    """
    Persist a new employee.

    Raises ConflictError if the email is already used, NotFoundError if the
    department does not exist.
    """
    email = str(body.email)
    logger.info("Creating employee: email=%s department_id=%s", email, body.department_id)
    if employee_repo.exists_by_email(db, email):
        logger.warning("Employee creation rejected, email exists: %s", email)
        raise _email_taken(email)
    department = require_department(db, body.department_id)

    employee = Employee()
    _apply(employee, body)
    employee_repo.add(db, employee)
    commit_or_conflict(db, _email_taken(email).message)
    db.refresh(employee)
    logger.info("Employee created: id=%s", employee.id)
    return _to_response(employee, department.name)


def list_employees(db: Session) -> list[EmployeeResponse]:
    names = department_repo.names_by_id(db)
    return [_to_response(e, names.get(e.department_id)) for e in employee_repo.list_all(db)]


def get_employee(db: Session, employee_id: int) -> EmployeeResponse | None:
    employee = employee_repo.get(db, employee_id)
    if employee is None:
        return None
    department = department_repo.get(db, employee.department_id)
    return _to_response(employee, department.name if department is not None else None)


def update_employee(db: Session, employee_id: int, body: EmployeeRequest) -> EmployeeResponse:
    """
    Replace every mutable field of an employee, including its department.

    Raises NotFoundError if the employee or the new department does not exist,
    ConflictError if the email changes to one used by another employee.
    """
    email = str(body.email)
    logger.info("Updating employee: id=%s", employee_id)
    employee = _require_employee(db, employee_id)

    if email != employee.email and employee_repo.exists_by_email(db, email):
        logger.warning("Employee update rejected, email exists: %s", email)
        raise _email_taken(email)
    department = require_department(db, body.department_id)

    _apply(employee, body)
    commit_or_conflict(db, _email_taken(email).message)
    db.refresh(employee)
    return _to_response(employee, department.name)


def delete_employee(db: Session, employee_id: int) -> None:
    """Delete an employee by id. Raises NotFoundError if absent."""
    logger.info("Deleting employee: id=%s", employee_id)
    employee = _require_employee(db, employee_id)
    employee_repo.delete(db, employee)
    commit_or_conflict(db, f"Employee {employee_id} could not be deleted.")


def list_employees_by_department(db: Session, department_id: int) -> list[EmployeeResponse]:
    """
    Employees of one department, ordered by last name then first name.

    Raises NotFoundError if the department does not exist.
    """
    department = require_department(db, department_id)
    return [
        _to_response(e, department.name)
        for e in employee_repo.list_by_department(db, department_id)
    ]
