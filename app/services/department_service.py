"""Department lifecycle: create, read, full-replace update and delete, with unique names."""

import logging

from sqlalchemy.orm import Session

from app.core.errors import ConflictError, NotFoundError
from app.models import Department
from app.repositories import department as department_repo
from app.repositories.base import commit_or_conflict
from app.schemas.department import DepartmentRequest, DepartmentResponse

logger = logging.getLogger(__name__)


def _to_response(department: Department) -> DepartmentResponse:
    return DepartmentResponse.model_validate(department)


def _name_taken(name: str) -> ConflictError:
    return ConflictError(f"Department with name '{name}' already exists.")


def require_department(db: Session, department_id: int) -> Department:
    """Return the department or raise NotFoundError."""
    department = department_repo.get(db, department_id)
    if department is None:
        logger.warning("Department not found: id=%s", department_id)
        raise NotFoundError(f"Department not found with ID: {department_id}")
    return department


def create_department(db: Session, body: DepartmentRequest) -> DepartmentResponse:
    """Persist a new department. Raises ConflictError if the name is already used."""
    logger.info("Creating department: name=%s", body.name)
    if department_repo.exists_by_name(db, body.name):
        logger.warning("Department creation rejected, name exists: %s", body.name)
        raise _name_taken(body.name)

    department = department_repo.add(
        db, Department(name=body.name, location=body.location)
    )
    commit_or_conflict(db, _name_taken(body.name).message)
    db.refresh(department)
    logger.info("Department created: id=%s", department.id)
    return _to_response(department)


def get_department(db: Session, department_id: int) -> DepartmentResponse | None:
    department = department_repo.get(db, department_id)
    return _to_response(department) if department is not None else None


def list_departments(db: Session) -> list[DepartmentResponse]:
    return [_to_response(d) for d in department_repo.list_all(db)]


def update_department(
    db: Session, department_id: int, body: DepartmentRequest
) -> DepartmentResponse:
    """
    Replace name and location of an existing department.

    Raises NotFoundError if the department does not exist, ConflictError if the
    name changes to one held by another department.
    """
    logger.info("Updating department: id=%s", department_id)
    department = require_department(db, department_id)

    if body.name != department.name and department_repo.exists_by_name(db, body.name):
        logger.warning("Department update rejected, name exists: %s", body.name)
        raise _name_taken(body.name)

    department.name = body.name
    department.location = body.location
    commit_or_conflict(db, _name_taken(body.name).message)
    db.refresh(department)
    return _to_response(department)


def delete_department(db: Session, department_id: int) -> None:
    """
    Delete a department by id. Raises NotFoundError if absent.

    Employees that still reference the department are left untouched.
    """
    logger.info("Deleting department: id=%s", department_id)
    department = require_department(db, department_id)
    department_repo.delete(db, department)
    commit_or_conflict(db, f"Department {department_id} could not be deleted.")
