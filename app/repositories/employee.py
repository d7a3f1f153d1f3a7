"""Employee persistence: lookup by id and unique email, list, per-department listing."""

from sqlalchemy.orm import Session

from app.models import Employee


def get(db: Session, employee_id: int) -> Employee | None:
    return db.get(Employee, employee_id)


def get_by_email(db: Session, email: str) -> Employee | None:
    return db.query(Employee).filter(Employee.email == email).first()


def exists_by_email(db: Session, email: str) -> bool:
    return db.query(Employee.id).filter(Employee.email == email).first() is not None


def list_all(db: Session) -> list[Employee]:
    return db.query(Employee).order_by(Employee.id).all()


def list_by_department(db: Session, department_id: int) -> list[Employee]:
    """Employees of one department ordered by last name, then first name."""
    return (
        db.query(Employee)
        .filter(Employee.department_id == department_id)
        .order_by(Employee.last_name.asc(), Employee.first_name.asc(), Employee.id.asc())
        .all()
    )


def add(db: Session, employee: Employee) -> Employee:
    db.add(employee)
    return employee


def delete(db: Session, employee: Employee) -> None:
    db.delete(employee)
