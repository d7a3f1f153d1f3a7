"""Department persistence: lookup by id and unique name, list, add, delete."""

from sqlalchemy.orm import Session

from app.models import Department


def get(db: Session, department_id: int) -> Department | None:
    return db.get(Department, department_id)


def get_by_name(db: Session, name: str) -> Department | None:
    return db.query(Department).filter(Department.name == name).first()


def exists_by_name(db: Session, name: str) -> bool:
    return db.query(Department.id).filter(Department.name == name).first() is not None


def list_all(db: Session) -> list[Department]:
    return db.query(Department).order_by(Department.id).all()


def names_by_id(db: Session) -> dict[int, str]:
    """Map every department id to its current name (one query)."""
    return {row.id: row.name for row in db.query(Department.id, Department.name).all()}


def add(db: Session, department: Department) -> Department:
    db.add(department)
    return department


def delete(db: Session, department: Department) -> None:
    db.delete(department)
