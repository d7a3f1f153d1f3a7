"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.department import Department
from app.models.employee import Employee
from app.models.user import Role, User

__all__ = ["Base", "Department", "Employee", "Role", "User"]
