"""ORM model for departments."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class Department(Base):
    """
    Organizational department.

    Holds no collection of its employees; look them up by employees.department_id.
    """

    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    location = Column(String(255), nullable=True)
