"""ORM model for employees."""

from sqlalchemy import Column, Date, Float, Integer, String

from app.models.base import Base


class Employee(Base):
    """
    Employee record belonging to one department.

    department_id is deliberately not a database foreign key: deleting a
    department leaves its employees pointing at the removed id.
    """

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone_number = Column(String(20), nullable=True)
    hire_date = Column(Date, nullable=False)
    salary = Column(Float, nullable=False)
    job_role = Column(String(50), nullable=False)
    department_id = Column(Integer, nullable=False, index=True)
