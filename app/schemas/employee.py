"""Request/response schemas for employee endpoints."""

from datetime import date

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

from app.schemas.common import (
    MAX_RECORD_ID,
    optional_not_blank,
    require_not_blank,
    require_not_in_future,
)


class EmployeeRequest(BaseModel):
    """Fields supplied when creating or replacing an employee. All mutable fields are required."""

    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr = Field(..., description="Work email; unique across employees.")
    phone_number: str | None = Field(default=None, max_length=20)
    hire_date: date = Field(..., description="Hire date; today or earlier.")
    salary: float = Field(..., ge=0, allow_inf_nan=False, description="Salary; zero or positive, finite.")
    job_role: str = Field(..., min_length=2, max_length=50)
    department_id: int = Field(
        ..., ge=1, le=MAX_RECORD_ID, description="ID of an existing department."
    )

    @field_validator("first_name", "last_name", "job_role")
    @classmethod
    def validate_required_text(cls, v: str, info: ValidationInfo) -> str:
        return require_not_blank(v, info.field_name)

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v: str | None) -> str | None:
        return optional_not_blank(v)

    @field_validator("hire_date")
    @classmethod
    def validate_hire_date(cls, v: date) -> date:
        return require_not_in_future(v, "Hire date")


class EmployeeResponse(BaseModel):
    """
    Employee as returned to clients.

    department_name is looked up from the live department on every read; it is
    None when the department has since been deleted.
    """

    id: int
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    hire_date: date
    salary: float
    job_role: str
    department_id: int
    department_name: str | None = None
