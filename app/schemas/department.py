"""Request/response schemas for department endpoints."""

from pydantic import BaseModel, Field, field_validator

from app.schemas.common import optional_not_blank, require_not_blank


class DepartmentRequest(BaseModel):
    """Fields supplied when creating or replacing a department."""

    name: str = Field(
        ...,
        min_length=2,
        max_length=100,
        description="Department name; unique across departments.",
    )
    location: str | None = Field(
        default=None,
        max_length=255,
        description="Where the department sits (e.g. 'Building A').",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return require_not_blank(v, "Department name")

    @field_validator("location")
    @classmethod
    def validate_location(cls, v: str | None) -> str | None:
        return optional_not_blank(v)


class DepartmentResponse(BaseModel):
    """Department as returned to clients."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    location: str | None = None
