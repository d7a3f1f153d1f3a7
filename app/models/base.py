"""SQLAlchemy declarative Base with stable constraint names."""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

# Named constraints so unique violations point at a predictable name (e.g. uq_users_email).
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base for department, employee and user models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)
