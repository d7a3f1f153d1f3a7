"""ORM model for application users (auth and RBAC)."""

from enum import Enum

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class Role(str, Enum):
    """Closed set of user roles."""

    ADMIN = "ADMIN"
    NORMAL_USER = "NORMAL_USER"


class User(Base):
    """
    User account for HTTP Basic authentication and role-based access control.

    role: 'ADMIN' or 'NORMAL_USER'
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    role = Column(String(32), nullable=False, default=Role.NORMAL_USER.value)
