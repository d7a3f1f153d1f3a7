"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, departments, employees, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(departments.router, prefix="/departments", tags=["departments"])
router.include_router(employees.router, prefix="/employees", tags=["employees"])
router.include_router(users.router, prefix="/users", tags=["users"])
