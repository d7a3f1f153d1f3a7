"""
Create a user with an explicit role (e.g. a second admin). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD EMAIL [role]
Example:
  python -m app.scripts.create_user alice your-secure-password alice@example.com ADMIN
"""
import argparse
import logging
import sys

from pydantic import ValidationError as SchemaValidationError

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.errors import ConflictError
from app.models import Role
from app.schemas.user import UserRegisterRequest
from app.services.user_service import create_user

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Employee Management user with a given role.")
    parser.add_argument("username", help="Username (3-50 chars)")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.NORMAL_USER.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    # Same field rules as self-registration.
    try:
        fields = UserRegisterRequest(
            username=args.username.strip(), password=args.password, email=args.email
        )
    except SchemaValidationError as e:
        for err in e.errors():
            print(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 1

    init_db()
    db = SessionLocal()
    try:
        user = create_user(
            db,
            username=fields.username,
            password=fields.password,
            email=str(fields.email),
            role=Role(args.role),
        )
    except ConflictError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role.value}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
