"""HTTP tests through FastAPI's TestClient: authentication, authorization and status mapping."""

import json
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.database import get_db
from app.core.security import hash_password
from app.main import app
from app.services.bootstrap import ensure_admin_user
from db_support import make_session_factory

API = settings.API_V1_PREFIX
ADMIN = ("admin", "adminpass")
ALICE = ("alice", "alice-pass")


def _employee_payload(department_id: int, **kwargs: object) -> dict:
    payload = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane.doe@company.com",
        "phone_number": "555-0100",
        "hire_date": "2021-03-15",
        "salary": 85000,
        "job_role": "Engineer",
        "department_id": department_id,
    }
    payload.update(kwargs)
    return payload


class ApiTestCase(unittest.TestCase):
    """Fresh database per test, seeded with the bootstrap admin."""

    def setUp(self) -> None:
        session_factory = make_session_factory()

        def override_get_db():
            db = session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.addCleanup(app.dependency_overrides.clear)

        db = session_factory()
        try:
            ensure_admin_user(
                db, hash_password, username="admin", password="adminpass", email="admin@example.com"
            )
        finally:
            db.close()
        self.client = TestClient(app)

    def register(self, username: str = "alice", password: str = "alice-pass", **extra: object):
        body = {"username": username, "password": password, "email": f"{username}@company.com"}
        body.update(extra)
        return self.client.post(f"{API}/auth/register", json=body)

    def create_department(self, name: str = "Engineering", location: str | None = "Building A") -> dict:
        resp = self.client.post(
            f"{API}/departments", json={"name": name, "location": location}, auth=ADMIN
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()


class TestRegistration(ApiTestCase):
    def test_register_without_credentials(self) -> None:
        resp = self.register()
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["username"], "alice")
        self.assertEqual(body["role"], "NORMAL_USER")
        self.assertNotIn("password", body)
        self.assertNotIn("password_hash", body)

    def test_requested_admin_role_is_forced_to_normal_user(self) -> None:
        resp = self.register(role="ADMIN")
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["role"], "NORMAL_USER")

    def test_duplicate_username_is_bad_request(self) -> None:
        self.register()
        resp = self.client.post(
            f"{API}/auth/register",
            json={"username": "alice", "password": "other-pass", "email": "other@company.com"},
        )
        self.assertEqual(resp.status_code, 400)

    def test_invalid_payload_is_bad_request(self) -> None:
        resp = self.client.post(
            f"{API}/auth/register",
            json={"username": "al", "password": "x", "email": "nope"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIsInstance(resp.json()["detail"], list)


class TestAuthentication(ApiTestCase):
    def test_anonymous_request_is_unauthorized(self) -> None:
        resp = self.client.get(f"{API}/departments")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.headers["www-authenticate"], "Basic")

    def test_wrong_password_is_unauthorized(self) -> None:
        resp = self.client.get(f"{API}/departments", auth=("admin", "wrong-password"))
        self.assertEqual(resp.status_code, 401)

    def test_anonymous_admin_operation_is_unauthorized_not_forbidden(self) -> None:
        resp = self.client.delete(f"{API}/departments/1")
        self.assertEqual(resp.status_code, 401)


class TestDepartmentEndpoints(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.register()

    def test_normal_user_cannot_write_departments(self) -> None:
        dept = self.create_department()
        self.assertEqual(
            self.client.post(f"{API}/departments", json={"name": "Ops"}, auth=ALICE).status_code,
            403,
        )
        self.assertEqual(
            self.client.put(
                f"{API}/departments/{dept['id']}", json={"name": "Ops"}, auth=ALICE
            ).status_code,
            403,
        )
        self.assertEqual(
            self.client.delete(f"{API}/departments/{dept['id']}", auth=ALICE).status_code, 403
        )

    def test_normal_user_can_read_departments(self) -> None:
        dept = self.create_department()
        listed = self.client.get(f"{API}/departments", auth=ALICE)
        self.assertEqual(listed.status_code, 200)
        self.assertEqual([d["name"] for d in listed.json()], ["Engineering"])
        one = self.client.get(f"{API}/departments/{dept['id']}", auth=ALICE)
        self.assertEqual(one.json(), dept)

    def test_missing_department_is_not_found(self) -> None:
        self.assertEqual(self.client.get(f"{API}/departments/999", auth=ADMIN).status_code, 404)
        self.assertEqual(
            self.client.put(
                f"{API}/departments/999", json={"name": "Ops"}, auth=ADMIN
            ).status_code,
            404,
        )
        self.assertEqual(self.client.delete(f"{API}/departments/999", auth=ADMIN).status_code, 404)

    def test_duplicate_name_is_bad_request(self) -> None:
        self.create_department()
        resp = self.client.post(f"{API}/departments", json={"name": "Engineering"}, auth=ADMIN)
        self.assertEqual(resp.status_code, 400)

    def test_update_and_delete(self) -> None:
        dept = self.create_department()
        updated = self.client.put(
            f"{API}/departments/{dept['id']}", json={"name": "Platform"}, auth=ADMIN
        )
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json(), {"id": dept["id"], "name": "Platform", "location": None})
        deleted = self.client.delete(f"{API}/departments/{dept['id']}", auth=ADMIN)
        self.assertEqual(deleted.status_code, 204)
        self.assertEqual(deleted.content, b"")

    def test_deleting_referenced_department_succeeds(self) -> None:
        dept = self.create_department()
        emp = self.client.post(f"{API}/employees", json=_employee_payload(dept["id"]), auth=ALICE)
        self.assertEqual(emp.status_code, 201)

        self.assertEqual(self.client.delete(f"{API}/departments/{dept['id']}", auth=ADMIN).status_code, 204)

        orphan = self.client.get(f"{API}/employees/{emp.json()['id']}", auth=ALICE)
        self.assertEqual(orphan.status_code, 200)
        self.assertEqual(orphan.json()["department_id"], dept["id"])
        self.assertIsNone(orphan.json()["department_name"])


class TestEmployeeEndpoints(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.register()
        self.dept = self.create_department()

    def test_crud_as_normal_user(self) -> None:
        created = self.client.post(
            f"{API}/employees", json=_employee_payload(self.dept["id"]), auth=ALICE
        )
        self.assertEqual(created.status_code, 201)
        emp_id = created.json()["id"]

        listed = self.client.get(f"{API}/employees", auth=ALICE)
        self.assertEqual([e["id"] for e in listed.json()], [emp_id])

        updated = self.client.put(
            f"{API}/employees/{emp_id}",
            json=_employee_payload(self.dept["id"], job_role="Staff Engineer"),
            auth=ALICE,
        )
        self.assertEqual(updated.status_code, 200)
        self.assertEqual(updated.json()["job_role"], "Staff Engineer")

        self.assertEqual(self.client.delete(f"{API}/employees/{emp_id}", auth=ALICE).status_code, 204)
        self.assertEqual(self.client.get(f"{API}/employees/{emp_id}", auth=ALICE).status_code, 404)

    def test_unknown_department_is_not_found(self) -> None:
        resp = self.client.post(f"{API}/employees", json=_employee_payload(999), auth=ALICE)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(self.client.get(f"{API}/employees", auth=ALICE).json(), [])

    def test_duplicate_email_is_bad_request(self) -> None:
        self.client.post(f"{API}/employees", json=_employee_payload(self.dept["id"]), auth=ALICE)
        resp = self.client.post(
            f"{API}/employees", json=_employee_payload(self.dept["id"]), auth=ALICE
        )
        self.assertEqual(resp.status_code, 400)

    def test_field_validation_runs_before_service(self) -> None:
        for overrides in (
            {"hire_date": "2999-01-01"},
            {"salary": -1},
            {"email": "not-an-email"},
            {"first_name": "J"},
            {"department_id": 0},
            {"department_id": 2**70},
        ):
            with self.subTest(overrides=overrides):
                resp = self.client.post(
                    f"{API}/employees",
                    json=_employee_payload(self.dept["id"], **overrides),
                    auth=ALICE,
                )
                self.assertEqual(resp.status_code, 400)

    def test_non_finite_salary_is_bad_request(self) -> None:
        for salary in (float("inf"), float("nan")):
            with self.subTest(salary=salary):
                # The stdlib encoder writes the Infinity/NaN literals the JSON parser accepts.
                body = json.dumps(_employee_payload(self.dept["id"], salary=salary))
                resp = self.client.post(
                    f"{API}/employees",
                    content=body,
                    headers={"Content-Type": "application/json"},
                    auth=ALICE,
                )
                self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.client.get(f"{API}/employees", auth=ALICE).json(), [])

    def test_out_of_range_ids_are_bad_request(self) -> None:
        huge = 1180591620717411303424
        for method, path in (
            ("GET", f"{API}/departments/{huge}"),
            ("GET", f"{API}/departments/0"),
            ("DELETE", f"{API}/departments/{huge}"),
            ("GET", f"{API}/employees/{huge}"),
            ("DELETE", f"{API}/employees/-1"),
            ("GET", f"{API}/employees/by-department/{huge}"),
        ):
            with self.subTest(method=method, path=path):
                resp = self.client.request(method, path, auth=ADMIN)
                self.assertEqual(resp.status_code, 400)
        resp = self.client.put(
            f"{API}/employees/{huge}", json=_employee_payload(self.dept["id"]), auth=ADMIN
        )
        self.assertEqual(resp.status_code, 400)
        resp = self.client.put(f"{API}/users/{huge}/role", json={"role": "ADMIN"}, auth=ADMIN)
        self.assertEqual(resp.status_code, 400)

    def test_by_department_is_sorted_by_last_then_first_name(self) -> None:
        for first, last in [("Jane", "Doe"), ("Tom", "Adams"), ("Alice", "Doe")]:
            resp = self.client.post(
                f"{API}/employees",
                json=_employee_payload(
                    self.dept["id"],
                    first_name=first,
                    last_name=last,
                    email=f"{first.lower()}.{last.lower()}@company.com",
                ),
                auth=ALICE,
            )
            self.assertEqual(resp.status_code, 201)

        resp = self.client.get(f"{API}/employees/by-department/{self.dept['id']}", auth=ALICE)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            [(e["last_name"], e["first_name"]) for e in resp.json()],
            [("Adams", "Tom"), ("Doe", "Alice"), ("Doe", "Jane")],
        )

    def test_by_department_unknown_department_is_not_found(self) -> None:
        resp = self.client.get(f"{API}/employees/by-department/999", auth=ALICE)
        self.assertEqual(resp.status_code, 404)


class TestUserAdministration(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.alice_id = self.register().json()["id"]

    def test_only_admin_lists_users(self) -> None:
        self.assertEqual(self.client.get(f"{API}/users", auth=ALICE).status_code, 403)
        resp = self.client.get(f"{API}/users", auth=ADMIN)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            [(u["username"], u["role"]) for u in resp.json()],
            [("admin", "ADMIN"), ("alice", "NORMAL_USER")],
        )
        self.assertTrue(all("password_hash" not in u for u in resp.json()))

    def test_invalid_role_is_bad_request_and_role_unchanged(self) -> None:
        resp = self.client.put(
            f"{API}/users/{self.alice_id}/role", json={"role": "SUPERUSER"}, auth=ADMIN
        )
        self.assertEqual(resp.status_code, 400)
        users = self.client.get(f"{API}/users", auth=ADMIN).json()
        self.assertEqual({u["username"]: u["role"] for u in users}["alice"], "NORMAL_USER")

    def test_role_update_for_missing_user_is_not_found(self) -> None:
        resp = self.client.put(f"{API}/users/999/role", json={"role": "ADMIN"}, auth=ADMIN)
        self.assertEqual(resp.status_code, 404)

    def test_promoted_user_gains_admin_operations(self) -> None:
        self.assertEqual(
            self.client.post(f"{API}/departments", json={"name": "Ops"}, auth=ALICE).status_code,
            403,
        )
        resp = self.client.put(
            f"{API}/users/{self.alice_id}/role", json={"role": "ADMIN"}, auth=ADMIN
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["role"], "ADMIN")
        self.assertEqual(
            self.client.post(f"{API}/departments", json={"name": "Ops"}, auth=ALICE).status_code,
            201,
        )

    def test_normal_user_cannot_change_roles(self) -> None:
        resp = self.client.put(
            f"{API}/users/{self.alice_id}/role", json={"role": "ADMIN"}, auth=ALICE
        )
        self.assertEqual(resp.status_code, 403)


class TestEndToEnd(ApiTestCase):
    def test_normal_user_flow(self) -> None:
        dept = self.create_department(name="Research")

        registered = self.register(role="ADMIN")
        self.assertEqual(registered.status_code, 201)
        self.assertEqual(registered.json()["role"], "NORMAL_USER")

        denied = self.client.delete(f"{API}/departments/{dept['id']}", auth=ALICE)
        self.assertEqual(denied.status_code, 403)

        created = self.client.post(
            f"{API}/employees", json=_employee_payload(dept["id"]), auth=ALICE
        )
        self.assertEqual(created.status_code, 201)
        self.assertEqual(created.json()["department_name"], "Research")

        # Department survived the denied delete.
        self.assertEqual(self.client.get(f"{API}/departments/{dept['id']}", auth=ALICE).status_code, 200)


class TestUnexpectedErrors(ApiTestCase):
    def test_unexpected_failure_is_opaque_500(self) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        with patch(
            "app.api.v1.departments.department_service.list_departments",
            side_effect=RuntimeError("connection string postgres://secret@db"),
        ):
            resp = client.get(f"{API}/departments", auth=ADMIN)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"detail": "Internal server error"})


if __name__ == "__main__":
    unittest.main()
