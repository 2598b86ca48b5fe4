"""End-to-end tests through the HTTP API."""

import pytest

from hr_api.models.domain.enums import EmployeeRole

ABSENCE_BODY = {
    "type": "vacation",
    "start_date": "2025-06-10",
    "end_date": "2025-06-12",
    "reason": "Family trip to the coast",
}


@pytest.fixture
async def people(create_employee):
    """An employee, a colleague and a manager."""
    employee = await create_employee(first_name="Erin", last_name="Stone")
    colleague = await create_employee(first_name="Carl", last_name="Berg")
    manager = await create_employee(first_name="Mona", last_name="Klein", role=EmployeeRole.MANAGER)
    return employee, colleague, manager


class TestHealthAndErrors:
    """Tests for the application shell."""

    async def test_health(self, client) -> None:
        """Health endpoint answers without authentication."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    async def test_missing_token(self, client) -> None:
        """Protected endpoints require a bearer token."""
        response = await client.get("/api/v1/employee")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_invalid_token(self, client) -> None:
        """Unverifiable tokens are rejected."""
        response = await client.get(
            "/api/v1/employee", headers={"Authorization": "Bearer nonsense"}
        )

        assert response.status_code == 401

    async def test_unknown_route(self, client) -> None:
        """Unknown routes give a generic 404."""
        response = await client.get("/api/v1/nothing-here")

        assert response.status_code == 404


class TestAuthEndpoints:
    """Tests for /api/v1/auth."""

    async def test_register_login_me(self, client) -> None:
        """A registered employee logs in and reads their own claims."""
        body = {
            "first_name": "Erin",
            "last_name": "Stone",
            "email": "erin@example.com",
            "password": "s3cret-pass",
        }
        registered = await client.post("/api/v1/auth/register", json=body)
        assert registered.status_code == 201

        login = await client.post(
            "/api/v1/auth/login",
            json={"email": "erin@example.com", "password": "s3cret-pass"},
        )
        assert login.status_code == 200
        token = login.json()["token"]

        me = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "erin@example.com"
        assert me.json()["role"] == "employee"

        validate = await client.post("/api/v1/auth/validate", json={"token": token})
        assert validate.json() == {"is_valid": True}

    async def test_duplicate_registration(self, client, create_employee) -> None:
        """Registering a taken email is a 400."""
        await create_employee(email="erin@example.com")

        response = await client.post(
            "/api/v1/auth/register",
            json={
                "first_name": "Erin",
                "last_name": "Stone",
                "email": "erin@example.com",
                "password": "s3cret-pass",
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "User with this email already exists"

    async def test_bad_login(self, client) -> None:
        """Wrong credentials are a 401."""
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "whatever"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    async def test_invalid_body_lists_fields(self, client) -> None:
        """Validation failures are 400 with the offending fields."""
        response = await client.post(
            "/api/v1/auth/register",
            json={"first_name": "Erin", "email": "not-an-email", "password": "1"},
        )

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert {"last_name", "email", "password"} <= fields

    @pytest.mark.parametrize("password", ["p" * 80, "€" * 30])
    async def test_password_over_bcrypt_limit(self, client, password) -> None:
        """Passwords longer than 72 bytes are a 400, not a server error."""
        response = await client.post(
            "/api/v1/auth/register",
            json={
                "first_name": "Erin",
                "last_name": "Stone",
                "email": "erin@example.com",
                "password": password,
            },
        )

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["password"]

    async def test_password_at_bcrypt_limit(self, client) -> None:
        """A 72-byte password registers and logs in."""
        password = "p" * 72
        registered = await client.post(
            "/api/v1/auth/register",
            json={
                "first_name": "Erin",
                "last_name": "Stone",
                "email": "erin@example.com",
                "password": password,
            },
        )
        login = await client.post(
            "/api/v1/auth/login", json={"email": "erin@example.com", "password": password}
        )

        assert registered.status_code == 201
        assert login.status_code == 200

    async def test_login_password_over_bcrypt_limit(self, client) -> None:
        """Overlong login passwords are rejected as invalid input."""
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "erin@example.com", "password": "p" * 80},
        )

        assert response.status_code == 400


class TestEmployeeEndpoints:
    """Tests for /api/v1/employee."""

    async def test_directory(self, client, people, auth_headers) -> None:
        """The directory lists everyone sorted by last name."""
        employee, _, _ = people

        response = await client.get("/api/v1/employee", headers=auth_headers(employee))

        assert response.status_code == 200
        assert [e["last_name"] for e in response.json()] == ["Berg", "Klein", "Stone"]
        assert response.json()[0]["department"] == "Not Assigned"

    async def test_public_and_full_views(self, client, people, auth_headers) -> None:
        """Colleagues get the public view, the employee the full one."""
        employee, colleague, _ = people
        url = f"/api/v1/employee/{employee.id}"

        public = (await client.get(url, headers=auth_headers(colleague))).json()
        full = (await client.get(url, headers=auth_headers(employee))).json()

        assert public["view"] == "public"
        assert "email" not in public
        assert full["view"] == "full"
        assert full["email"] == employee.email

    async def test_update_forbidden_for_colleague(self, client, people, auth_headers) -> None:
        """Editing someone else's profile is a 403."""
        employee, colleague, _ = people

        response = await client.put(
            f"/api/v1/employee/{employee.id}",
            json={"first_name": "X", "last_name": "Y", "email": "x@example.com"},
            headers=auth_headers(colleague),
        )

        assert response.status_code == 403

    async def test_update_email_conflict(self, client, people, auth_headers) -> None:
        """Taking another employee's email is a 409."""
        employee, colleague, _ = people

        response = await client.put(
            f"/api/v1/employee/{employee.id}",
            json={"first_name": "Erin", "last_name": "Stone", "email": colleague.email},
            headers=auth_headers(employee),
        )

        assert response.status_code == 409

    async def test_missing_profile(self, client, people, auth_headers) -> None:
        """Unknown employees are a 404."""
        employee, _, _ = people

        response = await client.get("/api/v1/employee/999", headers=auth_headers(employee))

        assert response.status_code == 404


class TestAbsenceEndpoints:
    """Tests for /api/v1/absence."""

    async def test_request_lifecycle(self, client, people, auth_headers, fixed_today) -> None:
        """Create, list, approve and view an absence request."""
        employee, _, manager = people

        created = await client.post(
            "/api/v1/absence", json=ABSENCE_BODY, headers=auth_headers(employee)
        )
        assert created.status_code == 201
        request_id = created.json()["id"]
        assert created.json()["duration_in_days"] == 3

        pending = await client.get(
            "/api/v1/absence/pending-approvals", headers=auth_headers(manager)
        )
        assert [r["id"] for r in pending.json()] == [request_id]

        approved = await client.put(
            f"/api/v1/absence/{request_id}/approve",
            json={"approver_notes": "Approved, enjoy"},
            headers=auth_headers(manager),
        )
        assert approved.status_code == 200
        assert approved.json()["status"] == "approved"
        assert approved.json()["approved_by_id"] == manager.id

        again = await client.put(
            f"/api/v1/absence/{request_id}/approve",
            json={},
            headers=auth_headers(manager),
        )
        assert again.status_code == 400

        listing = await client.get("/api/v1/absence/approved", headers=auth_headers(employee))
        assert listing.json()[0]["reason"] is None

    async def test_overlap_is_400(self, client, people, auth_headers, fixed_today) -> None:
        """A second request for the same days is rejected."""
        employee, _, _ = people
        headers = auth_headers(employee)
        await client.post("/api/v1/absence", json=ABSENCE_BODY, headers=headers)

        response = await client.post("/api/v1/absence", json=ABSENCE_BODY, headers=headers)

        assert response.status_code == 400
        assert response.json()["detail"] == (
            "You already have an absence request for the selected dates."
        )

    async def test_retired_type_is_400(self, client, people, auth_headers, fixed_today) -> None:
        """Bereavement can no longer be requested."""
        employee, _, _ = people

        response = await client.post(
            "/api/v1/absence",
            json={**ABSENCE_BODY, "type": "bereavement"},
            headers=auth_headers(employee),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "type"

    async def test_employee_cannot_approve(self, client, people, auth_headers, fixed_today) -> None:
        """Approval by a plain employee is a 403."""
        employee, colleague, _ = people
        created = await client.post(
            "/api/v1/absence", json=ABSENCE_BODY, headers=auth_headers(employee)
        )

        response = await client.put(
            f"/api/v1/absence/{created.json()['id']}/approve",
            json={},
            headers=auth_headers(colleague),
        )

        assert response.status_code == 403

    async def test_cancel(self, client, people, auth_headers, fixed_today) -> None:
        """Owners cancel with 204, others get 404."""
        employee, colleague, _ = people
        created = await client.post(
            "/api/v1/absence", json=ABSENCE_BODY, headers=auth_headers(employee)
        )
        url = f"/api/v1/absence/{created.json()['id']}"

        foreign = await client.delete(url, headers=auth_headers(colleague))
        own = await client.delete(url, headers=auth_headers(employee))
        mine = await client.get("/api/v1/absence/my-requests", headers=auth_headers(employee))

        assert foreign.status_code == 404
        assert own.status_code == 204
        assert mine.json()[0]["status"] == "cancelled"

    async def test_list_for_employee_requires_manager(
        self, client, people, auth_headers
    ) -> None:
        """Listing another employee's requests is for managers."""
        employee, colleague, manager = people
        url = f"/api/v1/absence/employee/{employee.id}"

        assert (await client.get(url, headers=auth_headers(colleague))).status_code == 403
        assert (await client.get(url, headers=auth_headers(manager))).status_code == 200


class TestFeedbackEndpoints:
    """Tests for /api/v1/feedback."""

    async def test_give_and_receive_anonymously(self, client, people, auth_headers) -> None:
        """Anonymous feedback reaches the recipient without a sender name."""
        employee, colleague, _ = people

        created = await client.post(
            "/api/v1/feedback",
            json={"to_employee_id": colleague.id, "content": "Nice demo", "is_anonymous": True},
            headers=auth_headers(employee),
        )
        received = await client.get(
            f"/api/v1/feedback/received/{colleague.id}", headers=auth_headers(colleague)
        )

        assert created.status_code == 201
        assert received.json()[0]["from_employee_name"] == "Anonymous"

    async def test_self_feedback_is_403(self, client, people, auth_headers) -> None:
        """Feedback to oneself is forbidden."""
        employee, _, _ = people

        response = await client.post(
            "/api/v1/feedback",
            json={"to_employee_id": employee.id, "content": "I rock"},
            headers=auth_headers(employee),
        )

        assert response.status_code == 403

    async def test_missing_recipient_is_404(self, client, people, auth_headers) -> None:
        """Feedback to nobody is a 404."""
        employee, _, _ = people

        response = await client.post(
            "/api/v1/feedback",
            json={"to_employee_id": 999, "content": "Hello"},
            headers=auth_headers(employee),
        )

        assert response.status_code == 404

    async def test_permission_checks(self, client, people, auth_headers) -> None:
        """can-view and can-give answer with plain booleans."""
        employee, colleague, _ = people
        headers = auth_headers(employee)

        can_view = await client.get(f"/api/v1/feedback/can-view/{colleague.id}", headers=headers)
        can_give = await client.get(f"/api/v1/feedback/can-give/{colleague.id}", headers=headers)

        assert can_view.json() is False
        assert can_give.json() is True


class TestErrorMapping:
    """Tests for the domain exception to status code table."""

    def test_every_domain_error_has_a_status(self) -> None:
        """No exception defined by the application falls through to 500."""
        import inspect

        from hr_api import exceptions
        from hr_api.middleware.error_handler import DOMAIN_STATUS_CODES

        mapped = tuple(exc_type for exc_type, _ in DOMAIN_STATUS_CODES)
        defined = [
            obj
            for _, obj in inspect.getmembers(exceptions, inspect.isclass)
            if issubclass(obj, exceptions.HrAPIError) and obj is not exceptions.HrAPIError
        ]

        assert defined
        assert all(issubclass(exc_type, mapped) for exc_type in defined)
        assert not hasattr(exceptions, "ValidationError")
