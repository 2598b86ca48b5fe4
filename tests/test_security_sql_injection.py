"""SQL injection prevention tests.

Repositories build every query with the SQLAlchemy expression language, so
user input always travels as a bound parameter. These tests feed hostile
strings through the lookup paths that take free text and check that they
are treated as plain data.
"""

import os
import re

import pytest

SQL_INJECTION_PAYLOADS = [
    "'; DROP TABLE employees; --",
    "1' OR '1'='1",
    "x@example.com' OR '1'='1",
    "' UNION SELECT * FROM employees --",
    "1'; UPDATE employees SET role = 'admin'; --",
    "1'; DELETE FROM absence_requests; --",
    "' UNION ALL SELECT email, password_hash FROM employees --",
    "1'/**/OR/**/1=1--",
    "1'; SELECT pg_sleep(5) --",
    "$$; DROP TABLE feedback; $$",
    "ʼ OR 1=1 --",
]

XSS_PAYLOADS = [
    "<script>alert('XSS')</script>",
    "<img src=x onerror=alert('XSS')>",
    "'><svg onload=alert('XSS')>",
]


class TestLookupParameterization:
    """Hostile input through repository lookups."""

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS)
    async def test_email_lookup_matches_nothing(self, session, create_employee, payload) -> None:
        """Injection strings never match an existing employee."""
        from hr_api.repositories.employee_repository import EmployeeRepository

        await create_employee(email="victim@example.com")
        repo = EmployeeRepository(session)

        assert await repo.get_by_email(payload) is None
        assert await repo.count() == 1

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS[:4])
    async def test_login_rejects_payload(self, session, create_employee, payload) -> None:
        """Login with an injection string fails like any wrong credential."""
        from hr_api.exceptions import AuthenticationError
        from hr_api.services.auth_service import AuthService

        await create_employee(email="victim@example.com")

        with pytest.raises(AuthenticationError):
            await AuthService(session).login("victim@example.com", payload)

    async def test_non_integer_path_ids_rejected(self, client, create_employee, auth_headers) -> None:
        """Path identifiers are parsed as integers before reaching a query."""
        employee = await create_employee()

        response = await client.get(
            "/api/v1/employee/1 OR 1=1", headers=auth_headers(employee)
        )

        assert response.status_code == 400


class TestStoredPayloads:
    """Hostile text stored as ordinary content."""

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS[:3] + XSS_PAYLOADS)
    async def test_feedback_content_stored_verbatim(self, session, create_employee, payload) -> None:
        """Content is persisted exactly as written and other tables survive."""
        from hr_api.models.dto.feedback import FeedbackCreate
        from hr_api.repositories.employee_repository import EmployeeRepository
        from hr_api.services.feedback_service import FeedbackService

        alice = await create_employee(first_name="Alice")
        bob = await create_employee(first_name="Bob")

        detail = await FeedbackService(session).create(
            alice.id, FeedbackCreate(to_employee_id=bob.id, content=payload)
        )
        await session.commit()

        assert detail.content == payload
        assert await EmployeeRepository(session).count() == 2


class TestNoRawSQL:
    """Verify no raw SQL usage in repositories."""

    def test_no_text_in_repositories(self) -> None:
        """Repositories never build statements with sqlalchemy.text()."""
        repo_dir = os.path.join(
            os.path.dirname(__file__), "..", "src", "hr_api", "repositories"
        )
        pattern = re.compile(r"(\.execute\(text\(|=\s*text\(|import\s+.*\btext\b)")

        for filename in sorted(os.listdir(repo_dir)):
            if not filename.endswith(".py"):
                continue
            with open(os.path.join(repo_dir, filename)) as f:
                for i, line in enumerate(f, 1):
                    if line.strip().startswith("#"):
                        continue
                    if pattern.search(line):
                        pytest.fail(f"Potential raw SQL in {filename}:{i}: {line.strip()}")
