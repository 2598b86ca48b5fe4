"""Shared test fixtures.

Settings are read from the environment when ``hr_api`` is first imported,
so the test configuration is installed before any application import.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret-key-with-enough-length-0123456789"
os.environ["ENVIRONMENT"] = "testing"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"

import itertools
from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import date

import httpx
import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hr_api.models.domain.enums import EmployeeRole
from hr_api.models.orm import Base, EmployeeORM

_email_counter = itertools.count(1)

EmployeeFactory = Callable[..., Awaitable[EmployeeORM]]


@pytest.fixture
async def engine(tmp_path):
    """File-backed SQLite engine with the full schema."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'hr_test.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Session used directly by service-level tests."""
    async with session_maker() as session:
        yield session


@pytest.fixture
def create_employee(session: AsyncSession) -> EmployeeFactory:
    """Factory that inserts and commits an employee."""

    async def _create(
        first_name: str = "Test",
        last_name: str = "Employee",
        role: EmployeeRole = EmployeeRole.EMPLOYEE,
        email: str | None = None,
        **fields,
    ) -> EmployeeORM:
        employee = EmployeeORM(
            first_name=first_name,
            last_name=last_name,
            email=email or f"employee{next(_email_counter)}@example.com",
            password_hash=fields.pop("password_hash", "x"),
            role=role.value,
            **fields,
        )
        session.add(employee)
        await session.commit()
        return employee

    return _create


@pytest.fixture
def fixed_today(monkeypatch) -> date:
    """Pin the absence service's notion of today to 2025-06-01."""
    today = date(2025, 6, 1)
    monkeypatch.setattr("hr_api.services.absence_service.utc_today", lambda: today)
    return today


@pytest.fixture
async def client(session_maker) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client driving the app against the test database."""
    from hr_api.database import get_db
    from hr_api.main import app

    async def _get_test_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session
            await session.commit()

    app.dependency_overrides[get_db] = _get_test_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> Callable[[EmployeeORM], dict[str, str]]:
    """Build a bearer header for an employee."""
    from hr_api.security.auth import create_access_token

    def _headers(employee: EmployeeORM) -> dict[str, str]:
        token, _ = create_access_token(employee.id, employee.email, EmployeeRole(employee.role))
        return {"Authorization": f"Bearer {token}"}

    return _headers
