#!/usr/bin/env python
"""Create an employee account, typically the first manager or admin."""

import asyncio
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hr_api.constants.validation import PASSWORD_MAX_BYTES, PASSWORD_MIN_LENGTH
from hr_api.database import async_session_maker, engine
from hr_api.models.domain.enums import EmployeeRole
from hr_api.repositories.employee_repository import EmployeeRepository
from hr_api.security.password import PasswordService


async def create_employee(
    email: str,
    password: str,
    first_name: str,
    last_name: str,
    role: EmployeeRole,
) -> bool:
    """Create an employee with the given role."""
    if len(password) < PASSWORD_MIN_LENGTH:
        print(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
        return False
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        print(f"Password must not exceed {PASSWORD_MAX_BYTES} bytes")
        return False

    password_hash = PasswordService().hash_password(password)

    try:
        async with async_session_maker() as session:
            repo = EmployeeRepository(session)
            if await repo.get_by_email(email) is not None:
                print(f"Employee {email} already exists")
                return False

            employee = await repo.create(
                first_name=first_name,
                last_name=last_name,
                email=email.lower(),
                password_hash=password_hash,
                role=role.value,
            )
            await session.commit()
            print(f"Employee created: {email} (id={employee.id}, role={role.value})")
            return True
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create an employee account")
    parser.add_argument("--email", required=True, help="Email address")
    parser.add_argument(
        "--password", required=True, help=f"Password (min {PASSWORD_MIN_LENGTH} chars)"
    )
    parser.add_argument("--first-name", required=True, help="First name")
    parser.add_argument("--last-name", required=True, help="Last name")
    parser.add_argument(
        "--role",
        choices=[r.value for r in EmployeeRole],
        default=EmployeeRole.MANAGER.value,
        help="Role (default: manager)",
    )
    args = parser.parse_args()

    ok = asyncio.run(
        create_employee(
            args.email, args.password, args.first_name, args.last_name, EmployeeRole(args.role)
        )
    )
    sys.exit(0 if ok else 1)
