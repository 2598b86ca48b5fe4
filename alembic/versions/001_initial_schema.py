"""Initial schema

Revision ID: 001
Revises:
Create Date: 2025-09-13 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Create employees table
    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default="employee"),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("department", sa.String(100), nullable=True),
        sa.Column("team", sa.String(100), nullable=True),
        sa.Column("position", sa.String(100), nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=True),
        sa.Column("bio", sa.String(500), nullable=True),
        sa.Column("description", sa.String(1000), nullable=True),
        sa.Column("profile_picture_url", sa.String(255), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("address", sa.String(500), nullable=True),
        sa.Column("emergency_contact", sa.String(100), nullable=True),
        sa.Column("emergency_phone", sa.String(20), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.CheckConstraint(
            "role IN ('employee', 'manager', 'admin')", name="ck_employees_role"
        ),
    )
    op.create_index("idx_employees_last_first", "employees", ["last_name", "first_name"])
    op.create_index("idx_employees_role", "employees", ["role"])

    # Create absence_requests table
    op.create_table(
        "absence_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("reason", sa.String(500), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default="pending"),
        sa.Column("approved_by_id", sa.Integer(), nullable=True),
        sa.Column("approval_notes", sa.String(500), nullable=True),
        sa.Column("approved_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["approved_by_id"], ["employees.id"], ondelete="SET NULL"),
        sa.CheckConstraint("end_date >= start_date", name="ck_absence_requests_date_range"),
        # 'bereavement' is retired but stays valid for historical rows
        sa.CheckConstraint(
            "type IN ('vacation', 'sick_leave', 'personal_leave', 'other', 'bereavement')",
            name="ck_absence_requests_type",
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected', 'cancelled')",
            name="ck_absence_requests_status",
        ),
    )
    op.create_index(
        "idx_absence_requests_employee_status", "absence_requests", ["employee_id", "status"]
    )
    op.create_index("idx_absence_requests_status", "absence_requests", ["status"])

    # Create feedback table
    op.create_table(
        "feedback",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("from_employee_id", sa.Integer(), nullable=False),
        sa.Column("to_employee_id", sa.Integer(), nullable=False),
        sa.Column("content", sa.String(1000), nullable=False),
        sa.Column("polished_content", sa.String(1000), nullable=True),
        sa.Column("type", sa.String(50), nullable=False, server_default="general"),
        sa.Column("rating", sa.Integer(), nullable=False, server_default="5"),
        sa.Column("is_anonymous", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_polished", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["from_employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["to_employee_id"], ["employees.id"], ondelete="CASCADE"),
        sa.CheckConstraint("rating BETWEEN 1 AND 10", name="ck_feedback_rating_range"),
        sa.CheckConstraint("from_employee_id <> to_employee_id", name="ck_feedback_not_self"),
    )
    op.create_index("idx_feedback_to_employee", "feedback", ["to_employee_id"])
    op.create_index("idx_feedback_from_employee", "feedback", ["from_employee_id"])


def downgrade() -> None:
    op.drop_index("idx_feedback_from_employee", table_name="feedback")
    op.drop_index("idx_feedback_to_employee", table_name="feedback")
    op.drop_table("feedback")
    op.drop_index("idx_absence_requests_status", table_name="absence_requests")
    op.drop_index("idx_absence_requests_employee_status", table_name="absence_requests")
    op.drop_table("absence_requests")
    op.drop_index("idx_employees_role", table_name="employees")
    op.drop_index("idx_employees_last_first", table_name="employees")
    op.drop_table("employees")
