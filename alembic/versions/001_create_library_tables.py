"""Create library tables

Revision ID: 001
Revises: None
Create Date: 2024-06-01 00:00:00.000000+00:00

What:  Creates every table the library backend uses.
How:   PostgreSQL server defaults (gen_random_uuid(), CURRENT_TIMESTAMP) so
       rows inserted outside the application still get ids and timestamps.
       The ORM models set the same values client-side.

References between tables (borrows → books, profiles → users) are by value
only; there are no foreign keys.

Rollback: downgrade() drops every table (destructive, all data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("gen_random_uuid()"),
        primary_key=True,
    )


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=True, unique=True),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("full_name", sa.Text(), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("roll_number", sa.String(100), nullable=True),
        sa.Column("department", sa.Text(), nullable=True),
        sa.Column("student_class", sa.String(100), nullable=True),
        sa.Column("type", sa.String(20), nullable=False, server_default=sa.text("'user'")),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        _created_at(),
        _updated_at(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "profiles",
        _id(),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False, unique=True),
        sa.Column("full_name", sa.Text(), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("roll_number", sa.String(100), nullable=True),
        sa.Column("department", sa.Text(), nullable=True),
        sa.Column("student_class", sa.String(100), nullable=True),
        sa.Column("type", sa.String(20), nullable=False, server_default=sa.text("'user'")),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "books",
        _id(),
        sa.Column("book_name", sa.Text(), nullable=False),
        sa.Column("short_intro", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("book_image", sa.String(512), nullable=True),
        sa.Column("total_copies", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.Column("available_copies", sa.Integer(), nullable=False, server_default=sa.text("1")),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "book_borrows",
        _id(),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("book_id", sa.String(64), nullable=False),
        sa.Column("book_title", sa.Text(), nullable=False),
        sa.Column("borrower_name", sa.Text(), nullable=False),
        sa.Column("borrower_phone", sa.String(50), nullable=True),
        sa.Column("borrower_email", sa.String(255), nullable=True),
        sa.Column(
            "borrow_date",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("due_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("return_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'borrowed'")),
        _created_at(),
    )
    op.create_index("idx_book_borrows_status", "book_borrows", ["status"])

    op.create_table(
        "library_card_applications",
        _id(),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("father_name", sa.Text(), nullable=True),
        sa.Column("dob", sa.Date(), nullable=True),
        sa.Column("class", sa.String(100), nullable=False),
        sa.Column("field", sa.Text(), nullable=True),
        sa.Column("roll_no", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=False),
        sa.Column("address_street", sa.Text(), nullable=False),
        sa.Column("address_city", sa.Text(), nullable=False),
        sa.Column("address_state", sa.Text(), nullable=False),
        sa.Column("address_zip", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'pending'")),
        sa.Column("card_number", sa.String(64), nullable=True),
        sa.Column("student_id", sa.String(100), nullable=True),
        sa.Column("issue_date", sa.Date(), nullable=True),
        sa.Column("valid_through", sa.Date(), nullable=True),
        sa.Column("password", sa.Text(), nullable=True),
        _created_at(),
        _updated_at(),
    )
    op.create_index(
        "ix_library_card_applications_card_number",
        "library_card_applications",
        ["card_number"],
        unique=True,
    )

    op.create_table(
        "rare_books",
        _id(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(100), nullable=False, server_default=sa.text("'General'")),
        sa.Column("pdf_path", sa.String(512), nullable=False, server_default=sa.text("''")),
        sa.Column("cover_image", sa.String(512), nullable=False, server_default=sa.text("''")),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'active'")),
        _created_at(),
    )

    op.create_table(
        "notes",
        _id(),
        sa.Column("class", sa.String(100), nullable=False),
        sa.Column("subject", sa.String(255), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("pdf_path", sa.String(512), nullable=False, server_default=sa.text("''")),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'active'")),
        _created_at(),
        _updated_at(),
    )
    # Student-facing filter: WHERE class = ? AND subject = ? AND status = 'active'
    op.create_index("idx_notes_class_subject", "notes", ["class", "subject"])

    op.create_table(
        "events",
        _id(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False, server_default=sa.text("'[]'")),
        sa.Column("date", sa.Date(), nullable=True),
        _created_at(),
        _updated_at(),
    )

    op.create_table(
        "notifications",
        _id(),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("image", sa.String(512), nullable=True),
        sa.Column("type", sa.String(10), nullable=False),
        _created_at(),
        sa.CheckConstraint("type IN ('text', 'image', 'both')", name="ck_notifications_type"),
    )

    op.create_table(
        "contact_messages",
        _id(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("subject", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_seen", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        _created_at(),
    )

    op.create_table(
        "donations",
        _id(),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("method", sa.String(50), nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'completed'")),
        _created_at(),
    )


def downgrade() -> None:
    op.drop_table("donations")
    op.drop_table("contact_messages")
    op.drop_table("notifications")
    op.drop_table("events")
    op.drop_index("idx_notes_class_subject", table_name="notes")
    op.drop_table("notes")
    op.drop_table("rare_books")
    op.drop_index("ix_library_card_applications_card_number", table_name="library_card_applications")
    op.drop_table("library_card_applications")
    op.drop_index("idx_book_borrows_status", table_name="book_borrows")
    op.drop_table("book_borrows")
    op.drop_table("books")
    op.drop_table("profiles")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
