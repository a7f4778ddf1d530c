"""Birthday schema

Revision ID: c3d4e5f6a7b8
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c3d4e5f6a7b8"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_name", sa.String(length=100), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_users_user_name"), ["user_name"], unique=True)

    op.create_table(
        "birthdays",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("birthday_name", sa.String(length=100), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "birthday_name", name="uq_user_birthday_name"),
    )
    with op.batch_alter_table("birthdays", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_birthdays_user_id"), ["user_id"], unique=False)

    op.create_table(
        "interests",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("birthday_id", sa.Integer(), nullable=False),
        sa.Column("interest", sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(["birthday_id"], ["birthdays.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    with op.batch_alter_table("interests", schema=None) as batch_op:
        batch_op.create_index(
            batch_op.f("ix_interests_birthday_id"), ["birthday_id"], unique=False
        )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables in reverse order of creation
    with op.batch_alter_table("interests", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_interests_birthday_id"))
    op.drop_table("interests")

    with op.batch_alter_table("birthdays", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_birthdays_user_id"))
    op.drop_table("birthdays")

    with op.batch_alter_table("users", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_users_user_name"))
    op.drop_table("users")
