"""Initial schema - beans, daily_beans, distributors, documents, users.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _envelope() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "beans",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("bean_name", sa.String(100), nullable=True),
        sa.Column("description_bean", sa.String(255), nullable=True),
        sa.Column("price_per_unit", sa.String(255), nullable=True),
        *_envelope(),
    )

    op.create_table(
        "daily_beans",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("bean_id", sa.String(255), nullable=True),
        sa.Column("sale_price", sa.Integer, nullable=True),
        *_envelope(),
    )

    op.create_table(
        "distributors",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("distributor_name", sa.String(255), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("country", sa.String(100), nullable=True),
        sa.Column("phone", sa.String(15), nullable=True),
        sa.Column("email", sa.String(100), nullable=True),
        *_envelope(),
    )

    op.create_table(
        "documents",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("title", sa.String(100), nullable=True),
        sa.Column("document_file", sa.String(255), nullable=True),
        sa.Column("author", sa.String(50), nullable=True),
        *_envelope(),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("full_name", sa.String(100), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("password", sa.String(50), nullable=True),
        *_envelope(),
    )

    for table in ("beans", "daily_beans", "distributors", "documents", "users"):
        op.create_index(f"ix_{table}_deleted_at", table, ["deleted_at"])


def downgrade() -> None:
    for table in ("users", "documents", "distributors", "daily_beans", "beans"):
        op.drop_index(f"ix_{table}_deleted_at", table_name=table)
        op.drop_table(table)
