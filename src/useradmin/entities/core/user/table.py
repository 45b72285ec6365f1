"""User database table model."""

from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field

from src.useradmin.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    Rows are never physically removed; ``deleted_at`` marks a soft delete.
    Email uniqueness only holds among rows that are not soft-deleted, which
    the partial index below enforces on both SQLite and PostgreSQL.
    """

    __tablename__ = "users"
    __table_args__ = (
        sa.Index(
            "ux_users_email_live",
            "email",
            unique=True,
            sqlite_where=sa.text("deleted_at IS NULL"),
            postgresql_where=sa.text("deleted_at IS NULL"),
        ),
    )

    name: str = Field(max_length=50)
    email: str = Field(max_length=100)
    phone: str = Field(default="", max_length=20)
    status: str = Field(
        default="active",
        max_length=20,
        sa_column_kwargs={"server_default": "active"},
    )
    deleted_at: datetime | None = Field(default=None, index=True)
