"""Declarative bases shared by the marketplace tables.

Rows carry a uuid7 key and a creation stamp. Rows that are edited in place
(projects, applications, members) also carry `updated_at`; skill rows are
deleted and re-inserted on every change, so they do not.

Repositories translate between these rows and the domain dataclasses; the
domain never imports this module.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    __abstract__ = True

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


class BaseMutableModel(BaseModel):
    """Base for rows updated in place; `updated_at` follows every UPDATE."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
