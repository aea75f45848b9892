"""Member database model.

Read-only projection of member profiles maintained by the identity
subsystem; the marketplace never writes it outside tests and seeding.
"""

from decimal import Decimal

from sqlalchemy import JSON, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class Member(BaseMutableModel):
    """Member profile model.

    Fields:
        role: client, freelancer, mentor, admin
        display_name: Full name
        company_name: Client company (nullable)
        skills: Declared skills (JSON array)
        hourly_rate: Advertised rate (nullable)
    """

    __tablename__ = "members"

    role: Mapped[str] = mapped_column(String(20), nullable=False)

    display_name: Mapped[str] = mapped_column(String(200), nullable=False)

    company_name: Mapped[str | None] = mapped_column(String(200), nullable=True)

    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    hourly_rate: Mapped[Decimal | None] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=True,
    )
