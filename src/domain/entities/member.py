"""Member profile, owned by the identity subsystem.

Read-only here: the marketplace looks members up for display names and
declared skills but never writes them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass(frozen=True, slots=True, kw_only=True)
class MemberProfile:
    """Public profile of a marketplace member.

    Attributes:
        id: Member identifier (matches the token subject).
        role: Member role.
        display_name: Full name shown to other members.
        company_name: Client company, if any.
        skills: Declared skills (freelancers).
        hourly_rate: Advertised hourly rate (freelancers).
    """

    id: UUID
    role: MemberRole
    display_name: str
    company_name: str | None = None
    skills: list[str] = field(default_factory=list)
    hourly_rate: Decimal | None = None
