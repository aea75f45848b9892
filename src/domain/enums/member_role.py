"""Member roles issued by the identity subsystem.

The role travels in the bearer token and is resolved once into a
Principal value object (see src/domain/value_objects/principal.py).

Usage:
    from src.domain.enums import MemberRole

    role = MemberRole(claims["role"])
"""

from enum import Enum


class MemberRole(str, Enum):
    """Marketplace member roles."""

    CLIENT = "client"
    FREELANCER = "freelancer"
    MENTOR = "mentor"
    ADMIN = "admin"
