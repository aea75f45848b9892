"""Authenticated caller, resolved once at the identity boundary.

The bearer token's role claim is mapped to exactly one variant of the
closed Principal union. Role-dependent code branches with `match`, so a
new role is a type error everywhere it is not handled.

Usage:
    match principal:
        case ClientPrincipal(member_id=client_id):
            ...
        case FreelancerPrincipal() | MentorPrincipal() | AdminPrincipal():
            return Failure(error=...)
"""

from dataclasses import dataclass
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.enums import MemberRole
from src.domain.errors import ProjectError


@dataclass(frozen=True, slots=True, kw_only=True)
class ClientPrincipal:
    """Member who posts projects."""

    member_id: UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class FreelancerPrincipal:
    """Member who applies to projects."""

    member_id: UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class MentorPrincipal:
    member_id: UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class AdminPrincipal:
    member_id: UUID


type Principal = ClientPrincipal | FreelancerPrincipal | MentorPrincipal | AdminPrincipal


def principal_for(member_id: UUID, role: MemberRole) -> Principal:
    """Build the Principal variant matching a member role.

    Args:
        member_id: Authenticated member identifier.
        role: Role issued by the identity subsystem.

    Returns:
        Principal variant for the role.
    """
    match role:
        case MemberRole.CLIENT:
            return ClientPrincipal(member_id=member_id)
        case MemberRole.FREELANCER:
            return FreelancerPrincipal(member_id=member_id)
        case MemberRole.MENTOR:
            return MentorPrincipal(member_id=member_id)
        case MemberRole.ADMIN:
            return AdminPrincipal(member_id=member_id)


def require_client(principal: Principal) -> Result[UUID, AuthorizationError]:
    """Return the member id of a client caller.

    Returns:
        Success(member_id) for clients, Failure(AuthorizationError) otherwise.
    """
    match principal:
        case ClientPrincipal(member_id=member_id):
            return Success(value=member_id)
        case FreelancerPrincipal() | MentorPrincipal() | AdminPrincipal():
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.CLIENT_ROLE_REQUIRED,
                    message=ProjectError.CLIENT_ONLY,
                    required_permission="role:client",
                )
            )


def require_freelancer(
    principal: Principal, message: str = ProjectError.FREELANCER_ONLY
) -> Result[UUID, AuthorizationError]:
    """Return the member id of a freelancer caller.

    Returns:
        Success(member_id) for freelancers, Failure(AuthorizationError) otherwise.
    """
    match principal:
        case FreelancerPrincipal(member_id=member_id):
            return Success(value=member_id)
        case ClientPrincipal() | MentorPrincipal() | AdminPrincipal():
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.FREELANCER_ROLE_REQUIRED,
                    message=message,
                    required_permission="role:freelancer",
                )
            )
