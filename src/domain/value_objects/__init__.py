"""Domain value objects.

Immutable values with no identity of their own.
"""

from src.domain.value_objects.listing import (
    ApplicationFilter,
    Page,
    PageRequest,
    ProjectFilter,
    ProjectSort,
)
from src.domain.value_objects.principal import (
    AdminPrincipal,
    ClientPrincipal,
    FreelancerPrincipal,
    MentorPrincipal,
    Principal,
    principal_for,
    require_client,
    require_freelancer,
)
from src.domain.value_objects.project_changes import ProjectChanges

__all__ = [
    "AdminPrincipal",
    "ApplicationFilter",
    "ClientPrincipal",
    "FreelancerPrincipal",
    "MentorPrincipal",
    "Page",
    "PageRequest",
    "Principal",
    "ProjectChanges",
    "ProjectFilter",
    "ProjectSort",
    "principal_for",
    "require_client",
    "require_freelancer",
]
