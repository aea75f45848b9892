"""In-memory test doubles for the persistence ports.

InMemoryProjectRepository keeps the compare-and-set contract of the real
repository: get() hands out a copy, save() only succeeds while the stored
version equals the copy's version.
"""

import copy
from datetime import datetime
from uuid import UUID

from src.domain.entities import MemberProfile, Project
from src.domain.protocols import ApplicationListing
from src.domain.value_objects import (
    ApplicationFilter,
    Page,
    PageRequest,
    ProjectFilter,
    ProjectSort,
)


class InMemoryProjectRepository:
    def __init__(self, *projects: Project) -> None:
        self.projects: dict[UUID, Project] = {p.id: copy.deepcopy(p) for p in projects}
        self.save_calls = 0
        self.lose_next_saves = 0

    async def get(self, project_id: UUID) -> Project | None:
        stored = self.projects.get(project_id)
        return copy.deepcopy(stored) if stored else None

    async def add(self, project: Project) -> None:
        self.projects[project.id] = copy.deepcopy(project)

    async def save(self, project: Project) -> bool:
        self.save_calls += 1
        if self.lose_next_saves:
            self.lose_next_saves -= 1
            return False
        stored = self.projects.get(project.id)
        if stored is None or stored.version != project.version:
            return False
        project.version += 1
        self.projects[project.id] = copy.deepcopy(project)
        return True

    async def delete(self, project: Project) -> bool:
        stored = self.projects.get(project.id)
        if stored is None or stored.version != project.version:
            return False
        del self.projects[project.id]
        return True

    async def list_projects(
        self, filters: ProjectFilter, sort: ProjectSort, page: PageRequest
    ) -> Page[Project]:
        raise NotImplementedError

    async def list_freelancer_applications(
        self, freelancer_id: UUID, filters: ApplicationFilter, page: PageRequest
    ) -> Page[ApplicationListing]:
        raise NotImplementedError

    async def list_application_updates(
        self, freelancer_id: UUID, since: datetime
    ) -> list[ApplicationListing]:
        raise NotImplementedError


class InMemoryMemberDirectory:
    def __init__(self, *members: MemberProfile) -> None:
        self.members = {m.id: m for m in members}

    async def get_member(self, member_id: UUID) -> MemberProfile | None:
        return self.members.get(member_id)

    async def get_members(self, member_ids) -> dict[UUID, MemberProfile]:
        return {i: self.members[i] for i in set(member_ids) if i in self.members}
