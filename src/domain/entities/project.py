"""Project aggregate root.

A Project owns its ordered list of Applications. Every rule that involves
more than one application (one acceptance per project, auto-rejection of
the other bids, no duplicate applicant) is enforced here, and the whole
aggregate is written back in a single version-checked write.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - State changes return Result; nothing is raised for business rules
    - `version` is the optimistic concurrency token read by the repository

Usage:
    from uuid_extensions import uuid7

    result = project.submit_application(
        application_id=uuid7(),
        freelancer_id=freelancer_id,
        cover_letter="I have shipped three similar dashboards.",
        proposed_rate=Decimal("45"),
        estimated_duration="3 weeks",
    )
    match result:
        case Success(value=application):
            await repo.save(project)
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.application import Application
from src.domain.enums import ApplicationStatus, ProjectStatus
from src.domain.errors import ProjectError
from src.domain.validators import (
    validate_application_fields,
    validate_project_fields,
)
from src.domain.value_objects import ProjectChanges


@dataclass(frozen=True, slots=True, kw_only=True)
class DecisionOutcome:
    """Result of deciding an application.

    Attributes:
        application: The decided application.
        auto_rejected: Other applications rejected by the same write.
    """

    application: Application
    auto_rejected: list[Application] = field(default_factory=list)


@dataclass
class Project:
    """Client-posted work item with its embedded applications.

    Attributes:
        id: Unique project identifier (immutable).
        client_id: Owner (immutable).
        title: 1-200 characters.
        description: 1-2000 characters.
        required_skills: Ordered, de-duplicated skills.
        budget_min: Lower budget bound, <= budget_max.
        budget_max: Upper budget bound.
        deadline: Delivery deadline (UTC).
        status: Lifecycle status, OPEN on creation.
        assigned_freelancer_id: Set only while ASSIGNED.
        applications: Applications in arrival order.
        version: Concurrency token, bumped by every committed write.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    client_id: UUID
    title: str
    description: str
    required_skills: list[str]
    budget_min: Decimal
    budget_max: Decimal
    deadline: datetime
    status: ProjectStatus = ProjectStatus.OPEN
    assigned_freelancer_id: UUID | None = None
    applications: list[Application] = field(default_factory=list)
    version: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_owned_by(self, member_id: UUID) -> bool:
        return self.client_id == member_id

    def find_application(self, application_id: UUID) -> Application | None:
        return next((a for a in self.applications if a.id == application_id), None)

    def application_by(self, freelancer_id: UUID) -> Application | None:
        return next(
            (a for a in self.applications if a.freelancer_id == freelancer_id), None
        )

    def pending_applications(self) -> list[Application]:
        return [a for a in self.applications if a.is_pending()]

    def accepted_applications(self) -> list[Application]:
        return [a for a in self.applications if a.status is ApplicationStatus.ACCEPTED]

    def invariant_violations(self) -> list[str]:
        """List broken aggregate invariants (empty when consistent).

        CANCELLED and COMPLETED projects may keep the application that was
        accepted before they closed, so the assigned-iff-accepted rule is
        only checked for OPEN and ASSIGNED projects.

        Returns:
            Human-readable descriptions of every violation found.
        """
        violations: list[str] = []
        accepted = self.accepted_applications()

        if len(accepted) > 1:
            violations.append(f"{len(accepted)} accepted applications")

        if self.status is ProjectStatus.ASSIGNED:
            if len(accepted) != 1:
                violations.append("assigned project without exactly one acceptance")
            elif self.assigned_freelancer_id != accepted[0].freelancer_id:
                violations.append("assigned freelancer differs from accepted applicant")
        else:
            if self.assigned_freelancer_id is not None:
                violations.append("assigned freelancer set on unassigned project")
            if self.status is ProjectStatus.OPEN and accepted:
                violations.append("open project has an accepted application")

        freelancer_ids = [a.freelancer_id for a in self.applications]
        if len(freelancer_ids) != len(set(freelancer_ids)):
            violations.append("duplicate applications from one freelancer")
        if self.client_id in freelancer_ids:
            violations.append("owner applied to own project")

        return violations

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    def submit_application(
        self,
        *,
        application_id: UUID,
        freelancer_id: UUID,
        cover_letter: str,
        proposed_rate: Decimal,
        estimated_duration: str,
        now: datetime | None = None,
    ) -> Result[Application, DomainError]:
        """Append a pending application.

        Checks, in order: project OPEN, applicant is not the owner, no
        earlier application from the same freelancer, field constraints.

        Returns:
            Success(Application): The appended application.
            Failure(ConflictError | ValidationError): First failed check.
        """
        if self.status is not ProjectStatus.OPEN:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PROJECT_NOT_OPEN,
                    message=ProjectError.NOT_OPEN_FOR_APPLICATIONS,
                    resource_type="Project",
                    conflicting_field="status",
                )
            )
        if self.is_owned_by(freelancer_id):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.OWN_PROJECT_APPLICATION,
                    message=ProjectError.OWN_PROJECT,
                    resource_type="Project",
                    conflicting_field="client_id",
                )
            )
        if self.application_by(freelancer_id) is not None:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.APPLICATION_ALREADY_EXISTS,
                    message=ProjectError.ALREADY_APPLIED,
                    resource_type="Application",
                    conflicting_field="freelancer_id",
                )
            )

        fields_result = validate_application_fields(
            cover_letter=cover_letter,
            proposed_rate=proposed_rate,
            estimated_duration=estimated_duration,
        )
        if isinstance(fields_result, Failure):
            return fields_result
        values = fields_result.value

        now = now or datetime.now(UTC)
        application = Application(
            id=application_id,
            project_id=self.id,
            freelancer_id=freelancer_id,
            cover_letter=values.cover_letter,
            proposed_rate=values.proposed_rate,
            estimated_duration=values.estimated_duration,
            applied_at=now,
        )
        self.applications.append(application)
        self.updated_at = now
        return Success(value=application)

    def decide_application(
        self,
        *,
        application_id: UUID,
        decision: ApplicationStatus,
        caller_id: UUID,
        now: datetime | None = None,
    ) -> Result[DecisionOutcome, DomainError]:
        """Accept or reject a pending application.

        Accepting assigns the project to the applicant and rejects every
        other pending application in the same change set. Rejecting touches
        nothing else.

        Args:
            application_id: Application to decide.
            decision: ACCEPTED or REJECTED.
            caller_id: Member making the decision (must own the project).
            now: Decision instant (defaults to now).

        Returns:
            Success(DecisionOutcome): Decided and auto-rejected applications.
            Failure(DomainError): Unknown application, non-owner caller,
                invalid decision or application no longer pending.
        """
        application = self.find_application(application_id)
        if application is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.APPLICATION_NOT_FOUND,
                    message=ProjectError.APPLICATION_NOT_FOUND,
                    resource_type="Application",
                    resource_id=str(application_id),
                )
            )
        if not self.is_owned_by(caller_id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message=ProjectError.NOT_OWNER,
                    required_permission="projects:decide",
                )
            )
        if decision not in ApplicationStatus.decisions():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_DECISION,
                    message=ProjectError.INVALID_DECISION,
                    field="status",
                )
            )
        if not application.is_pending():
            return Failure(
                error=ConflictError(
                    code=ErrorCode.APPLICATION_NOT_PENDING,
                    message=ProjectError.NOT_PENDING,
                    resource_type="Application",
                    conflicting_field="status",
                )
            )

        now = now or datetime.now(UTC)
        if decision is ApplicationStatus.REJECTED:
            application.mark(ApplicationStatus.REJECTED, now)
            self.updated_at = now
            return Success(value=DecisionOutcome(application=application))

        if self.status is not ProjectStatus.OPEN:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PROJECT_NOT_OPEN,
                    message=ProjectError.NOT_OPEN,
                    resource_type="Project",
                    conflicting_field="status",
                )
            )

        application.mark(ApplicationStatus.ACCEPTED, now)
        auto_rejected = self._reject_pending(now)
        self.status = ProjectStatus.ASSIGNED
        self.assigned_freelancer_id = application.freelancer_id
        self.updated_at = now
        return Success(
            value=DecisionOutcome(application=application, auto_rejected=auto_rejected)
        )

    def apply_changes(
        self,
        changes: ProjectChanges,
        *,
        caller_id: UUID,
        now: datetime | None = None,
    ) -> Result[list[Application], DomainError]:
        """Apply an owner's partial update.

        Field edits are only allowed while OPEN. Cancellation is allowed from
        OPEN or ASSIGNED; it rejects the remaining pending applications and
        clears the assignment.

        Returns:
            Success(list[Application]): Applications rejected by a cancellation
                (empty otherwise).
            Failure(DomainError): Non-owner, illegal status, project not open,
                or invalid field values.
        """
        if not self.is_owned_by(caller_id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message=ProjectError.NOT_OWNER,
                    required_permission="projects:update",
                )
            )
        if changes.status is not None and changes.status is not ProjectStatus.CANCELLED:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_STATUS_CHANGE,
                    message=ProjectError.INVALID_STATUS_CHANGE,
                    field="status",
                )
            )
        if changes.has_field_changes() and self.status is not ProjectStatus.OPEN:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PROJECT_NOT_OPEN,
                    message=ProjectError.NOT_OPEN,
                    resource_type="Project",
                    conflicting_field="status",
                )
            )
        if changes.status is ProjectStatus.CANCELLED and self.status.is_terminal():
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PROJECT_NOT_OPEN,
                    message=ProjectError.ALREADY_CLOSED,
                    resource_type="Project",
                    conflicting_field="status",
                )
            )

        now = now or datetime.now(UTC)
        if changes.has_field_changes():
            fields_result = validate_project_fields(
                title=_pick(changes.title, self.title),
                description=_pick(changes.description, self.description),
                required_skills=_pick(changes.required_skills, self.required_skills),
                budget_min=_pick(changes.budget_min, self.budget_min),
                budget_max=_pick(changes.budget_max, self.budget_max),
                deadline=_pick(changes.deadline, self.deadline),
                check_deadline=changes.deadline is not None,
                now=now,
            )
            if isinstance(fields_result, Failure):
                return fields_result
            values = fields_result.value
            self.title = values.title
            self.description = values.description
            self.required_skills = values.required_skills
            self.budget_min = values.budget_min
            self.budget_max = values.budget_max
            self.deadline = values.deadline

        auto_rejected: list[Application] = []
        if changes.status is ProjectStatus.CANCELLED:
            auto_rejected = self._reject_pending(now)
            self.status = ProjectStatus.CANCELLED
            self.assigned_freelancer_id = None

        self.updated_at = now
        return Success(value=auto_rejected)

    def ensure_deletable(self, *, caller_id: UUID) -> Result[None, DomainError]:
        """Check the caller may delete this project.

        Returns:
            Success(None): Owner and no applications.
            Failure(AuthorizationError | ConflictError): Otherwise.
        """
        if not self.is_owned_by(caller_id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message=ProjectError.NOT_OWNER,
                    required_permission="projects:delete",
                )
            )
        if self.applications:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PROJECT_HAS_APPLICATIONS,
                    message=ProjectError.HAS_APPLICATIONS,
                    resource_type="Project",
                    conflicting_field="applications",
                )
            )
        return Success(value=None)

    def _reject_pending(self, when: datetime) -> list[Application]:
        rejected = self.pending_applications()
        for application in rejected:
            application.mark(ApplicationStatus.REJECTED, when)
        return rejected


def _pick[V](new: V | None, current: V) -> V:
    return current if new is None else new
