"""Application layer - Use cases and orchestration.

This layer contains the marketplace use cases following the CQRS pattern:
- Commands: Project and application writes (create, update, delete,
  submit, decide)
- Queries: Listings and detail views

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: ProjectWriteService (load, change, version-checked save, retry)
- dtos/: Read models returned by handlers
- errors/: ApplicationError and the domain-to-application mapping

The application layer orchestrates domain logic but contains no business rules.
"""
