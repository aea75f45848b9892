"""Domain layer - Pure business logic.

Contains the Project aggregate, value objects, protocols (ports) and
domain events. No framework or infrastructure dependencies.

Structure:
- entities/: Project aggregate, Application, MemberProfile
- value_objects/: Principal union, listing filters, project changes
- validators/: Field validation returning Result
- protocols/: Repository, directory, notification, event bus, logger ports
- events/: Lifecycle events
"""
