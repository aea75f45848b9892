"""Infrastructure layer - Adapters for the domain protocols (ports).

Structure:
- persistence/: SQLAlchemy models, Database and the project/member repositories
- events/: In-memory event bus and its handlers
- notifications/: Notification dispatcher adapters
- security/: JWT bearer-token verification
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
