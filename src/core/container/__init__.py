"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from src.core.container import get_event_bus, get_decide_application_handler

Modules:
- infrastructure: Database, session, logging, token verification
- events: Event bus and subscriptions, notification dispatcher
- repositories: Repository factories
- project_handlers: Command and query handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_token_service,
)

# Event bus
from src.core.container.events import get_event_bus, get_notification_dispatcher

# Repositories
from src.core.container.repositories import (
    get_member_directory,
    get_project_repository,
)

# Project handlers
from src.core.container.project_handlers import (
    get_create_project_handler,
    get_decide_application_handler,
    get_delete_project_handler,
    get_get_project_handler,
    get_list_application_updates_handler,
    get_list_client_projects_handler,
    get_list_freelancer_applications_handler,
    get_list_project_applications_handler,
    get_list_projects_handler,
    get_recommended_projects_handler,
    get_submit_application_handler,
    get_update_project_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_token_service",
    # Events
    "get_event_bus",
    "get_notification_dispatcher",
    # Repositories
    "get_member_directory",
    "get_project_repository",
    # Command handlers
    "get_create_project_handler",
    "get_update_project_handler",
    "get_delete_project_handler",
    "get_submit_application_handler",
    "get_decide_application_handler",
    # Query handlers
    "get_get_project_handler",
    "get_list_projects_handler",
    "get_list_client_projects_handler",
    "get_recommended_projects_handler",
    "get_list_project_applications_handler",
    "get_list_freelancer_applications_handler",
    "get_list_application_updates_handler",
]
