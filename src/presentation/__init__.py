"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers and endpoint definitions. It is thin:
it dispatches commands/queries to the application layer and translates
Result values to HTTP responses.

Structure:
- routers/system.py: root and health
- routers/api/v1/: API version 1 endpoints (RESTful resources)
- routers/api/middleware/: trace ID and bearer authentication

The presentation layer depends on the application layer but contains NO
business logic.
"""
