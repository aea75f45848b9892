"""Security infrastructure adapters.

- JWT bearer-token verification and Principal resolution
"""

from src.infrastructure.security.jwt_service import JWTService

__all__ = ["JWTService"]
