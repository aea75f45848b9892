"""Bearer authentication for the v1 routes.

Tokens are verified here and turned into a Principal; whether that
principal may do what it asks is decided later by the domain. The public
project reads take OptionalPrincipal and also serve anonymous callers.

    @router.get("/projects/mine")
    async def my_projects(principal: CurrentPrincipal): ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.value_objects import Principal
from src.infrastructure.security import JWTService

# missing credentials yield None here; the dependencies below decide on 401
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_principal(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[JWTService, Depends(get_token_service)],
) -> Principal:
    """401 for a missing, invalid or expired token, or one with an unknown role."""
    if credentials is None:
        raise _unauthorized("Not authenticated")

    match token_service.resolve_principal(credentials.credentials):
        case Success(value=principal):
            return principal
        case Failure(error=reason):
            raise _unauthorized(reason)


CurrentPrincipal = Annotated[Principal, Depends(get_current_principal)]


async def get_optional_principal(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[JWTService, Depends(get_token_service)],
) -> Principal | None:
    """None for anonymous callers; a token that is sent must still be valid."""
    if credentials is None:
        return None
    return await get_current_principal(credentials, token_service)


OptionalPrincipal = Annotated[Principal | None, Depends(get_optional_principal)]
