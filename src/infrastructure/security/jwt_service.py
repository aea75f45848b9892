"""Bearer token verification with PyJWT (HS256 by default).

Tokens are minted by the identity service and shared through SECRET_KEY.
Expected claims: `sub` (member uuid), `role` (client, freelancer, mentor or
admin), `exp`. A bad token is returned as a Failure carrying one of the
AuthenticationError messages; nothing here raises on bad input.
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.enums import MemberRole
from src.domain.errors import AuthenticationError
from src.domain.value_objects import Principal, principal_for

_MIN_KEY_LENGTH = 32


class JWTService:
    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expiration_minutes: int = 15,
    ) -> None:
        if len(secret_key) < _MIN_KEY_LENGTH:
            raise ValueError(
                f"JWT secret key must be at least {_MIN_KEY_LENGTH} bytes"
            )
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expiration_minutes)

    def generate_access_token(self, member_id: UUID, role: MemberRole) -> str:
        """Sign a token the way the identity service does (local tooling, tests)."""
        issued_at = datetime.now(UTC)
        claims = {
            "sub": str(member_id),
            "role": role.value,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
            "jti": str(uuid7()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def resolve_principal(self, token: str) -> Result[Principal, str]:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except ExpiredSignatureError:
            return Failure(error=AuthenticationError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=AuthenticationError.INVALID_TOKEN)

        try:
            member_id = UUID(str(payload["sub"]))
        except ValueError:
            return Failure(error=AuthenticationError.MALFORMED_TOKEN)

        role_claim = payload.get("role")
        if not isinstance(role_claim, str):
            return Failure(error=AuthenticationError.MALFORMED_TOKEN)
        try:
            role = MemberRole(role_claim)
        except ValueError:
            return Failure(error=AuthenticationError.UNKNOWN_ROLE)

        return Success(value=principal_for(member_id, role))
