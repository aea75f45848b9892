"""Authentication error constants for bearer-token resolution.

The identity subsystem issues the tokens; the marketplace only verifies
them and resolves the caller into a Principal.

Usage:
    from src.domain.errors import AuthenticationError

    match token_service.resolve_principal(token):
        case Success(value=principal):
            ...
        case Failure(error=AuthenticationError.EXPIRED_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    These are NOT exceptions. They are error values carried in Failure.
    """

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    MALFORMED_TOKEN = "Token is missing a valid subject or role"
    UNKNOWN_ROLE = "Token role is not recognised"
