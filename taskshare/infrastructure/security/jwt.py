"""JWT handling for caller identity.

Tokens are issued by the identity provider; this service only verifies them
and trusts the `sub` claim as the caller id. create_access_token mints tokens
with the shared key for local tooling and tests.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from taskshare.core.config import get_settings
from taskshare.shared.utils.datetime import utc_now


def create_access_token(
    subject: str,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a signed JWT whose sub is the user id.

    Args:
        subject: User id placed in the sub claim.
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.
        extra_claims: Optional additional claims.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    to_encode: dict[str, Any] = dict(extra_claims or {})
    to_encode["sub"] = subject
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = utc_now() + expires_delta
    encoded = jwt.encode(
        to_encode,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise ValueError("Token missing required claim: sub")
    return payload
