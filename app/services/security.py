"""
Security Service

Bearer credential verification.

Tokens are issued by an external authority that shares the signing secret
with this service. Here we only check them:

    decode_identity(token) -> Identity      (raises AuthError)

decode_identity is a plain function with no HTTP dependency, so it can be
tested and reused outside of FastAPI. The request-level gate lives in
app/dependencies.py.

create_access_token() signs tokens the same way the issuer does. It is
used by the test-suite and scripts/create_dev_token.py only.

Usage:
    from app.services.security import create_access_token, decode_identity

    token = create_access_token({"sub": "alice"})
    identity = decode_identity(token)
    identity.subject  # 'alice'
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from app.config import get_settings
from app.exceptions import AuthError

logger = logging.getLogger(__name__)
settings = get_settings()

ACCESS_TOKEN_EXPIRE_MINUTES = 15
ACCESS_TOKEN_TYPE = "access"


@dataclass(frozen=True)
class Identity:
    """
    Who made the request, as asserted by a verified bearer token.

    Attributes:
        subject: The token's "sub" claim
        claims: The full decoded payload
    """

    subject: str
    claims: dict[str, Any] = field(default_factory=dict)


def create_access_token(
    data: dict,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        data: Payload data to encode in the token
        expires_delta: Optional custom expiration time (negative for an expired token)

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token({"sub": "alice"})
        >>> token.count(".") == 2  # JWT format: header.payload.signature
        True
    """
    to_encode = data.copy()

    if expires_delta is not None:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.setdefault("type", ACCESS_TOKEN_TYPE)
    to_encode["exp"] = expire

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_identity(token: str | None) -> Identity:
    """
    Verify a bearer token and return the identity it carries.

    Checks:
    1. A token is present
    2. Signature and expiry are valid
    3. The token is an access token (when a "type" claim is present)
    4. A subject claim exists

    Args:
        token: The raw bearer credential

    Returns:
        Identity built from the token claims

    Raises:
        AuthError: if any check fails
    """
    if not token:
        raise AuthError("Bearer token required")

    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except ExpiredSignatureError:
        logger.warning("Rejected expired bearer token")
        raise AuthError("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        raise AuthError("Could not validate credentials")

    token_type = payload.get("type")
    if token_type is not None and token_type != ACCESS_TOKEN_TYPE:
        logger.warning(f"Token type mismatch: expected {ACCESS_TOKEN_TYPE}, got {token_type}")
        raise AuthError("Could not validate credentials")

    subject = payload.get("sub")
    if subject is None or subject == "":
        raise AuthError("Token has no subject")

    return Identity(subject=str(subject), claims=payload)
