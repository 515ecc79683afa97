"""JWT access tokens.

Tokens are HS256-signed with settings.jwt_secret_key and carry the claims
sub (user id), username, iat and exp.
"""

from datetime import datetime, timedelta, UTC

import jwt

from ..config import settings
from .schemas import TokenPayload, UserResponse

ALGORITHM = "HS256"


def generate_access_token(user: UserResponse) -> str:
    """Generate a signed access token for a user."""
    issued_at = datetime.now(UTC)
    expires_at = issued_at + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": user.id,
        "username": user.username,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=ALGORITHM)


def validate_access_token(token: str) -> TokenPayload:
    """Validate signature and expiry and return the claims.

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the token is malformed or the signature is wrong
    """
    payload = jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[ALGORITHM],
        options={"require": ["sub", "exp", "iat"]},
    )
    return TokenPayload(**payload)
