"""Authentication decorator for protected endpoints.

@auth_required validates the bearer token on the request and stores the
caller's identity in flask.g before the view runs:
- g.user_id: User ID (UUID)
- g.username: Username
"""

import logging
from functools import wraps

import jwt
from flask import g, request

from ..exceptions import AuthenticationError
from . import token

logger = logging.getLogger(__name__)


def _authenticate_request():
    """
    Authenticate the current request via Authorization: Bearer <token>.

    Raises:
        AuthenticationError: If no valid token is provided
    """
    auth_header = request.headers.get("Authorization", "")
    if not auth_header:
        logger.warning("Unauthenticated request to protected endpoint")
        raise AuthenticationError("Authentication required", {"code": "missing_auth"})

    scheme, _, token_str = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token_str:
        raise AuthenticationError(
            "Invalid authorization header format",
            {"code": "invalid_header", "expected": "Authorization: Bearer <token>"}
        )

    try:
        payload = token.validate_access_token(token_str)
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        raise AuthenticationError("Token has expired", {"code": "token_expired"})
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT token: {e}")
        raise AuthenticationError("Invalid token", {"code": "invalid_token"})

    g.user_id = payload.sub
    g.username = payload.username
    logger.debug(f"JWT authentication successful for user {g.username}")


def auth_required(f):
    """
    Decorator to require authentication for endpoint access.

    Example:
    ```python
    @auth_required
    def protected_endpoint():
        user_id = g.user_id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        _authenticate_request()
        return f(*args, **kwargs)

    return wrapper
