"""Authentication endpoints.

- POST /auth/register - Create an account
- POST /auth/login - Authenticate and return JWT token
- GET /auth/me - Get current user info

All endpoints return JSON responses.
"""

import logging

from flask import Blueprint, g, jsonify

from ..auth import service, token
from ..auth.decorators import auth_required
from ..auth.schemas import TokenResponse, UserCreate, UserLogin
from ..db import get_store
from ..exceptions import AuthenticationError
from .validation import validate_request

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/auth/register")
@validate_request
def register(data: UserCreate):
    """
    Create a user account.

    Example request:
    ```json
    {"username": "agent007", "password": "SecurePass123"}
    ```

    Returns:
        201: UserResponse
        400: Validation error
        409: Username already exists
    """
    user = service.create_user(get_store(), data)
    return jsonify(user.model_dump()), 201


@auth_bp.post("/auth/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate user and return JWT token.

    Example response:
    ```json
    {
        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
        "token_type": "bearer",
        "user": {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "username": "agent007",
            "created_at": "2026-10-19T10:30:00Z"
        }
    }
    ```

    Raises:
        AuthenticationError: If credentials are invalid
    """
    user = service.verify_credentials(get_store(), data.username, data.password)
    if user is None:
        logger.warning(f"Failed login attempt for username: {data.username}")
        raise AuthenticationError(
            "Invalid username or password",
            {"username": data.username}
        )

    access_token = token.generate_access_token(user)
    logger.info(f"Successful login: {user.username}")

    return jsonify(
        TokenResponse(access_token=access_token, user=user).model_dump()
    ), 200


@auth_bp.get("/auth/me")
@auth_required
def get_current_user():
    """
    Get the authenticated user's profile.

    Raises:
        AuthenticationError: If the token's user no longer exists
    """
    user = service.get_user_by_id(get_store(), g.user_id)
    if user is None:
        raise AuthenticationError("User not found", {"user_id": g.user_id})

    return jsonify(user.model_dump()), 200
