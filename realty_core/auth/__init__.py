"""Authentication for Realty Core.

- Schema validation for auth payloads
- JWT token generation and validation
- Password hashing and user accounts
- @auth_required for protected endpoints

Auth endpoints (top-level routes, see api/auth.py):
- POST /auth/register - Create an account
- POST /auth/login - Authenticate and return JWT token
- GET /auth/me - Get current user info
"""

from . import schemas, service, token

__all__ = ["schemas", "service", "token"]
