"""Exception hierarchy for Realty Core.

Every exception carries a human-readable message and optional details dict.
The Flask error handlers in main.py map each class to an HTTP status code
and a stable JSON error body:

    {"error": {"type": "<class name>", "message": "...", "details": {...}}}
"""


class RealtyError(Exception):
    """Base exception for all Realty Core errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ResourceNotFound(RealtyError):
    """Requested record does not exist."""

    status_code = 404


class ValidationError(RealtyError):
    """Request payload failed validation."""

    status_code = 400


class AuthenticationError(RealtyError):
    """Missing or invalid credentials."""

    status_code = 401


class ConflictError(RealtyError):
    """Write collides with an existing record (e.g. duplicate username)."""

    status_code = 409


class DatabaseError(RealtyError):
    """Store operation failed for an operational reason."""

    status_code = 500
