"""HTTP endpoints for Realty Core."""

from .auth import auth_bp
from .transactions import transactions_bp

__all__ = ["auth_bp", "transactions_bp"]
