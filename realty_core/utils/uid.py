"""UUID generation utilities.

This is the ONLY module that should import uuid4. All other code should
use uid.generate_uuid().
"""

from uuid import UUID, uuid4


def generate_uuid() -> str:
    """Generate a random UUID v4 as a string."""
    return str(uuid4())


def is_uuid(value: str) -> bool:
    """Check whether a string is a syntactically valid UUID."""
    try:
        UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True
