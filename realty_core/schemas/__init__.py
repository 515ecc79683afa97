"""Transaction record schema and write-payload rules."""

from .rules import (
    TRANSACTION_RULES,
    UPDATE_RULES,
    FieldError,
    FieldRule,
    Ruleset,
    ValidationResult,
    validate,
)
from .transaction import (
    ExpandedUser,
    TransactionRecord,
    UserReference,
)

__all__ = [
    "TRANSACTION_RULES",
    "UPDATE_RULES",
    "FieldError",
    "FieldRule",
    "Ruleset",
    "ValidationResult",
    "validate",
    "ExpandedUser",
    "TransactionRecord",
    "UserReference",
]
