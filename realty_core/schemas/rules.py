"""Declarative validation rules for write payloads.

A Ruleset is a plain collection of FieldRule constraints. Validating never
raises for bad input: it returns a ValidationResult listing every failed
constraint, and the caller decides what to do with it.

    result = TRANSACTION_RULES.validate(payload)
    if not result.ok:
        raise ValidationError("Invalid transaction data", result.as_details())

Fields without a rule are ignored.
"""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, Iterator, Literal

FieldKind = Literal["string", "date"]


@dataclass(frozen=True)
class FieldRule:
    """Constraint on a single payload field."""

    field: str
    kind: FieldKind
    required: bool = False
    min_length: int | None = None

    def check(self, payload: dict[str, Any]) -> "FieldError | None":
        value = payload.get(self.field)

        # null counts as absent
        if value is None:
            if self.required:
                return FieldError(self.field, "required", f'"{self.field}" is required')
            return None

        if self.kind == "string":
            if not isinstance(value, str):
                return FieldError(self.field, "type", f'"{self.field}" must be a string')
            if self.min_length is not None and len(value) < self.min_length:
                return FieldError(
                    self.field,
                    "min_length",
                    f'"{self.field}" length must be at least {self.min_length} characters long'
                )

        elif self.kind == "date":
            # Epoch milliseconds or a date object; bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, (datetime, date, int, float)):
                return FieldError(
                    self.field, "type", f'"{self.field}" must be a valid date or timestamp'
                )

        return None


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_details(self) -> dict[str, Any]:
        return {"errors": [error.to_dict() for error in self.errors]}


class Ruleset:
    """An ordered set of field rules."""

    def __init__(self, *rules: FieldRule):
        self._rules = {rule.field: rule for rule in rules}

    def __iter__(self) -> Iterator[FieldRule]:
        return iter(self._rules.values())

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def only(self, *field_names: str) -> "Ruleset":
        """Derive a ruleset restricted to the named fields."""
        return Ruleset(*(self._rules[name] for name in field_names))

    def optional(self) -> "Ruleset":
        """Same constraints, but nothing is required."""
        return Ruleset(*(
            FieldRule(rule.field, rule.kind, required=False, min_length=rule.min_length)
            for rule in self
        ))

    def validate(self, payload: dict[str, Any]) -> ValidationResult:
        errors = [error for rule in self if (error := rule.check(payload)) is not None]
        return ValidationResult(errors)


def validate(payload: dict[str, Any], rules: Ruleset) -> ValidationResult:
    """Check a payload against a ruleset."""
    return rules.validate(payload)


TRANSACTION_RULES = Ruleset(
    FieldRule("user", "string"),
    FieldRule("name", "string", required=True, min_length=1),
    FieldRule("status", "string", required=True, min_length=1),
    FieldRule("type", "string", required=True, min_length=1),
    FieldRule("createDate", "date"),
)

# Update accepts name and type only, each optional
UPDATE_RULES = TRANSACTION_RULES.only("name", "type").optional()
