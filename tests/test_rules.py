"""
Tests for the write-payload validation ruleset.

Tests verify that:
- Required string fields reject missing, null, empty and non-string values
- Optional fields accept absence
- createDate accepts datetimes and epoch milliseconds only
- Every failing field is reported, not just the first
- Derived rulesets (only/optional) behave as expected
"""

from datetime import date, datetime, UTC

import pytest

from realty_core.schemas import (
    TRANSACTION_RULES,
    UPDATE_RULES,
    FieldRule,
    Ruleset,
    validate,
)


def _codes(result):
    return {(error.field, error.code) for error in result.errors}


VALID = {"user": "u-1", "name": "123 Main St Listing", "type": "sale", "status": "active"}


class TestTransactionRules:
    """Tests for TRANSACTION_RULES."""

    def test_valid_payload(self):
        result = validate(VALID, TRANSACTION_RULES)
        assert result.ok
        assert result.errors == []

    def test_user_is_optional(self):
        payload = {k: v for k, v in VALID.items() if k != "user"}
        assert validate(payload, TRANSACTION_RULES).ok

    @pytest.mark.parametrize("field", ["name", "type", "status"])
    def test_missing_required_field(self, field):
        payload = {k: v for k, v in VALID.items() if k != field}
        result = validate(payload, TRANSACTION_RULES)
        assert not result.ok
        assert _codes(result) == {(field, "required")}

    @pytest.mark.parametrize("field", ["name", "type", "status"])
    def test_null_counts_as_missing(self, field):
        result = validate({**VALID, field: None}, TRANSACTION_RULES)
        assert _codes(result) == {(field, "required")}

    @pytest.mark.parametrize("field", ["name", "type", "status"])
    def test_empty_string_fails_min_length(self, field):
        result = validate({**VALID, field: ""}, TRANSACTION_RULES)
        assert _codes(result) == {(field, "min_length")}

    def test_non_string_rejected(self):
        result = validate({**VALID, "name": 42, "user": 7}, TRANSACTION_RULES)
        assert _codes(result) == {("name", "type"), ("user", "type")}

    def test_all_errors_reported(self):
        result = validate({}, TRANSACTION_RULES)
        assert _codes(result) == {
            ("name", "required"),
            ("type", "required"),
            ("status", "required"),
        }

    def test_unknown_fields_ignored(self):
        assert validate({**VALID, "city": 12, "listPrice": "lots"}, TRANSACTION_RULES).ok

    @pytest.mark.parametrize("value", [
        datetime.now(UTC),
        date(2026, 10, 19),
        1760000000000,
        1760000000000.5,
    ])
    def test_create_date_accepts_dates_and_timestamps(self, value):
        assert validate({**VALID, "createDate": value}, TRANSACTION_RULES).ok

    @pytest.mark.parametrize("value", ["2026-10-19", True, [], {}])
    def test_create_date_rejects_other_types(self, value):
        result = validate({**VALID, "createDate": value}, TRANSACTION_RULES)
        assert _codes(result) == {("createDate", "type")}

    def test_as_details_shape(self):
        result = validate({**VALID, "name": ""}, TRANSACTION_RULES)
        details = result.as_details()
        assert details == {"errors": [{
            "field": "name",
            "code": "min_length",
            "message": '"name" length must be at least 1 characters long',
        }]}


class TestUpdateRules:
    """Tests for UPDATE_RULES."""

    def test_only_name_and_type(self):
        assert UPDATE_RULES.fields == ("name", "type")
        assert "status" not in UPDATE_RULES.fields

    def test_partial_payload_valid(self):
        assert validate({"name": "New name"}, UPDATE_RULES).ok
        assert validate({"type": "lease"}, UPDATE_RULES).ok
        assert validate({}, UPDATE_RULES).ok

    def test_empty_string_still_rejected(self):
        result = validate({"name": ""}, UPDATE_RULES)
        assert _codes(result) == {("name", "min_length")}


class TestRuleset:
    """Tests for Ruleset composition."""

    def test_only_keeps_order_of_arguments(self):
        rules = Ruleset(FieldRule("a", "string"), FieldRule("b", "string"), FieldRule("c", "date"))
        assert rules.only("c", "a").fields == ("c", "a")

    def test_only_unknown_field_raises(self):
        with pytest.raises(KeyError):
            TRANSACTION_RULES.only("zip")

    def test_optional_drops_required(self):
        rules = Ruleset(FieldRule("a", "string", required=True, min_length=2)).optional()
        assert validate({}, rules).ok
        assert not validate({"a": "x"}, rules).ok
