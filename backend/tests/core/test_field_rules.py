"""Field Rules — tests for pure check functions and rule evaluation.

Tests cover:
    - as_text renders absent/None/booleans/integral floats the way checks read them
    - each check accepts and rejects the expected text forms
    - evaluate_rules runs every rule, keeps declaration order, omits value when absent
    - to_number / to_boolean coercions used after the gate
"""

import pytest

from products_api.core.field_rules import (
    MISSING,
    FieldRule,
    as_text,
    evaluate_rules,
    is_boolean,
    is_int,
    is_numeric,
    is_positive,
    not_empty,
    targets_body,
    to_boolean,
    to_number,
)


# ─── as_text ─────────────────────────────────────────────────────

@pytest.mark.parametrize("value, text", [
    (MISSING, ""),
    (None, ""),
    (True, "true"),
    (False, "false"),
    (100.0, "100"),
    (19.5, "19.5"),
    (0.00001, "0.00001"),
    (0.0000123, "0.0000123"),
    (1e-08, "1e-08"),
    (7, "7"),
    ("abc", "abc"),
])
def test_as_text(value, text):
    assert as_text(value) == text


# ─── checks ──────────────────────────────────────────────────────

def test_not_empty():
    assert not_empty("x")
    assert not_empty(0)
    assert not_empty(False)
    assert not not_empty("")
    assert not not_empty(None)
    assert not not_empty(MISSING)


@pytest.mark.parametrize("value", ["1", "42", "-3", "+8", "0", "007", "01", 15])
def test_is_int_accepts(value):
    assert is_int(value)


@pytest.mark.parametrize("value", ["abc", "1.5", "", "1e3", "0x1F", MISSING])
def test_is_int_rejects(value):
    assert not is_int(value)


@pytest.mark.parametrize("value", [100, 0, -2, 3.75, 0.00001, "12", "-0.5", ".5"])
def test_is_numeric_accepts(value):
    assert is_numeric(value)


@pytest.mark.parametrize("value", ["test", "", True, None, MISSING, "1,5"])
def test_is_numeric_rejects(value):
    assert not is_numeric(value)


@pytest.mark.parametrize("value", [True, False, "true", "false", "1", "0", 1, 0])
def test_is_boolean_accepts(value):
    assert is_boolean(value)


@pytest.mark.parametrize("value", ["yes", "True", "", None, MISSING, 2])
def test_is_boolean_rejects(value):
    assert not is_boolean(value)


def test_is_positive():
    assert is_positive(1)
    assert is_positive(0.01)
    assert is_positive("250")
    assert not is_positive(0)
    assert not is_positive(-1)
    assert not is_positive("test")
    assert not is_positive(True)
    assert not is_positive(MISSING)


# ─── coercions ───────────────────────────────────────────────────

def test_to_number():
    assert to_number(5) == 5.0
    assert to_number("19.99") == 19.99
    assert to_number("abc") is None
    assert to_number(True) is None


def test_to_boolean():
    assert to_boolean(True) is True
    assert to_boolean("0") is False
    assert to_boolean(1) is True
    assert to_boolean("maybe") is None


# ─── evaluate_rules ──────────────────────────────────────────────

RULES = (
    FieldRule("params", "id", is_int, "bad id"),
    FieldRule("body", "name", not_empty, "name missing"),
    FieldRule("body", "price", is_numeric, "price not numeric"),
)


def test_evaluate_rules_passes_clean_input():
    assert evaluate_rules(RULES, {"id": "3"}, {"name": "a", "price": 2}) == []


def test_evaluate_rules_collects_every_failure_in_order():
    errors = evaluate_rules(RULES, {"id": "x"}, {})
    assert [e["msg"] for e in errors] == ["bad id", "name missing", "price not numeric"]


def test_error_entry_shape():
    (error,) = evaluate_rules(RULES[:1], {"id": "x"}, {})
    assert error == {
        "type": "field", "value": "x", "msg": "bad id",
        "path": "id", "location": "params",
    }


def test_error_entry_omits_value_when_absent():
    (error,) = evaluate_rules(RULES[1:2], {}, {})
    assert "value" not in error


def test_error_entry_keeps_explicit_null():
    (error,) = evaluate_rules(RULES[1:2], {}, {"name": None})
    assert error["value"] is None


def test_targets_body():
    assert targets_body(RULES)
    assert not targets_body(RULES[:1])
