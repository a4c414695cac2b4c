"""Product Rule Sets — error counts each route's contract promises.

Tests:
    - non-numeric price fails two rules, non-positive numeric price fails one
    - empty PUT body fails five rules; a valid id adds none
    - rule sets are composed in id -> body -> availability order
"""

from products_api.core.field_rules import evaluate_rules
from products_api.core.product_rules import (
    AVAILABILITY_RULES,
    CREATE_PRODUCT_RULES,
    PRODUCT_BODY_RULES,
    PRODUCT_ID_RULES,
    UPDATE_PRODUCT_RULES,
)


def _messages(rules, params=None, body=None):
    return [e["msg"] for e in evaluate_rules(rules, params or {}, body or {})]


def test_create_with_valid_body_passes():
    assert _messages(CREATE_PRODUCT_RULES, body={"name": "Desk", "price": 150}) == []


def test_non_numeric_price_fails_two_rules():
    assert _messages(CREATE_PRODUCT_RULES, body={"name": "Desk", "price": "test"}) == [
        "Price must be greater than 0",
        "Price must be a number",
    ]


def test_zero_price_fails_one_rule():
    assert _messages(CREATE_PRODUCT_RULES, body={"name": "Desk", "price": 0}) == [
        "Price must be greater than 0",
    ]


def test_empty_name_string_fails():
    assert _messages(CREATE_PRODUCT_RULES, body={"name": "", "price": 1}) == [
        "Name is required",
    ]


def test_empty_update_body_fails_five_rules():
    assert len(_messages(UPDATE_PRODUCT_RULES, params={"id": "1"})) == 5


def test_invalid_id_message():
    assert _messages(PRODUCT_ID_RULES, params={"id": "not-valid-url"}) == ["Not a valid ID"]


def test_update_rules_composition():
    assert UPDATE_PRODUCT_RULES == PRODUCT_ID_RULES + PRODUCT_BODY_RULES + AVAILABILITY_RULES
