"""Product Rule Sets — the validation contract of every /api/products route.

Invariants:
    - Messages are part of the public API contract (clients match on them)
    - Price carries three independent rules: a non-numeric price fails two of them
      (positivity, numeric), a numeric non-positive price fails exactly one
"""

from products_api.core.field_rules import (
    FieldRule, is_boolean, is_int, is_numeric, is_positive, not_empty,
)

PRODUCT_ID_RULES = (
    FieldRule("params", "id", is_int, "Not a valid ID"),
)

PRODUCT_BODY_RULES = (
    FieldRule("body", "name", not_empty, "Name is required"),
    FieldRule("body", "price", is_positive, "Price must be greater than 0"),
    FieldRule("body", "price", not_empty, "Price is required"),
    FieldRule("body", "price", is_numeric, "Price must be a number"),
)

AVAILABILITY_RULES = (
    FieldRule("body", "availability", is_boolean, "Availability must be a boolean"),
)

CREATE_PRODUCT_RULES = PRODUCT_BODY_RULES
UPDATE_PRODUCT_RULES = PRODUCT_ID_RULES + PRODUCT_BODY_RULES + AVAILABILITY_RULES
