"""Field Rules — declarative, independently evaluated constraints on request input.

Invariants:
    - All functions are PURE: no IO, no async, no request objects
    - Every rule is evaluated; a failing rule contributes exactly one error entry
    - Error order == rule declaration order (stable)
    - Checks read the value's text form: absent/None -> "", booleans -> "true"/"false"

Design Decisions:
    - Rules as data (FieldRule tuples) over per-route if-chains: a route's contract
      is readable in one place and testable without HTTP (ADR: Functional Core)
    - Return error dicts (not exceptions): the gate decides how to surface them
"""

import json
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Literal

Location = Literal["params", "body"]

# Marks a field absent from the request (distinct from an explicit null)
MISSING: Any = object()

_INT_RE = re.compile(r"^[-+]?[0-9]+$")
_NUMERIC_RE = re.compile(r"^[+-]?(?:[0-9]*\.)?[0-9]+$")
_BOOLEAN_TEXT = {"true": True, "false": False, "1": True, "0": False}
# Non-integral floats at or above this magnitude render in plain notation
_PLAIN_NOTATION_FLOOR = 1e-7


@dataclass(frozen=True)
class FieldRule:
    """One constraint on one input field."""
    location: Location
    field: str
    check: Callable[[Any], bool]
    message: str


def as_text(value: Any) -> str:
    """Text form a check reads."""
    if value is MISSING or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float) and abs(value) >= _PLAIN_NOTATION_FLOOR:
        return format(Decimal(repr(value)), "f")
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def to_number(value: Any) -> float | None:
    """Numeric value of a number or numeric string. Booleans are not numbers."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and _NUMERIC_RE.match(value):
        return float(value)
    return None


def to_boolean(value: Any) -> bool | None:
    """Boolean value of true/false/1/0 (JSON or text), else None."""
    return _BOOLEAN_TEXT.get(as_text(value))


# ─── Checks ─────────────────────────────────────────────────────

def not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_int(value: Any) -> bool:
    return bool(_INT_RE.match(as_text(value)))


def is_numeric(value: Any) -> bool:
    return not isinstance(value, bool) and bool(_NUMERIC_RE.match(as_text(value)))


def is_boolean(value: Any) -> bool:
    return to_boolean(value) is not None


def is_positive(value: Any) -> bool:
    number = to_number(value)
    return number is not None and number > 0


# ─── Evaluation ─────────────────────────────────────────────────

def build_error(rule: FieldRule, value: Any) -> dict[str, Any]:
    """Error entry for a failed rule. 'value' omitted when the field is absent."""
    error: dict[str, Any] = {"type": "field"}
    if value is not MISSING:
        error["value"] = value
    error.update(msg=rule.message, path=rule.field, location=rule.location)
    return error


def evaluate_rules(
    rules: tuple[FieldRule, ...],
    params: dict[str, Any],
    body: dict[str, Any],
) -> list[dict[str, Any]]:
    """Run every rule against params/body. Returns errors in declaration order."""
    sources = {"params": params, "body": body}
    errors = []
    for rule in rules:
        value = sources[rule.location].get(rule.field, MISSING)
        if not rule.check(value):
            errors.append(build_error(rule, value))
    return errors


def targets_body(rules: tuple[FieldRule, ...]) -> bool:
    """True if any rule reads the JSON body."""
    return any(rule.location == "body" for rule in rules)
