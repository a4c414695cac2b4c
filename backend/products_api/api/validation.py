"""Validation Gate — FastAPI dependency that halts a request on any failed field rule.

Invariants:
    - All declared rules run before the gate decides (errors accumulate, never short-circuit)
    - Any error -> RuleViolationError (400 {"errors": [...]}) and the route body never runs
    - The JSON body is read only when a rule targets it (PATCH never parses its body)
    - Empty body or non-JSON content type == {}; a JSON body that is not an object
      is itself a validation error

Design Decisions:
    - Dependency over middleware: rules are declared next to the route they guard
      and show up in the route's signature
    - Route path params are not declared as typed FastAPI params: an ill-typed id must
      produce the rule's message, not FastAPI's own 422
"""

import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from fastapi import Request

from products_api.core.errors import RuleViolationError
from products_api.core.field_rules import FieldRule, evaluate_rules, targets_body

MALFORMED_BODY_MESSAGE = "Request body must be a JSON object"
JSON_MEDIA_TYPE = "application/json"


@dataclass
class CheckedRequest:
    """Request input that passed its rules."""
    params: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def product_id(self) -> int:
        return int(self.params["id"])


async def read_json_object(request: Request) -> dict[str, Any]:
    """Parse the body as a JSON object. Raises RuleViolationError otherwise.

    Bodies sent with any other content type are not read and count as {}.
    """
    media_type = request.headers.get("content-type", "").split(";")[0]
    if media_type.strip().lower() != JSON_MEDIA_TYPE:
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        payload = None
    if not isinstance(payload, dict):
        raise RuleViolationError([{
            "type": "body", "msg": MALFORMED_BODY_MESSAGE,
            "path": "", "location": "body",
        }])
    return payload


def validate_request(
    *rules: FieldRule,
) -> Callable[[Request], Awaitable[CheckedRequest]]:
    """Build the gate dependency for a route's rule set."""

    async def gate(request: Request) -> CheckedRequest:
        params = dict(request.path_params)
        body = await read_json_object(request) if targets_body(rules) else {}
        errors = evaluate_rules(rules, params, body)
        if errors:
            raise RuleViolationError(errors)
        return CheckedRequest(params=params, body=body)

    return gate
