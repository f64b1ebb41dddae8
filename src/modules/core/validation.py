"""Declarative request validation.

A rule set is an ordered list of ``FieldRule`` entries.  Each rule is a
pure predicate over a single named field of the request body or of the
path parameters, plus the message reported when the predicate fails.

``check_request`` evaluates every rule independently and never stops at
the first violation, so a single field may legitimately produce several
errors (e.g. a missing ``price`` is at once "not numeric", "empty" and
"not greater than zero").

Predicates read values through their string form, which is how the
checks behave for JSON scalars and raw URL segments alike:

- ``None`` / missing  -> ``""``
- ``True`` / ``False`` -> ``"true"`` / ``"false"``
- anything else       -> ``str(value)``
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, List, Optional, Sequence

from rest_framework.request import Request

from modules.core.exceptions import RequestValidationError

BODY = "body"
PARAMS = "params"

Predicate = Callable[[Any], bool]

_NUMERIC_RE = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_BOOLEAN_VALUES = frozenset({"true", "false", "1", "0"})


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_numeric(value: Any) -> bool:
    return _NUMERIC_RE.fullmatch(as_text(value)) is not None


def is_int(value: Any) -> bool:
    return _INT_RE.fullmatch(as_text(value)) is not None


def is_boolean(value: Any) -> bool:
    return as_text(value) in _BOOLEAN_VALUES


def _as_number(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, bool):
        return Decimal(int(value))
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def greater_than(limit: int | Decimal) -> Predicate:
    """Build a predicate passing only for values coercible to a number > ``limit``."""

    def check(value: Any) -> bool:
        number = _as_number(value)
        return number is not None and number > limit

    return check


def less_than(limit: int | Decimal) -> Predicate:
    """Fail only for numbers not strictly below ``limit``; non-numbers pass.

    Presence and numeric checks are separate rules, so a missing or
    malformed value is reported once by those instead.
    """

    def check(value: Any) -> bool:
        number = _as_number(value)
        return number is None or number < limit

    return check


def max_decimal_places(places: int) -> Predicate:
    """Fail only for numbers with more than ``places`` significant decimals."""

    def check(value: Any) -> bool:
        number = _as_number(value)
        if number is None:
            return True
        exponent = number.normalize().as_tuple().exponent
        return -exponent <= places

    return check


def max_length(length: int) -> Predicate:
    def check(value: Any) -> bool:
        return len(as_text(value)) <= length

    return check


# ---------------------------------------------------------------------------
# Rules & aggregation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldRule:
    """A single predicate bound to a request field (immutable)."""

    location: str
    field: str
    check: Predicate
    message: str

    def evaluate(self, source: Mapping) -> Optional[Dict[str, Any]]:
        """Return an error descriptor, or ``None`` when the rule passes."""
        value = source.get(self.field)
        try:
            passed = bool(self.check(value))
        except (TypeError, ValueError, ArithmeticError):
            passed = False
        if passed:
            return None
        return {
            "type": "field",
            "value": value,
            "msg": self.message,
            "path": self.field,
            "location": self.location,
        }


def body(field: str, check: Predicate, message: str) -> FieldRule:
    return FieldRule(BODY, field, check, message)


def param(field: str, check: Predicate, message: str) -> FieldRule:
    return FieldRule(PARAMS, field, check, message)


def check_request(
    rules: Sequence[FieldRule],
    data: Any = None,
    params: Any = None,
) -> List[Dict[str, Any]]:
    """Evaluate every rule and return the failures in declaration order.

    Non-mapping ``data`` or ``params`` (e.g. a JSON array) are treated as
    empty, so every rule still yields a deterministic outcome.
    """
    sources = {
        BODY: data if isinstance(data, Mapping) else {},
        PARAMS: params if isinstance(params, Mapping) else {},
    }
    errors = []
    for rule in rules:
        error = rule.evaluate(sources.get(rule.location, {}))
        if error is not None:
            errors.append(error)
    return errors


class RuleValidationMixin:
    """Runs the rule set of the current viewset action before its handler.

    ``validation_rules`` maps DRF action names (``"create"``,
    ``"retrieve"``...) to rule sets.  Actions without an entry are not
    validated.  On failure ``RequestValidationError`` is raised from
    ``initial()``, so the handler method is never invoked.
    """

    validation_rules: Dict[str, Sequence[FieldRule]] = {}

    def get_validation_rules(self) -> Sequence[FieldRule]:
        return self.validation_rules.get(getattr(self, "action", None) or "", ())

    def initial(self, request: Request, *args, **kwargs) -> None:
        super().initial(request, *args, **kwargs)
        rules = self.get_validation_rules()
        if not rules:
            return
        data = request.data if any(r.location == BODY for r in rules) else None
        errors = check_request(rules, data=data, params=kwargs)
        if errors:
            raise RequestValidationError(errors)
