"""Field rules — single predicates over one payload field.

Every rule is called as ``check(value, payload, ctx)`` and may return a bool
or an awaitable bool. Only :func:`not_empty` fails on a missing value; all the
value-shape rules pass on ``None`` so that "required" stays a separate,
explicit rule.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from emprecords.validation.context import RuleContext

RuleCheck = Callable[[Any, Any, "RuleContext"], bool | Awaitable[bool]]


@dataclass(frozen=True)
class FieldRule:
    """A check plus the fixed message reported when it fails."""

    check: RuleCheck
    message: str

    async def evaluate(self, value: Any, payload: Any, ctx: RuleContext) -> bool:
        outcome = self.check(value, payload, ctx)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return bool(outcome)


def is_blank(value: Any) -> bool:
    """None, or a string with nothing but whitespace."""
    return value is None or (isinstance(value, str) and not value.strip())


def must(predicate: Callable[[Any], bool], message: str) -> FieldRule:
    """Rule from a value-only predicate (called for ``None`` too)."""
    return FieldRule(lambda value, _payload, _ctx: predicate(value), message)


def context_rule(check: RuleCheck, message: str) -> FieldRule:
    """Rule that needs the payload or the rule context; may be async."""
    return FieldRule(check, message)


def not_empty(message: str) -> FieldRule:
    return must(lambda value: not is_blank(value), message)


def max_length(limit: int, message: str) -> FieldRule:
    return must(lambda value: value is None or len(value) <= limit, message)


def min_length(limit: int, message: str) -> FieldRule:
    return must(lambda value: value is None or len(value) >= limit, message)


def matches(pattern: str, message: str) -> FieldRule:
    compiled = re.compile(pattern)
    return must(lambda value: value is None or compiled.search(value) is not None, message)


def _looks_like_email(value: str) -> bool:
    at = value.find("@")
    return 0 < at < len(value) - 1 and at == value.rfind("@")


def email_address(message: str) -> FieldRule:
    """Exactly one ``@`` with something on both sides."""
    return must(lambda value: value is None or _looks_like_email(value), message)


def _is_absolute_url(value: str) -> bool:
    parts = urlsplit(value)
    return bool(parts.scheme and parts.netloc)


def absolute_url(message: str) -> FieldRule:
    """Absolute URL, or empty."""
    return must(lambda value: not value or _is_absolute_url(value), message)


def greater_than_or_equal(bound: int | Decimal, message: str) -> FieldRule:
    return must(lambda value: value is None or value >= bound, message)


def less_than_or_equal(bound: int | Decimal, message: str) -> FieldRule:
    return must(lambda value: value is None or value <= bound, message)


def equal_to_field(other: str, message: str) -> FieldRule:
    """The value must equal another field on the same payload."""
    return context_rule(lambda value, payload, _ctx: value == getattr(payload, other), message)
