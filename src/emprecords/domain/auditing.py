"""The Auditable capability.

An entity opts into automatic create/modify stamping by exposing the four
audit attributes below. Only the audit interceptor writes them; services and
handlers never do.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol, runtime_checkable

SYSTEM_AUTHOR = "system"

AuthorResolver = Callable[[], str]


@runtime_checkable
class Auditable(Protocol):
    """Structural type for entities carrying audit metadata."""

    created_by: str | None
    created_at: datetime | None
    modified_by: str | None
    modified_at: datetime | None


def system_author() -> str:
    """Default author for audit stamps.

    TODO: resolve the authenticated caller once an identity provider is wired
    in; until then every write is attributed to the system placeholder.
    """
    return SYSTEM_AUTHOR


def fixed_author(name: str) -> AuthorResolver:
    """Build a resolver that always answers *name* (configured placeholder)."""

    def _resolve() -> str:
        return name

    return _resolve
