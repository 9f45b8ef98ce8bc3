"""Rule context — what a field rule may know beyond the payload itself.

A :class:`RuleContext` is built by the pipeline for each invocation and passed
explicitly into every rule call. It carries:

- the request's route values, read-only;
- a :class:`StorageReader` over the request's own session, so a check sees the
  same data the following write will act on.

Rules must treat a missing or malformed route value, or a missing referenced
row, as "nothing to contradict" and pass.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession
    from sqlalchemy.sql import Select


def parse_route_int(route_values: Mapping[str, str], name: str) -> int | None:
    """Integer route value, or None when absent or malformed.

    Examples:
        >>> parse_route_int({"id": "7"}, "id")
        7
        >>> parse_route_int({"id": "seven"}, "id") is None
        True
        >>> parse_route_int({}, "id") is None
        True
    """
    raw = route_values.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


class StorageReader:
    """Read-only access to the request's session for validation rules.

    An ``AsyncSession`` cannot run two statements at once, while field rules
    run concurrently, so reads are serialised on a lock.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._lock = asyncio.Lock()

    async def get(self, entity: type[Any], ident: Any) -> Any | None:
        async with self._lock:
            return await self._session.get(entity, ident)

    async def scalar(self, statement: Select[Any]) -> Any:
        async with self._lock:
            return await self._session.scalar(statement)


@dataclass(frozen=True)
class RuleContext:
    """Ambient request data handed to rules as an explicit argument."""

    route_values: Mapping[str, str] = field(default_factory=dict)
    reader: StorageReader | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "route_values", MappingProxyType(dict(self.route_values)))

    def route_value(self, name: str) -> str | None:
        return self.route_values.get(name)

    def route_int(self, name: str) -> int | None:
        return parse_route_int(self.route_values, name)

    def require_reader(self) -> StorageReader:
        """The storage reader; a rule asking for it without one is a fault."""
        if self.reader is None:
            msg = "This rule needs storage access but no reader was supplied"
            raise RuntimeError(msg)
        return self.reader
