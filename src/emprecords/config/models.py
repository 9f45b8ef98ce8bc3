"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here and ``emprecords.toml`` only holds
overrides. An empty file (or none at all) gives a SQLite database next to the
config and the real system clock.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from emprecords.domain.auditing import SYSTEM_AUTHOR


class DatabaseConfig(BaseModel):
    """[database] section.

    ``url`` wins over ``filename`` when both are set.
    """

    model_config = {"frozen": True}

    url: str | None = None
    filename: str = "emprecords.db"
    echo: bool = False


class ClockConfig(BaseModel):
    """[clock] section. Set ``frozen_at`` to pin every audit timestamp."""

    model_config = {"frozen": True}

    frozen_at: datetime | None = None


class AuditConfig(BaseModel):
    """[audit] section."""

    model_config = {"frozen": True}

    system_author: str = SYSTEM_AUTHOR
