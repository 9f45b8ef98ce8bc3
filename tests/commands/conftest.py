"""Fixtures for CLI command tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI in a temp directory with a frozen clock and no outside config.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EMPRECORDS_CONFIG", raising=False)
    monkeypatch.delenv("EMPRECORDS_DATABASE__URL", raising=False)
    monkeypatch.setenv("EMPRECORDS_CLOCK__FROZEN_AT", "2022-01-01T00:00:00Z")
