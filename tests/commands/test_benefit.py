"""Tests for the benefit command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from emprecords.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestBenefitCommands:
    def test_add_and_list(self, cli_runner: CliRunner) -> None:
        added = cli_runner.invoke(cli, ["--json", "benefit", "add", "Vision", "--base-cost", "25"])
        assert added.exit_code == 0, added.output
        assert json.loads(added.stdout)["body"]["base_cost"] == "25.00"

        listed = cli_runner.invoke(cli, ["benefit", "list"])
        assert listed.exit_code == 0, listed.output
        assert "Vision" in listed.output

    def test_add_without_cost_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["benefit", "add", "Vision"])
        assert result.exit_code == 1
        assert "Base cost is required." in result.output

    def test_duplicate_name_conflicts(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["benefit", "add", "Vision", "--base-cost", "25"])
        result = cli_runner.invoke(cli, ["--json", "benefit", "add", "Vision", "--base-cost", "30"])
        assert result.exit_code == 1
        assert '"status_code": 409' in result.output
