"""Tests for CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from ctcplan.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestCLI:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_take_home(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["take-home", "1000000"])
        assert result.exit_code == 0
        assert "Yearly take-home:   ₹10,00,000" in result.output
        assert "Yearly tax:         ₹0" in result.output

    def test_take_home_in_lakhs(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["take-home", "12", "--lakhs"])
        assert result.exit_code == 0
        assert "Annual CTC:         ₹12,00,000" in result.output
        assert "Monthly take-home:  ₹1,00,000" in result.output

    def test_take_home_json_output(self, runner: CliRunner, tmp_path: Path) -> None:
        output_file = tmp_path / "take_home.json"
        result = runner.invoke(cli, ["take-home", "3000000", "--output", str(output_file)])
        assert result.exit_code == 0
        assert "Results written to" in result.output
        data = json.loads(output_file.read_text())
        assert data["yearlyTaxPayable"] == pytest.approx(465_000.0)
        assert data["yearlyTakeHome"] == pytest.approx(2_535_000.0)

    def test_negative_ctc_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["take-home", "--", "-5"])
        assert result.exit_code == 2

    def test_savings_monthly(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["savings", "1200000", "--monthly-expense", "40000"])
        assert result.exit_code == 0
        assert "Monthly savings:    ₹60,000" in result.output

    def test_savings_both_expenses(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["savings", "1200000", "--monthly-expense", "40000", "--annual-expenses", "480000"],
        )
        assert result.exit_code == 2
        assert "not both" in result.output

    def test_savings_range_csv(self, runner: CliRunner, tmp_path: Path) -> None:
        output_file = tmp_path / "range.csv"
        result = runner.invoke(
            cli,
            [
                "savings-range",
                "--min-ctc", "1000000",
                "--max-ctc", "2000000",
                "--monthly-expense", "20000",
                "--csv",
                "--output", str(output_file),
            ],
        )
        assert result.exit_code == 0
        lines = output_file.read_text().splitlines()
        assert lines[0] == "AnnualCtc,MonthlySavings"
        assert len(lines) == 4

    def test_savings_range_inverted(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["savings-range", "--min-ctc", "2000000", "--max-ctc", "1000000", "--monthly-expense", "0"],
        )
        assert result.exit_code == 2
        assert "min_ctc must not exceed max_ctc" in result.output

    def test_time_to_target(self, runner: CliRunner, tmp_path: Path) -> None:
        output_file = tmp_path / "ttt.json"
        result = runner.invoke(
            cli,
            [
                "time-to-target",
                "--min-ctc", "600000",
                "--max-ctc", "1200000",
                "--increment", "600000",
                "--monthly-expense", "30000",
                "--target", "1000000",
                "--output", str(output_file),
            ],
        )
        assert result.exit_code == 0
        assert "15 months (1y 3m)" in result.output
        data = json.loads(output_file.read_text())
        assert data["results"][1] == {"annualCtc": 1_200_000.0, "timeToTargetMonths": 15}

    def test_time_to_target_lakhs_keeps_rate(self, runner: CliRunner) -> None:
        """--lakhs scales amounts but not the growth rate."""
        result = runner.invoke(
            cli,
            [
                "time-to-target",
                "--min-ctc", "12",
                "--max-ctc", "12",
                "--monthly-expense", "0.3",
                "--target", "10",
                "--sip-cagr", "0",
                "--lakhs",
            ],
        )
        assert result.exit_code == 0
        assert "15 months (1y 3m)" in result.output

    def test_required_ctc(self, runner: CliRunner, tmp_path: Path) -> None:
        output_file = tmp_path / "ctc.json"
        result = runner.invoke(cli, ["required-ctc", "1850000", "--output", str(output_file)])
        assert result.exit_code == 0
        assert "Required annual CTC:" in result.output
        data = json.loads(output_file.read_text())
        assert data["requiredAnnualCtc"] == pytest.approx(2_050_000.0, abs=2.0)
        assert data["message"] is None

    def test_required_ctc_unreachable(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["required-ctc", "1000000000"])
        assert result.exit_code == 0
        assert "closest estimate" in result.output

    def test_custom_policy(self, runner: CliRunner, tmp_path: Path) -> None:
        policy_file = tmp_path / "flat.yaml"
        policy_file.write_text(
            "brackets:\n"
            "  - [0, null, 0.10]\n"
            "standard_deduction: 0\n"
        )
        result = runner.invoke(cli, ["--policy", str(policy_file), "take-home", "1000000"])
        assert result.exit_code == 0
        assert "Yearly take-home:   ₹9,00,000" in result.output

    def test_invalid_policy(self, runner: CliRunner, tmp_path: Path) -> None:
        policy_file = tmp_path / "bad.yaml"
        policy_file.write_text("brackets:\n  - [100, null, 0.10]\n")
        result = runner.invoke(cli, ["--policy", str(policy_file), "take-home", "1000000"])
        assert result.exit_code == 2
        assert "first bracket must start at 0" in result.output

    def test_short_bracket_row(self, runner: CliRunner, tmp_path: Path) -> None:
        policy_file = tmp_path / "short.yaml"
        policy_file.write_text("brackets:\n  - [0, 0.1]\n")
        result = runner.invoke(cli, ["--policy", str(policy_file), "take-home", "1000"])
        assert result.exit_code == 2
        assert "[lower, upper, rate]" in result.output

    def test_undecodable_policy(self, runner: CliRunner, tmp_path: Path) -> None:
        policy_file = tmp_path / "binary.yaml"
        policy_file.write_bytes(b"brackets: \xff\xfe\n")
        result = runner.invoke(cli, ["--policy", str(policy_file), "take-home", "1000"])
        assert result.exit_code == 2
