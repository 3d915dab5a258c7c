"""CLI behavior tests for license-risk."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from license_risk import __version__
from license_risk.cli import main
from license_risk.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep config discovery away from the repository."""
    monkeypatch.chdir(tmp_path)


def write_input(tmp_path: Path, packages: list[dict[str, Any]]) -> str:
    path = tmp_path / "licenses.json"
    path.write_text(json.dumps({"packages": packages}))
    return str(path)


COMPATIBLE = [
    {"name": "requests", "version": "2.31.0", "licenses": ["Apache-2.0"]},
    {"name": "click", "version": "8.1.7", "licenses": ["BSD-3-Clause"]},
]

CONFLICTING = [
    {"name": "gpl-lib", "version": "1.0", "licenses": ["GPL-2.0-only"]},
    {"name": "requests", "version": "2.31.0", "licenses": ["Apache-2.0"]},
]


def test_cli_help(cli_runner: CliRunner) -> None:
    """Test that --help outputs usage information."""
    result = cli_runner.invoke(main, ["--help"])

    assert result.exit_code == 0
    assert "License Risk" in result.output
    assert "analyze" in result.output
    assert "check" in result.output
    assert "licenses" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    """Test that --version outputs correct version."""
    result = cli_runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_help_shows_options(self, cli_runner: CliRunner) -> None:
        """Test that analyze --help lists its options."""
        result = cli_runner.invoke(main, ["analyze", "--help"])

        assert result.exit_code == 0
        for option in ("--format", "--output", "--config", "--policy", "--no-risk"):
            assert option in result.output

    def test_compatible_project_exits_success(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test a compatible project exits 0 with terminal output."""
        result = cli_runner.invoke(main, ["analyze", write_input(tmp_path, COMPATIBLE)])

        assert result.exit_code == EXIT_SUCCESS
        assert "EXECUTIVE SUMMARY" in result.output
        assert "COMPATIBLE" in result.output

    def test_conflicting_project_exits_issues(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test a project with conflicts exits 1."""
        result = cli_runner.invoke(main, ["analyze", write_input(tmp_path, CONFLICTING)])

        assert result.exit_code == EXIT_ISSUES
        assert "INCOMPATIBLE" in result.output

    def test_malformed_licenses_complete(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test odd detected identifiers degrade to issues in terminal output."""
        packages = [
            {"name": "a", "licenses": ["MIT"]},
            {"name": "b", "licenses": ["()"]},
            {"name": "c", "licenses": ["[/foo]"]},
        ]
        result = cli_runner.invoke(main, ["analyze", write_input(tmp_path, packages)])

        assert result.exit_code == EXIT_SUCCESS
        assert "Overall: UNKNOWN" in result.output
        assert "Issues (2)" in result.output

    def test_json_output(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test --format json outputs the full report."""
        result = cli_runner.invoke(
            main, ["analyze", write_input(tmp_path, CONFLICTING), "--format", "json"]
        )

        assert result.exit_code == EXIT_ISSUES
        data = json.loads(result.output)
        assert data["compatibility"]["overallCompatibility"] == "incompatible"
        assert data["compatibility"]["summary"]["riskScore"] == 100
        assert data["legalRisk"]["legalReview"]["required"] is True

    def test_no_risk_skips_assessment(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test --no-risk leaves the legal risk section out."""
        result = cli_runner.invoke(
            main,
            [
                "analyze",
                write_input(tmp_path, COMPATIBLE),
                "--format",
                "json",
                "--no-risk",
            ],
        )

        assert result.exit_code == EXIT_SUCCESS
        assert json.loads(result.output)["legalRisk"] is None

    def test_yaml_input(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test YAML detection output is accepted."""
        path = tmp_path / "licenses.yaml"
        path.write_text("- name: a\n  licenses: [MIT]\n- name: b\n  licenses: [ISC]\n")

        result = cli_runner.invoke(main, ["analyze", str(path), "--format", "json"])

        assert result.exit_code == EXIT_SUCCESS
        summary = json.loads(result.output)["compatibility"]["summary"]
        assert summary["totalPackages"] == 2

    def test_invalid_input_exits_error(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test malformed input exits 2 with an error message."""
        path = tmp_path / "licenses.json"
        path.write_text("{not json")

        result = cli_runner.invoke(main, ["analyze", str(path)])

        assert result.exit_code == EXIT_ERROR
        assert "Error: InputError" in result.output

    def test_missing_input_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test click rejects a missing input path."""
        result = cli_runner.invoke(main, ["analyze", str(tmp_path / "missing.json")])

        assert result.exit_code != EXIT_SUCCESS

    def test_config_ignores_packages(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test ignored packages from a config file."""
        config = tmp_path / "config.yaml"
        config.write_text("ignored_packages:\n  - gpl-lib\n")

        result = cli_runner.invoke(
            main,
            [
                "analyze",
                write_input(tmp_path, CONFLICTING),
                "--config",
                str(config),
                "--format",
                "json",
            ],
        )

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output)
        assert data["ignoredPackages"] == ["gpl-lib"]
        assert data["compatibility"]["summary"]["totalPackages"] == 1

    def test_config_override(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test a license override resolves a conflict."""
        config = tmp_path / "config.yaml"
        config.write_text(
            "overrides:\n"
            "  gpl-lib:\n"
            "    license: MIT\n"
            "    reason: Relicensed upstream\n"
        )

        result = cli_runner.invoke(
            main,
            ["analyze", write_input(tmp_path, CONFLICTING), "-c", str(config)],
        )

        assert result.exit_code == EXIT_SUCCESS

    def test_invalid_config_exits_error(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test a config with unknown keys exits 2."""
        config = tmp_path / "config.yaml"
        config.write_text("unknown_key: true\n")

        result = cli_runner.invoke(
            main,
            ["analyze", write_input(tmp_path, COMPATIBLE), "--config", str(config)],
        )

        assert result.exit_code == EXIT_ERROR
        assert "ConfigurationError" in result.output

    def test_discovers_config_in_cwd(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test the config file in the working directory is used."""
        (tmp_path / ".license-risk.yaml").write_text("ignored_packages: [gpl-lib]\n")

        result = cli_runner.invoke(main, ["analyze", write_input(tmp_path, CONFLICTING)])

        assert result.exit_code == EXIT_SUCCESS


class TestAnalyzePolicy:
    """Tests for analyze --policy."""

    def test_violations_reported(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test violations are reported without failing by default."""
        policy = tmp_path / "policy.yaml"
        policy.write_text("disallowedLicenses:\n  - BSD-3-Clause\n")

        result = cli_runner.invoke(
            main,
            [
                "analyze",
                write_input(tmp_path, COMPATIBLE),
                "--policy",
                str(policy),
                "--format",
                "json",
            ],
        )

        assert result.exit_code == EXIT_SUCCESS
        violations = json.loads(result.output)["policyViolations"]
        assert [v["packageName"] for v in violations] == ["click"]

    def test_fail_on_violation(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test failOnPolicyViolation turns violations into exit 1."""
        policy = tmp_path / "policy.json"
        policy.write_text(
            json.dumps(
                {"disallowedLicenses": ["Apache-2.0"], "failOnPolicyViolation": True}
            )
        )

        result = cli_runner.invoke(
            main, ["analyze", write_input(tmp_path, COMPATIBLE), "-p", str(policy)]
        )

        assert result.exit_code == EXIT_ISSUES
        assert "Policy Violations" in result.output

    def test_malformed_policy_exits_error(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test a malformed policy fails before analysis."""
        policy = tmp_path / "policy.yaml"
        policy.write_text("maxSeverity: extreme\n")

        result = cli_runner.invoke(
            main,
            [
                "analyze",
                write_input(tmp_path, CONFLICTING),
                "--policy",
                str(policy),
                "--format",
                "json",
            ],
        )

        assert result.exit_code == EXIT_ERROR
        assert "Error: PolicyError" in result.output
        assert "compatibility" not in result.output


class TestAnalyzeOutputFile:
    """Tests for analyze --output."""

    def test_json_written_to_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test the JSON report is written to the given file."""
        report = tmp_path / "report.json"

        result = cli_runner.invoke(
            main,
            [
                "analyze",
                write_input(tmp_path, COMPATIBLE),
                "--format",
                "json",
                "-o",
                str(report),
            ],
        )

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(report.read_text(encoding="utf-8"))
        assert data["compatibility"]["overallCompatibility"] == "compatible"
        assert "Report written to" in result.output

    def test_terminal_written_as_text(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test terminal output written to a file is plain text."""
        report = tmp_path / "report.txt"

        result = cli_runner.invoke(
            main,
            ["analyze", write_input(tmp_path, COMPATIBLE), "--output", str(report)],
        )

        assert result.exit_code == EXIT_SUCCESS
        content = report.read_text(encoding="utf-8")
        assert "EXECUTIVE SUMMARY" in content
        assert "\x1b[" not in content

    def test_overwrite_warning(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test overwriting an existing file warns on stderr."""
        report = tmp_path / "report.json"
        report.write_text("old")

        result = cli_runner.invoke(
            main,
            [
                "analyze",
                write_input(tmp_path, COMPATIBLE),
                "--format",
                "json",
                "-o",
                str(report),
            ],
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "Overwriting existing file" in result.output
        assert report.read_text(encoding="utf-8") != "old"


class TestCheckCommand:
    """Tests for the check command."""

    def test_compatible_pair(self, cli_runner: CliRunner) -> None:
        """Test a compatible pair exits 0."""
        result = cli_runner.invoke(main, ["check", "MIT", "Apache-2.0"])

        assert result.exit_code == EXIT_SUCCESS
        assert "compatible" in result.output

    def test_incompatible_pair(self, cli_runner: CliRunner) -> None:
        """Test an incompatible pair exits 1."""
        result = cli_runner.invoke(main, ["check", "GPL-2.0-only", "Apache-2.0"])

        assert result.exit_code == EXIT_ISSUES
        assert "incompatible" in result.output

    def test_json_format(self, cli_runner: CliRunner) -> None:
        """Test check --format json."""
        result = cli_runner.invoke(
            main, ["check", "apache", "GPL-3.0", "--format", "json"]
        )

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output)
        assert data["licenseA"]["identifier"] == "Apache-2.0"
        assert data["licenseB"]["identifier"] == "GPL-3.0-only"
        assert data["verdict"] == "compatible"

    def test_unknown_license_is_not_an_error(self, cli_runner: CliRunner) -> None:
        """Test an unrecognized license gives an unknown verdict."""
        result = cli_runner.invoke(
            main, ["check", "Acme-EULA", "MIT", "--format", "json"]
        )

        assert result.exit_code == EXIT_SUCCESS
        assert json.loads(result.output)["verdict"] == "unknown"

    @pytest.mark.parametrize("raw", ["()", "[/foo]"])
    def test_malformed_license_is_unknown(
        self, cli_runner: CliRunner, raw: str
    ) -> None:
        """Test unparseable and bracketed identifiers still give a verdict."""
        result = cli_runner.invoke(main, ["check", "MIT", raw])

        assert result.exit_code == EXIT_SUCCESS
        assert "Verdict: unknown" in result.output
        assert f"MIT + {raw}" in result.output


class TestLicensesCommand:
    """Tests for the licenses command."""

    def test_lists_catalog(self, cli_runner: CliRunner) -> None:
        """Test the catalog table."""
        result = cli_runner.invoke(main, ["licenses"])

        assert result.exit_code == EXIT_SUCCESS
        assert "Known Licenses" in result.output

    def test_category_filter_json(self, cli_runner: CliRunner) -> None:
        """Test filtering by category with JSON output."""
        result = cli_runner.invoke(
            main, ["licenses", "--category", "proprietary", "--format", "json"]
        )

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.output)
        assert [lic["identifier"] for lic in data] == ["UNLICENSED"]

    def test_invalid_category(self, cli_runner: CliRunner) -> None:
        """Test click rejects an unknown category."""
        result = cli_runner.invoke(main, ["licenses", "--category", "freeware"])

        assert result.exit_code != EXIT_SUCCESS
