"""CLI entry point for license-risk."""

from __future__ import annotations

import logging
import sys
from io import StringIO
from pathlib import Path
from typing import Any, Callable, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from license_risk import __version__
from license_risk.analysis.compatibility import CompatibilityResolver
from license_risk.analysis.filtering import filter_ignored_packages
from license_risk.analysis.overrides import apply_license_overrides
from license_risk.analysis.project import ProjectCompatibilityAnalyzer
from license_risk.catalog import default_catalog
from license_risk.config import load_config
from license_risk.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_risk.exceptions import ConfigurationError, LicenseRiskError
from license_risk.inputs import load_analyses
from license_risk.models.compatibility import (
    CompatibilityVerdict,
    ProjectCompatibilityReport,
)
from license_risk.models.license import LicenseCategory
from license_risk.models.policy import LicensePolicy, PolicyViolation
from license_risk.models.risk import LegalRiskReport
from license_risk.output.report_json import ReportJsonFormatter
from license_risk.output.terminal import TerminalFormatter
from license_risk.policy import evaluate_policy, load_policy

logger = logging.getLogger(__name__)

# Module-level console for consistent output
_console = Console()
# Separate console for errors and log records (writes to stderr)
_error_console = Console(stderr=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

_format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format (default: terminal).",
)

_log_level_option = click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Log level for diagnostics written to stderr (default: WARNING).",
)


def _setup_logging(level: str) -> None:
    """Route log records through Rich on stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=_error_console, rich_tracebacks=True, show_path=False
            )
        ],
        force=True,
    )


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Risk - License compatibility and legal risk analysis.

    Reads the licenses detected for a project's packages, checks whether
    they can legally coexist, and scores the legal risk.

    \b
    Examples:
        license-risk analyze licenses.json
        license-risk analyze licenses.yaml --format json
        license-risk check MIT GPL-2.0-only
        license-risk licenses --category copyleft
    """
    pass


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@_format_option
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write report to file instead of stdout.",
)
@click.option(
    "--risk/--no-risk",
    "risk_flag",
    default=True,
    help="Include the legal risk assessment (default: on).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--policy",
    "-p",
    "policy_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a policy file (YAML or JSON).",
)
@_log_level_option
def analyze(
    input_path: str,
    output_format: str,
    output_path: str | None,
    risk_flag: bool,
    config_path: str | None,
    policy_path: str | None,
    log_level: str,
) -> None:
    """Analyze license compatibility for detected package licenses.

    INPUT_PATH is a JSON or YAML file with the per-package license
    detection output.

    \b
    Examples:
        license-risk analyze licenses.json
        license-risk analyze licenses.json --format json -o report.json
        license-risk analyze licenses.json --policy policy.yaml
        license-risk analyze licenses.json --no-risk --log-level DEBUG
    """
    _setup_logging(log_level)
    format_value = output_format.lower()

    try:
        config = load_config(config_path)
        # Validate the policy before any analysis runs
        policy = load_policy(Path(policy_path)) if policy_path else None

        analyses = load_analyses(Path(input_path))
        filtered = filter_ignored_packages(analyses, config)
        analyses = apply_license_overrides(filtered.analyses, config)
        if filtered.ignored_count:
            logger.info("Ignored %d packages", filtered.ignored_count)

        analyzer = ProjectCompatibilityAnalyzer.from_config(config)
        report = analyzer.analyze([a.package for a in analyses], analyses)
        risk = analyzer.assessor.assess(report, analyses) if risk_flag else None
        violations = (
            evaluate_policy(policy, analyses, analyzer.catalog) if policy else []
        )

        _display_analysis(
            report,
            risk,
            violations,
            filtered.ignored_names,
            format_value,
            output_path,
        )
        sys.exit(_exit_code(report, violations, policy))

    except LicenseRiskError as e:
        _display_error(e, format_value)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("license_a")
@click.argument("license_b")
@_format_option
@_log_level_option
def check(license_a: str, license_b: str, output_format: str, log_level: str) -> None:
    """Check whether two licenses can be combined.

    Exits with status 1 when the licenses are incompatible.

    \b
    Examples:
        license-risk check MIT Apache-2.0
        license-risk check GPL-2.0-only Apache-2.0 --format json
    """
    _setup_logging(log_level)
    result = CompatibilityResolver().check(license_a, license_b)

    if output_format.lower() == "json":
        click.echo(ReportJsonFormatter().format_pairwise(result))
    else:
        TerminalFormatter(console=_console).format_pairwise(result)

    if result.verdict == CompatibilityVerdict.INCOMPATIBLE:
        sys.exit(EXIT_ISSUES)
    sys.exit(EXIT_SUCCESS)


@main.command(name="licenses")
@click.option(
    "--category",
    type=click.Choice([c.value for c in LicenseCategory], case_sensitive=False),
    default=None,
    help="Only list licenses of this category.",
)
@_format_option
@_log_level_option
def list_licenses(category: str | None, output_format: str, log_level: str) -> None:
    """List the licenses known to the catalog.

    \b
    Examples:
        license-risk licenses
        license-risk licenses --category weak-copyleft --format json
    """
    _setup_logging(log_level)
    catalog = default_catalog()
    if category:
        licenses = catalog.by_category(LicenseCategory(category.lower()))
    else:
        licenses = catalog.all()

    if output_format.lower() == "json":
        click.echo(ReportJsonFormatter().format_licenses(licenses))
    else:
        TerminalFormatter(console=_console).format_licenses(licenses)


def _exit_code(
    report: ProjectCompatibilityReport,
    violations: list[PolicyViolation],
    policy: Optional[LicensePolicy],
) -> int:
    """Map analysis results to the process exit code."""
    if report.has_conflicts:
        return EXIT_ISSUES
    if violations and policy is not None and policy.fail_on_policy_violation:
        return EXIT_ISSUES
    return EXIT_SUCCESS


def _render_terminal_text(render: Callable[[TerminalFormatter], Any]) -> str:
    """Render terminal output to plain text for writing to a file."""
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=False, width=120)
    render(TerminalFormatter(console=console))
    return buffer.getvalue()


def _display_analysis(
    report: ProjectCompatibilityReport,
    risk: Optional[LegalRiskReport],
    violations: list[PolicyViolation],
    ignored_names: list[str],
    format_type: str,
    output_path: str | None = None,
) -> None:
    """Display analysis results in the specified format.

    Args:
        report: Project compatibility report.
        risk: Legal risk report, or None when skipped.
        violations: Policy violations.
        ignored_names: Packages left out by configuration.
        format_type: "terminal" or "json".
        output_path: Optional file path to write output to.
    """
    if format_type == "json":
        content = ReportJsonFormatter().format_analysis(
            report, risk, violations, ignored_names
        )
    elif output_path:
        content = _render_terminal_text(
            lambda fmt: fmt.format_analysis(report, risk, violations, ignored_names)
        )
    else:
        TerminalFormatter(console=_console).format_analysis(
            report, risk, violations, ignored_names
        )
        return

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content)


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _error_console.print(
                f"[yellow]Warning: Overwriting existing file: {escape(path)}[/yellow]"
            )
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Report written to {escape(path)}[/green]")


def _display_error(error: LicenseRiskError, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
