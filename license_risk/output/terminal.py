"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from license_risk.constants import LEGAL_DISCLAIMER_SHORT
from license_risk.models.compatibility import (
    CompatibilityVerdict,
    LegalRiskLevel,
    PairwiseResult,
    ProjectCompatibilityReport,
)
from license_risk.models.license import License
from license_risk.models.policy import PolicyViolation
from license_risk.models.risk import LegalRiskReport

VERDICT_STYLES = {
    CompatibilityVerdict.COMPATIBLE: "green",
    CompatibilityVerdict.CONDITIONALLY_COMPATIBLE: "yellow",
    CompatibilityVerdict.UNKNOWN: "magenta",
    CompatibilityVerdict.REQUIRES_REVIEW: "yellow",
    CompatibilityVerdict.INCOMPATIBLE: "red",
}

RISK_STYLES = {
    LegalRiskLevel.VERY_LOW: "green",
    LegalRiskLevel.LOW: "green",
    LegalRiskLevel.MEDIUM: "yellow",
    LegalRiskLevel.HIGH: "yellow",
    LegalRiskLevel.VERY_HIGH: "red",
    LegalRiskLevel.CRITICAL: "bold red",
}


def _styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/{style}]"


class TerminalFormatter:
    """Format analysis results for terminal display using Rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_analysis(
        self,
        report: ProjectCompatibilityReport,
        risk: Optional[LegalRiskReport] = None,
        violations: Optional[list[PolicyViolation]] = None,
        ignored_names: Optional[list[str]] = None,
    ) -> None:
        """Display a full analysis run.

        Args:
            report: Project compatibility report.
            risk: Legal risk report, if assessed.
            violations: Policy violations, if a policy was evaluated.
            ignored_names: Packages left out by configuration.
        """
        violations = violations or []
        self._print_executive_summary(report, violations, ignored_names or [])
        self._print_disclaimer()

        if report.summary.total_packages == 0:
            self._console.print("[yellow]No packages found[/yellow]")
            return

        self._print_licenses(report)
        if report.matrix:
            self._print_matrix(report)
        if report.conflicts:
            self._print_conflicts(report)
        if report.issues:
            self._print_issues(report)
        if report.obligations:
            self._print_obligations(report)
        if report.recommendations:
            self._print_recommendations(report)
        if risk is not None:
            self._print_legal_risk(risk)
        if violations:
            self._print_policy_violations(violations)

    def format_pairwise(self, result: PairwiseResult) -> None:
        """Display a single pairwise compatibility result."""
        style = VERDICT_STYLES[result.verdict]
        risk_style = RISK_STYLES[result.risk_level]
        lines = [
            f"Verdict: {_styled(result.verdict.value, style)}",
            f"Risk level: {_styled(result.risk_level.value, risk_style)}",
            "",
            escape(result.explanation),
        ]
        for title, items in (
            ("Conditions", result.conditions),
            ("Warnings", result.warnings),
            ("Recommendations", result.recommendations),
        ):
            if items:
                lines.append("")
                lines.append(f"[bold]{title}:[/bold]")
                lines.extend(f"  - {escape(item)}" for item in items)

        panel = Panel(
            "\n".join(lines),
            title=(
                f"[bold]{escape(result.license_a.identifier)} + "
                f"{escape(result.license_b.identifier)}[/bold]"
            ),
            border_style=style,
        )
        self._console.print(panel)

    def format_licenses(self, licenses: list[License]) -> None:
        """Display catalog licenses as a table."""
        if not licenses:
            self._console.print("[yellow]No licenses found[/yellow]")
            return

        table = Table(title="Known Licenses")
        table.add_column("Identifier", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Category", style="magenta")
        table.add_column("OSI", justify="center")
        table.add_column("FSF", justify="center")
        table.add_column("Obligations", style="green")

        for lic in licenses:
            table.add_row(
                escape(lic.identifier),
                escape(lic.name),
                lic.category.value,
                "yes" if lic.osi_approved else "",
                "yes" if lic.fsf_approved else "",
                ", ".join(kind.value for kind in lic.obligations),
            )
        self._console.print(table)

    def _print_disclaimer(self) -> None:
        """Print the legal disclaimer panel."""
        panel = Panel(
            LEGAL_DISCLAIMER_SHORT,
            title="[bold yellow]NOT LEGAL ADVICE[/bold yellow]",
            border_style="yellow",
        )
        self._console.print(panel)
        self._console.print("")

    def _print_executive_summary(
        self,
        report: ProjectCompatibilityReport,
        violations: list[PolicyViolation],
        ignored_names: list[str],
    ) -> None:
        summary = report.summary
        verdict = report.overall_compatibility
        status_color = VERDICT_STYLES[verdict]

        summary_lines: list[str] = []
        if report.project is not None:
            summary_lines.append(f"Project: {escape(report.project.name)}")
        summary_lines += [
            f"Total Packages: {summary.total_packages}",
            f"Unique Licenses: {summary.unique_licenses}",
            f"Packages Without License: {summary.unknown_license_packages}",
            f"Incompatible Pairs: {summary.incompatible_pairs}",
            f"Risk Score: {summary.risk_score}/100",
        ]
        if violations:
            summary_lines.append(f"Policy Violations: {len(violations)}")
        if ignored_names:
            names_str = escape(", ".join(ignored_names[:3]))
            if len(ignored_names) > 3:
                names_str += f", ... (+{len(ignored_names) - 3} more)"
            summary_lines.append(
                f"Packages Ignored: {len(ignored_names)} ({names_str})"
            )

        summary_lines.extend([
            "",
            f"Overall: {_styled(verdict.value.upper(), status_color)}",
            f"Highest Risk: {report.highest_risk_level.value}",
        ])

        panel = Panel(
            "\n".join(summary_lines),
            title="[bold]EXECUTIVE SUMMARY[/bold]",
            border_style=status_color,
        )
        self._console.print(panel)
        self._console.print("")

    def _print_licenses(self, report: ProjectCompatibilityReport) -> None:
        table = Table(title="Licenses")
        table.add_column("License", style="cyan", no_wrap=True)
        table.add_column("Name")
        table.add_column("Category", style="magenta")

        for lic in report.licenses:
            identifier = escape(lic.identifier)
            if not lic.resolved:
                identifier = _styled(f"{identifier} (unrecognized)", "yellow")
            table.add_row(identifier, escape(lic.name), lic.category.value)
        self._console.print(table)

    def _print_matrix(self, report: ProjectCompatibilityReport) -> None:
        table = Table(title="Compatibility Matrix")
        table.add_column("License A", style="cyan", no_wrap=True)
        table.add_column("License B", style="cyan", no_wrap=True)
        table.add_column("Verdict")
        table.add_column("Risk")

        for entry in report.matrix:
            table.add_row(
                escape(entry.license_a),
                escape(entry.license_b),
                _styled(entry.verdict.value, VERDICT_STYLES[entry.verdict]),
                _styled(entry.risk_level.value, RISK_STYLES[entry.risk_level]),
            )
        self._console.print(table)

    def _print_conflicts(self, report: ProjectCompatibilityReport) -> None:
        self._console.print("")
        self._console.print(f"[bold red]Conflicts ({len(report.conflicts)})[/bold red]")
        for conflict in report.conflicts:
            self._console.print(f"  [red]![/red] {escape(conflict.description)}")
            if conflict.resolution:
                self._console.print(conflict.resolution, markup=False)

    def _print_issues(self, report: ProjectCompatibilityReport) -> None:
        self._console.print("")
        self._console.print(f"[bold yellow]Issues ({len(report.issues)})[/bold yellow]")
        for issue in report.issues:
            self._console.print(f"  [yellow]-[/yellow] {escape(issue.description)}")

    def _print_obligations(self, report: ProjectCompatibilityReport) -> None:
        table = Table(title="Project Obligations")
        table.add_column("Obligation", style="cyan")
        table.add_column("Severity")
        table.add_column("Scope")
        table.add_column("Description")

        for obligation in report.obligations:
            table.add_row(
                obligation.kind.value,
                obligation.severity,
                obligation.scope,
                obligation.description,
            )
        self._console.print(table)

    def _print_recommendations(self, report: ProjectCompatibilityReport) -> None:
        self._console.print("")
        self._console.print("[bold]Recommendations[/bold]")
        for rec in report.recommendations:
            self._console.print(f"  [{rec.priority}] {rec.description}", markup=False)

    def _print_legal_risk(self, risk: LegalRiskReport) -> None:
        style = RISK_STYLES[risk.overall_risk]
        lines = [
            f"Overall Risk: {_styled(risk.overall_risk.value, style)}",
            f"Risk Score: {risk.risk_score}/100",
        ]
        for factor in risk.risk_factors:
            lines.append(
                f"  - {escape(factor.description)} "
                f"(impact {factor.impact}, likelihood {factor.likelihood})"
            )

        review = risk.legal_review
        lines.append("")
        if review.required:
            lines.append(
                f"Legal review required ({review.urgency}, "
                f"~{review.estimated_hours}h): {escape(', '.join(review.scope))}"
            )
        else:
            lines.append("Legal review not required")

        if risk.patent_risks:
            patents = ", ".join(patent.license for patent in risk.patent_risks)
            lines.append(f"Patent provisions: {escape(patents)}")

        self._console.print("")
        self._console.print(
            Panel("\n".join(lines), title="[bold]LEGAL RISK[/bold]", border_style=style)
        )

    def _print_policy_violations(self, violations: list[PolicyViolation]) -> None:
        self._console.print("")
        self._console.print(
            f"[bold red]Policy Violations ({len(violations)})[/bold red]"
        )
        for violation in violations:
            license_str = escape(violation.detected_license or "Unknown")
            package = escape(f"{violation.package_name}@{violation.package_version}")
            self._console.print(
                f"  [red]![/red] {package} "
                f"([yellow]{license_str}[/yellow]): {escape(violation.reason)}"
            )
