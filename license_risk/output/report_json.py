"""JSON output formatter for compatibility and legal risk reports."""
import json
from datetime import datetime, timezone
from typing import Any, Optional

from license_risk import __version__
from license_risk.constants import LEGAL_DISCLAIMER
from license_risk.models.compatibility import (
    PairwiseResult,
    ProjectCompatibilityReport,
    ProjectInfo,
)
from license_risk.models.license import License, LicenseObligation
from license_risk.models.policy import PolicyViolation
from license_risk.models.risk import LegalRiskReport


class ReportJsonFormatter:
    """Format analysis results as JSON for CI/CD integration.

    Keys are camelCase. The compatibility and legal risk sections keep the
    documented report shapes so downstream policy tooling can consume them
    without re-running detection.
    """

    def format_analysis(
        self,
        report: ProjectCompatibilityReport,
        risk: Optional[LegalRiskReport] = None,
        violations: Optional[list[PolicyViolation]] = None,
        ignored_names: Optional[list[str]] = None,
    ) -> str:
        """Format a full analysis run as a JSON string.

        Args:
            report: Project compatibility report.
            risk: Legal risk report, if assessed.
            violations: Policy violations, if a policy was evaluated.
            ignored_names: Packages left out by configuration.

        Returns:
            JSON string representation of the analysis.
        """
        output: dict[str, Any] = {
            "metadata": self._build_metadata(),
            "compatibility": self.build_compatibility(report),
            "legalRisk": self.build_legal_risk(risk) if risk is not None else None,
            "policyViolations": [
                self._build_violation(violation) for violation in violations or []
            ],
            "ignoredPackages": list(ignored_names or []),
        }
        return json.dumps(output, indent=2)

    def format_pairwise(self, result: PairwiseResult) -> str:
        """Format a single pairwise result as a JSON string."""
        output = {
            "licenseA": self._build_license(result.license_a),
            "licenseB": self._build_license(result.license_b),
            "verdict": result.verdict.value,
            "compatible": result.compatible,
            "riskLevel": result.risk_level.value,
            "explanation": result.explanation,
            "conditions": list(result.conditions),
            "warnings": list(result.warnings),
            "recommendations": list(result.recommendations),
        }
        return json.dumps(output, indent=2)

    def format_licenses(self, licenses: list[License]) -> str:
        """Format catalog licenses as a JSON array string."""
        return json.dumps([self._build_license(lic) for lic in licenses], indent=2)

    def _build_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generatedAt": timestamp,
            "toolVersion": __version__,
            "disclaimer": LEGAL_DISCLAIMER,
        }

    def build_compatibility(self, report: ProjectCompatibilityReport) -> dict[str, Any]:
        """Build the ProjectCompatibilityReport dictionary.

        Args:
            report: The report to convert.

        Returns:
            Dictionary ready for JSON serialization.
        """
        summary = report.summary
        return {
            "project": self._build_project(report.project),
            "packages": [
                {
                    "name": record.name,
                    "version": record.version,
                    "licenses": list(record.licenses),
                    "publisher": record.publisher,
                    "publisherDomain": record.publisher_domain,
                }
                for record in report.packages
            ],
            "allLicenses": [self._build_license(lic) for lic in report.licenses],
            "compatibilityMatrix": [
                {
                    "licenseA": entry.license_a,
                    "licenseB": entry.license_b,
                    "verdict": entry.verdict.value,
                    "riskLevel": entry.risk_level.value,
                }
                for entry in report.matrix
            ],
            "overallCompatibility": report.overall_compatibility.value,
            "highestRiskLevel": report.highest_risk_level.value,
            "conflicts": [
                {
                    "licenses": [lic.identifier for lic in conflict.licenses],
                    "description": conflict.description,
                    "severity": conflict.severity,
                    "resolution": conflict.resolution,
                }
                for conflict in report.conflicts
            ],
            "projectObligations": [
                self._build_obligation(obligation) for obligation in report.obligations
            ],
            "recommendations": [
                {
                    "type": rec.type,
                    "priority": rec.priority,
                    "description": rec.description,
                    "affectedLicenses": list(rec.affected_licenses),
                }
                for rec in report.recommendations
            ],
            "summary": {
                "totalPackages": summary.total_packages,
                "uniqueLicenses": summary.unique_licenses,
                "unknownLicensePackages": summary.unknown_license_packages,
                "compatiblePackages": summary.compatible_packages,
                "incompatiblePairs": summary.incompatible_pairs,
                "riskScore": summary.risk_score,
            },
            "issues": [
                {
                    "type": issue.type,
                    "severity": issue.severity,
                    "packageName": issue.package_name,
                    "packageVersion": issue.package_version,
                    "license": issue.license,
                    "description": issue.description,
                }
                for issue in report.issues
            ],
        }

    def build_legal_risk(self, risk: LegalRiskReport) -> dict[str, Any]:
        """Build the LegalRiskReport dictionary.

        Args:
            risk: The legal risk report to convert.

        Returns:
            Dictionary ready for JSON serialization.
        """
        review = risk.legal_review
        return {
            "overallRisk": risk.overall_risk.value,
            "riskScore": risk.risk_score,
            "riskFactors": [
                {
                    "category": factor.category,
                    "description": factor.description,
                    "impact": factor.impact,
                    "likelihood": factor.likelihood,
                    "riskScore": factor.score,
                    "mitigation": factor.mitigation,
                }
                for factor in risk.risk_factors
            ],
            "legalReview": {
                "required": review.required,
                "urgency": review.urgency,
                "scope": list(review.scope),
                "estimatedHours": review.estimated_hours,
            },
            "patentRisks": [
                {
                    "license": patent.license,
                    "description": patent.description,
                    "riskLevel": patent.risk_level.value,
                }
                for patent in risk.patent_risks
            ],
            "complianceRequirements": [
                {
                    "requirement": requirement.requirement,
                    "responsible": requirement.responsible,
                }
                for requirement in risk.compliance_requirements
            ],
        }

    def _build_project(
        self, project: Optional[ProjectInfo]
    ) -> Optional[dict[str, Any]]:
        if project is None:
            return None
        return {
            "name": project.name,
            "version": project.version,
            "license": project.license.identifier if project.license else None,
        }

    def _build_license(self, lic: License) -> dict[str, Any]:
        return {
            "identifier": lic.identifier,
            "name": lic.name,
            "category": lic.category.value,
            "obligations": [kind.value for kind in lic.obligations],
            "allowsCommercialUse": lic.allows_commercial_use,
            "requiresSourceDisclosure": lic.requires_source_disclosure,
            "osiApproved": lic.osi_approved,
            "url": lic.url,
            "resolved": lic.resolved,
        }

    def _build_obligation(self, obligation: LicenseObligation) -> dict[str, Any]:
        return {
            "type": obligation.kind.value,
            "description": obligation.description,
            "severity": obligation.severity,
            "scope": obligation.scope,
        }

    def _build_violation(self, violation: PolicyViolation) -> dict[str, Any]:
        return {
            "packageName": violation.package_name,
            "packageVersion": violation.package_version,
            "detectedLicense": violation.detected_license,
            "reason": violation.reason,
        }
