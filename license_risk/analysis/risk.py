"""Legal risk assessment for license-risk.

Maps compatibility verdicts to risk levels and canned guidance, scores
individual packages from their license categories and obligations, and
builds the project-level LegalRiskReport.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from license_risk.catalog import LicenseCatalog, default_catalog
from license_risk.constants import RISK_SCORE_MAX, RISK_SCORE_MIN
from license_risk.models.compatibility import (
    CompatibilityVerdict,
    LegalRiskLevel,
    ProjectCompatibilityReport,
)
from license_risk.models.license import (
    OBLIGATION_DETAILS,
    License,
    LicenseCategory,
    ObligationKind,
)
from license_risk.models.package import PackageLicenseAnalysis
from license_risk.models.risk import (
    ComplianceRequirement,
    LegalReview,
    LegalRiskReport,
    PatentRisk,
    RiskFactor,
    Urgency,
)

logger = logging.getLogger(__name__)

VERDICT_RISK: dict[CompatibilityVerdict, LegalRiskLevel] = {
    CompatibilityVerdict.COMPATIBLE: LegalRiskLevel.VERY_LOW,
    CompatibilityVerdict.CONDITIONALLY_COMPATIBLE: LegalRiskLevel.MEDIUM,
    CompatibilityVerdict.INCOMPATIBLE: LegalRiskLevel.CRITICAL,
    CompatibilityVerdict.REQUIRES_REVIEW: LegalRiskLevel.HIGH,
    CompatibilityVerdict.UNKNOWN: LegalRiskLevel.VERY_HIGH,
}

CATEGORY_POINTS: dict[LicenseCategory, int] = {
    LicenseCategory.PUBLIC_DOMAIN: 0,
    LicenseCategory.PERMISSIVE: 1,
    LicenseCategory.WEAK_COPYLEFT: 3,
    LicenseCategory.COPYLEFT: 5,
    LicenseCategory.CUSTOM: 7,
    LicenseCategory.UNKNOWN: 8,
    LicenseCategory.PROPRIETARY: 10,
}

OBLIGATION_SEVERITY_POINTS: dict[str, int] = {
    "low": 1,
    "medium": 2,
    "high": 5,
    "critical": 10,
}

# Package points thresholds, highest first
PACKAGE_RISK_THRESHOLDS: list[tuple[int, LegalRiskLevel]] = [
    (20, LegalRiskLevel.CRITICAL),
    (15, LegalRiskLevel.VERY_HIGH),
    (10, LegalRiskLevel.HIGH),
    (5, LegalRiskLevel.MEDIUM),
    (2, LegalRiskLevel.LOW),
]

PACKAGE_LEVEL_POINTS: dict[LegalRiskLevel, int] = {
    LegalRiskLevel.CRITICAL: 20,
    LegalRiskLevel.VERY_HIGH: 15,
    LegalRiskLevel.HIGH: 10,
    LegalRiskLevel.MEDIUM: 5,
    LegalRiskLevel.LOW: 2,
    LegalRiskLevel.VERY_LOW: 1,
}

# Project score thresholds, highest first
OVERALL_RISK_THRESHOLDS: list[tuple[int, LegalRiskLevel]] = [
    (80, LegalRiskLevel.CRITICAL),
    (60, LegalRiskLevel.VERY_HIGH),
    (40, LegalRiskLevel.HIGH),
    (20, LegalRiskLevel.MEDIUM),
    (10, LegalRiskLevel.LOW),
]

REVIEW_HOURS_PER_SCOPE = 4

_URGENCY_ORDER: list[Urgency] = ["low", "medium", "high", "urgent"]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def _level_for(
    points: int, thresholds: list[tuple[int, LegalRiskLevel]]
) -> LegalRiskLevel:
    for minimum, level in thresholds:
        if points >= minimum:
            return level
    return LegalRiskLevel.VERY_LOW


class LegalRiskAssessor:
    """Stateless legal risk assessor.

    Every method is a pure function of its arguments. The catalog is only
    read, to resolve package license identifiers in ``assess``.
    """

    def __init__(self, catalog: Optional[LicenseCatalog] = None) -> None:
        self.catalog = catalog or default_catalog()

    def risk_level(self, verdict: CompatibilityVerdict) -> LegalRiskLevel:
        """Map a verdict to its risk level.

        Not knowing is treated as riskier than a known, reviewable condition:
        ``unknown`` maps to very-high while ``requires-review`` maps to high.
        """
        return VERDICT_RISK[verdict]

    def explain(
        self, license_a: License, license_b: License, verdict: CompatibilityVerdict
    ) -> str:
        """Return one sentence describing the verdict for two licenses."""
        name_a = license_a.name
        name_b = license_b.name
        if verdict == CompatibilityVerdict.COMPATIBLE:
            return (
                f"{name_a} and {name_b} are fully compatible and can be used "
                "together without restrictions."
            )
        if verdict == CompatibilityVerdict.CONDITIONALLY_COMPATIBLE:
            return (
                f"{name_a} and {name_b} can be used together under certain "
                "conditions. Review the specific terms and obligations."
            )
        if verdict == CompatibilityVerdict.INCOMPATIBLE:
            return (
                f"{name_a} and {name_b} are incompatible and cannot be legally "
                "combined in the same project."
            )
        if verdict == CompatibilityVerdict.REQUIRES_REVIEW:
            return (
                f"The compatibility between {name_a} and {name_b} requires legal "
                "review to determine if they can be used together."
            )
        return (
            f"The compatibility between {name_a} and {name_b} cannot be "
            "determined automatically. Legal review is recommended."
        )

    def conditions(
        self, license_a: License, license_b: License, verdict: CompatibilityVerdict
    ) -> list[str]:
        """Return the conditions under which two licenses may be combined.

        Only ``conditionally-compatible`` pairs carry conditions.
        """
        if verdict != CompatibilityVerdict.CONDITIONALLY_COMPATIBLE:
            return []

        pair = (license_a, license_b)
        conditions: list[str] = []
        if any(lic.category == LicenseCategory.COPYLEFT for lic in pair):
            conditions.append(
                "Must comply with copyleft obligations of the stricter license"
            )
            conditions.append(
                "May need to release entire work under compatible copyleft license"
            )
        if any(lic.has_obligation(ObligationKind.ATTRIBUTION) for lic in pair):
            conditions.append("Must include proper attribution for both licenses")
        if any(lic.requires_source_disclosure for lic in pair):
            conditions.append("Must make source code available if distributing")
        return conditions

    def warnings(
        self, license_a: License, license_b: License, verdict: CompatibilityVerdict
    ) -> list[str]:
        """Return warnings for a license pair."""
        warnings: list[str] = []
        if verdict == CompatibilityVerdict.INCOMPATIBLE:
            warnings.append("These licenses cannot be legally combined")
            warnings.append(
                "Consider removing one of the dependencies or finding alternatives"
            )
        if verdict == CompatibilityVerdict.REQUIRES_REVIEW:
            warnings.append("Legal review is strongly recommended before proceeding")
            warnings.append("Document the legal analysis and decision rationale")

        identifiers = {license_a.identifier, license_b.identifier}
        if identifiers == {"GPL-2.0-only", "Apache-2.0"}:
            warnings.append(
                "GPL-2.0 and Apache-2.0 have known patent clause incompatibilities"
            )
        if any("AGPL" in identifier for identifier in identifiers):
            warnings.append("AGPL has network copyleft implications for web services")
        return warnings

    def recommendations(
        self, license_a: License, license_b: License, verdict: CompatibilityVerdict
    ) -> list[str]:
        """Return remediation recommendations for a license pair."""
        if verdict == CompatibilityVerdict.INCOMPATIBLE:
            return [
                "Find alternative dependencies with compatible licenses",
                "Consider dual-licensing if you control one of the components",
                "Seek legal counsel for specific use case guidance",
            ]
        if verdict == CompatibilityVerdict.CONDITIONALLY_COMPATIBLE:
            return [
                "Document the specific conditions that must be met",
                "Implement compliance procedures for license obligations",
                "Consider the long-term implications of license obligations",
            ]
        return []

    def package_risk_level(self, licenses: list[License]) -> LegalRiskLevel:
        """Score a single package from its licenses.

        Category points are summed per license; obligation points are summed
        once per distinct obligation kind across the package's licenses.

        Args:
            licenses: Resolved licenses of one package (placeholders allowed).

        Returns:
            The package risk level; very-high for a package with no licenses.
        """
        if not licenses:
            return LegalRiskLevel.VERY_HIGH

        points = sum(CATEGORY_POINTS[lic.category] for lic in licenses)
        kinds = {kind for lic in licenses for kind in lic.obligations}
        for kind in kinds:
            _, severity, _ = OBLIGATION_DETAILS[kind]
            points += OBLIGATION_SEVERITY_POINTS[severity]
        return _level_for(points, PACKAGE_RISK_THRESHOLDS)

    def _resolve_all(self, analysis: PackageLicenseAnalysis) -> list[License]:
        return [
            self.catalog.resolve(raw) or License.unrecognized(raw.strip())
            for raw in analysis.licenses
            if raw.strip()
        ]

    def assess(
        self,
        report: ProjectCompatibilityReport,
        analyses: list[PackageLicenseAnalysis],
    ) -> LegalRiskReport:
        """Build the project-level legal risk report.

        Args:
            report: Compatibility report for the same analyses.
            analyses: Per-package license detection output.

        Returns:
            LegalRiskReport with score, overall level, risk factors, legal
            review recommendation, patent risks and compliance requirements.
        """
        resolved = [self._resolve_all(analysis) for analysis in analyses]

        if analyses:
            points = sum(
                PACKAGE_LEVEL_POINTS[self.package_risk_level(licenses)]
                for licenses in resolved
            )
            points += report.summary.risk_score
            score = round_half_up(points / len(analyses))
        else:
            score = 0
        score = max(RISK_SCORE_MIN, min(RISK_SCORE_MAX, score))
        overall = _level_for(score, OVERALL_RISK_THRESHOLDS)

        factors = self._risk_factors(report, resolved)
        logger.debug(
            "Legal risk for %d packages: score=%d overall=%s factors=%d",
            len(analyses),
            score,
            overall.value,
            len(factors),
        )
        return LegalRiskReport(
            overall_risk=overall,
            risk_score=score,
            risk_factors=factors,
            legal_review=self._legal_review(overall, factors),
            patent_risks=self._patent_risks(resolved),
            compliance_requirements=self._compliance_requirements(report),
        )

    def _risk_factors(
        self,
        report: ProjectCompatibilityReport,
        resolved: list[list[License]],
    ) -> list[RiskFactor]:
        factors: list[RiskFactor] = []

        if report.conflicts:
            count = len(report.conflicts)
            factors.append(
                RiskFactor(
                    category="license-compatibility",
                    description=f"{count} license compatibility conflicts detected",
                    impact="critical",
                    likelihood="high",
                    score=count * 20,
                    mitigation=(
                        "Remove conflicting dependencies or find compatible "
                        "alternatives"
                    ),
                )
            )

        copyleft = sum(
            1
            for licenses in resolved
            if any(lic.category == LicenseCategory.COPYLEFT for lic in licenses)
        )
        if copyleft:
            factors.append(
                RiskFactor(
                    category="compliance",
                    description=(
                        f"{copyleft} packages with copyleft licenses requiring "
                        "compliance"
                    ),
                    impact="high",
                    likelihood="medium",
                    score=copyleft * 10,
                    mitigation=(
                        "Implement proper compliance procedures for license "
                        "obligations"
                    ),
                )
            )

        unlicensed = sum(1 for licenses in resolved if not licenses)
        if unlicensed:
            factors.append(
                RiskFactor(
                    category="governance",
                    description=(
                        f"{unlicensed} packages with unknown or missing licenses"
                    ),
                    impact="high",
                    likelihood="high",
                    score=unlicensed * 15,
                    mitigation=(
                        "Contact package maintainers to clarify licensing or find "
                        "alternatives"
                    ),
                )
            )

        return factors

    def _legal_review(
        self, overall: LegalRiskLevel, factors: list[RiskFactor]
    ) -> LegalReview:
        urgency = 0
        scope: list[str] = []

        if overall == LegalRiskLevel.CRITICAL or any(
            factor.impact == "critical" for factor in factors
        ):
            urgency = max(urgency, _URGENCY_ORDER.index("urgent"))
            scope.append("Critical risk mitigation")
        if any(factor.category == "license-compatibility" for factor in factors):
            urgency = max(urgency, _URGENCY_ORDER.index("high"))
            scope.append("License compatibility analysis")
        if overall in (LegalRiskLevel.HIGH, LegalRiskLevel.VERY_HIGH):
            urgency = max(urgency, _URGENCY_ORDER.index("medium"))
            scope.append("General license compliance review")

        return LegalReview(
            required=bool(scope),
            urgency=_URGENCY_ORDER[urgency],
            scope=scope,
            estimated_hours=len(scope) * REVIEW_HOURS_PER_SCOPE,
        )

    def _patent_risks(self, resolved: list[list[License]]) -> list[PatentRisk]:
        seen: set[str] = set()
        risks: list[PatentRisk] = []
        for licenses in resolved:
            for lic in licenses:
                if lic.has_obligation(ObligationKind.PATENT_GRANT) and (
                    lic.identifier not in seen
                ):
                    seen.add(lic.identifier)
                    risks.append(PatentRisk(license=lic.identifier))
        return risks

    def _compliance_requirements(
        self, report: ProjectCompatibilityReport
    ) -> list[ComplianceRequirement]:
        kinds = {obligation.kind for obligation in report.obligations}
        requirements: list[ComplianceRequirement] = []
        if ObligationKind.ATTRIBUTION in kinds:
            requirements.append(
                ComplianceRequirement(
                    requirement="Create and maintain attribution documentation",
                    responsible="Development Team",
                )
            )
        if ObligationKind.DISCLOSE_SOURCE in kinds:
            requirements.append(
                ComplianceRequirement(
                    requirement="Implement source code disclosure procedures",
                    responsible="Legal Team",
                )
            )
        return requirements
