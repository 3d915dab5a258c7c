"""Project-wide license compatibility analysis for license-risk.

Builds the unique license set across all analyzed packages, the full
pairwise compatibility matrix, and the ProjectCompatibilityReport derived
from it: overall verdict, conflicts, obligations, recommendations and
summary statistics with the bounded risk score.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from itertools import combinations
from typing import Optional, Sequence

from license_risk.analysis.compatibility import CompatibilityResolver, PairKey, pair_key
from license_risk.analysis.risk import LegalRiskAssessor, round_half_up
from license_risk.catalog import LicenseCatalog, default_catalog
from license_risk.constants import CONFLICT_RESOLUTION, RISK_SCORE_MAX, RISK_SCORE_MIN
from license_risk.models.compatibility import (
    CompatibilityVerdict,
    ConflictRecord,
    LegalRiskLevel,
    LicenseIssue,
    MatrixEntry,
    PackageLicenses,
    ProjectCompatibilityReport,
    ProjectInfo,
    Recommendation,
    ReportSummary,
)
from license_risk.models.config import EngineConfig, RiskWeights
from license_risk.models.license import License, LicenseCategory, LicenseObligation
from license_risk.models.package import PackageIdentity, PackageLicenseAnalysis

logger = logging.getLogger(__name__)


def calculate_risk_score(
    incompatible_pairs: int,
    total_pairs: int,
    unknown_packages: int,
    total_packages: int,
    weights: Optional[RiskWeights] = None,
) -> int:
    """Compute the bounded project risk score.

    The incompatible-pair fraction is rounded on its own, then the weighted
    unknown-package fraction is added and the sum rounded and clamped. Each
    term is 0 when its denominator is 0.

    Args:
        incompatible_pairs: Matrix entries with verdict ``incompatible``.
        total_pairs: Matrix size.
        unknown_packages: Packages without any detected license.
        total_packages: Packages in the project.
        weights: Term weights. Defaults to 100 and 50.

    Returns:
        Risk score between 0 and 100.
    """
    weights = weights or RiskWeights()
    score: float = 0
    if total_pairs > 0:
        score += round_half_up(
            weights.incompatible_pairs * incompatible_pairs / total_pairs
        )
    if total_packages > 0:
        score += weights.unknown_licenses * unknown_packages / total_packages
    return max(RISK_SCORE_MIN, min(RISK_SCORE_MAX, round_half_up(score)))


class ProjectCompatibilityAnalyzer:
    """Analyzes license compatibility across all packages of a project.

    Holds no state between runs: calling ``analyze`` twice with the same input
    produces identical reports.
    """

    def __init__(
        self,
        catalog: Optional[LicenseCatalog] = None,
        resolver: Optional[CompatibilityResolver] = None,
        assessor: Optional[LegalRiskAssessor] = None,
        weights: Optional[RiskWeights] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        """Set up the analyzer.

        Args:
            catalog: License catalog. Defaults to the shared built-in catalog.
            resolver: Pairwise resolver. Built over ``catalog`` if omitted.
            assessor: Risk assessor. Built over ``catalog`` if omitted.
            weights: Risk score weights.
            max_workers: Build the matrix on a thread pool of this size when
                greater than 1.
        """
        self.catalog = catalog or default_catalog()
        self.assessor = assessor or LegalRiskAssessor(self.catalog)
        self.resolver = resolver or CompatibilityResolver(self.catalog, self.assessor)
        self.weights = weights or RiskWeights()
        self.max_workers = max_workers

    @classmethod
    def from_config(
        cls, config: EngineConfig, catalog: Optional[LicenseCatalog] = None
    ) -> ProjectCompatibilityAnalyzer:
        """Build an analyzer using the weights and worker count of a config."""
        return cls(
            catalog=catalog,
            weights=config.risk_weights,
            max_workers=config.max_workers,
        )

    def analyze(
        self,
        packages: Sequence[PackageIdentity],
        analyses: Sequence[PackageLicenseAnalysis],
    ) -> ProjectCompatibilityReport:
        """Analyze the licenses of a project's packages.

        Unrecognized identifiers and packages without licenses never raise;
        they degrade to unknown licenses and are recorded as issues.

        Args:
            packages: Packages of the project. May be empty or shorter than
                ``analyses``.
            analyses: License detection output, one entry per package.

        Returns:
            ProjectCompatibilityReport for the project.
        """
        total_packages = max(len(packages), len(analyses))
        logger.debug(
            "Analyzing %d packages (%d license analyses)", total_packages, len(analyses)
        )

        licenses, issues, unknown_packages, package_licenses = self._collect_licenses(
            analyses
        )
        matrix = self._build_matrix(licenses)

        by_id = {lic.identifier: lic for lic in licenses}
        conflicts = self._identify_conflicts(matrix, by_id)
        incompatible_pairs = len(conflicts)

        conflicting_ids = {
            lic.identifier for conflict in conflicts for lic in conflict.licenses
        }
        compatible_packages = sum(
            1
            for record in package_licenses
            if record.licenses and conflicting_ids.isdisjoint(record.licenses)
        )

        summary = ReportSummary(
            total_packages=total_packages,
            unique_licenses=len(licenses),
            unknown_license_packages=unknown_packages,
            compatible_packages=compatible_packages,
            incompatible_pairs=incompatible_pairs,
            risk_score=calculate_risk_score(
                incompatible_pairs,
                len(matrix),
                unknown_packages,
                total_packages,
                self.weights,
            ),
        )

        report = ProjectCompatibilityReport(
            project=self._project_info(packages),
            packages=package_licenses,
            licenses=licenses,
            matrix=matrix,
            overall_compatibility=CompatibilityVerdict.worst(
                entry.verdict for entry in matrix
            ),
            highest_risk_level=LegalRiskLevel.highest(
                entry.risk_level for entry in matrix
            ),
            conflicts=conflicts,
            obligations=self._aggregate_obligations(licenses),
            recommendations=self._recommendations(conflicts, licenses),
            issues=issues,
            summary=summary,
        )
        logger.debug(
            "Analysis complete: %d licenses, %d pairs, %d conflicts, overall=%s",
            len(licenses),
            len(matrix),
            len(conflicts),
            report.overall_compatibility.value,
        )
        return report

    def _project_info(self, packages: Sequence[PackageIdentity]) -> ProjectInfo:
        """Describe the project by its first package."""
        if not packages:
            return ProjectInfo()
        root = packages[0]
        return ProjectInfo(
            name=root.name or "Unknown Project",
            version=root.version or None,
            license=self.catalog.resolve(root.license) if root.license else None,
        )

    def _collect_licenses(
        self, analyses: Sequence[PackageLicenseAnalysis]
    ) -> tuple[list[License], list[LicenseIssue], int, list[PackageLicenses]]:
        """Collect the unique licenses in discovery order.

        Returns:
            Tuple of unique licenses, issues raised while resolving, the
            number of packages without any license, and the canonical
            licenses of each package.
        """
        unique: dict[str, License] = {}
        issues: list[LicenseIssue] = []
        unknown_packages = 0
        package_licenses: list[PackageLicenses] = []

        for analysis in analyses:
            package = analysis.package
            raw_ids = [raw.strip() for raw in analysis.licenses if raw.strip()]
            record = PackageLicenses(
                name=package.name,
                version=package.version,
                publisher=package.publisher,
                publisher_domain=package.publisher_domain,
            )
            package_licenses.append(record)
            if not raw_ids:
                unknown_packages += 1
                issues.append(
                    LicenseIssue(
                        type="missing_license",
                        severity="warning",
                        package_name=package.name,
                        package_version=package.version,
                        description=f"No license detected for {package.display_name}",
                    )
                )
                continue

            for raw in raw_ids:
                lic = self.catalog.resolve(raw)
                if lic is None:
                    lic = License.unrecognized(raw)
                    if raw not in unique:
                        logger.warning(
                            "Unrecognized license '%s' in %s", raw, package.display_name
                        )
                    issues.append(
                        LicenseIssue(
                            type="unrecognized_license",
                            severity="warning",
                            package_name=package.name,
                            package_version=package.version,
                            license=raw,
                            description=(
                                f"License '{raw}' of {package.display_name} is not "
                                "in the license catalog; treated as unknown"
                            ),
                        )
                    )
                elif raw.lower() in (dep.lower() for dep in lic.deprecated_ids):
                    issues.append(
                        LicenseIssue(
                            type="deprecated_license",
                            severity="warning",
                            package_name=package.name,
                            package_version=package.version,
                            license=raw,
                            description=(
                                f"License identifier '{raw}' is deprecated; "
                                f"use '{lic.identifier}'"
                            ),
                        )
                    )
                unique.setdefault(lic.identifier, lic)
                if lic.identifier not in record.licenses:
                    record.licenses.append(lic.identifier)

        return list(unique.values()), issues, unknown_packages, package_licenses

    def _build_matrix(self, licenses: list[License]) -> list[MatrixEntry]:
        """Build one entry per unordered pair of distinct licenses.

        Entries are ordered by the sorted pair key, so the result does not
        depend on input order or on thread completion order.
        """
        by_id = {lic.identifier: lic for lic in licenses}
        keys = sorted(
            {pair_key(a.identifier, b.identifier) for a, b in combinations(licenses, 2)}
        )

        def evaluate(key: PairKey) -> MatrixEntry:
            verdict = self.resolver.compatibility(by_id[key[0]], by_id[key[1]])
            return MatrixEntry(
                license_a=key[0],
                license_b=key[1],
                verdict=verdict,
                risk_level=self.assessor.risk_level(verdict),
            )

        if self.max_workers and self.max_workers > 1 and len(keys) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return list(executor.map(evaluate, keys))
        return [evaluate(key) for key in keys]

    def _identify_conflicts(
        self, matrix: list[MatrixEntry], by_id: dict[str, License]
    ) -> list[ConflictRecord]:
        conflicts: list[ConflictRecord] = []
        for entry in matrix:
            if entry.verdict != CompatibilityVerdict.INCOMPATIBLE:
                continue
            lic_a = by_id[entry.license_a]
            lic_b = by_id[entry.license_b]
            conflicts.append(
                ConflictRecord(
                    licenses=(lic_a, lic_b),
                    description=f"{lic_a.name} and {lic_b.name} are incompatible",
                    severity="critical",
                    resolution=CONFLICT_RESOLUTION,
                )
            )
        return conflicts

    def _aggregate_obligations(
        self, licenses: list[License]
    ) -> list[LicenseObligation]:
        """Union of obligations, deduplicated by (kind, scope), first wins."""
        obligations: dict[tuple[str, str], LicenseObligation] = {}
        for lic in licenses:
            for kind in lic.obligations:
                obligation = LicenseObligation.for_kind(kind)
                obligations.setdefault((kind.value, obligation.scope), obligation)
        return list(obligations.values())

    def _recommendations(
        self, conflicts: list[ConflictRecord], licenses: list[License]
    ) -> list[Recommendation]:
        recommendations: list[Recommendation] = []
        for conflict in conflicts:
            if conflict.severity != "critical":
                continue
            names = ", ".join(lic.name for lic in conflict.licenses)
            recommendations.append(
                Recommendation(
                    type="remove-dependency",
                    priority="critical",
                    description=(
                        "Remove or replace dependencies with incompatible "
                        f"licenses: {names}"
                    ),
                    affected_licenses=[lic.identifier for lic in conflict.licenses],
                )
            )

        gpl = [lic.identifier for lic in licenses if "GPL" in lic.identifier]
        has_permissive = any(
            lic.category == LicenseCategory.PERMISSIVE for lic in licenses
        )
        if gpl and has_permissive:
            recommendations.append(
                Recommendation(
                    type="seek-legal-review",
                    priority="medium",
                    description=(
                        "Project mixes GPL and permissive licenses. Consider legal "
                        "review for compliance strategy."
                    ),
                    affected_licenses=gpl,
                )
            )
        return recommendations
