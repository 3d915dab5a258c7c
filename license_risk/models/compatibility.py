"""Compatibility models for license-risk.

Includes the verdict and risk level orderings used for worst-wins
aggregation, the pairwise result, and the project compatibility report.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Literal, Optional

from pydantic import BaseModel, Field, computed_field

from license_risk.models.license import License, LicenseObligation

Severity = Literal["warning", "error", "critical"]
Priority = Literal["low", "medium", "high", "critical"]
RecommendationType = Literal[
    "license-change", "dual-license", "remove-dependency", "seek-legal-review"
]
IssueType = Literal["missing_license", "unrecognized_license", "deprecated_license"]


class CompatibilityVerdict(str, Enum):
    """Whether two licenses can be combined in one distributed work."""

    COMPATIBLE = "compatible"
    CONDITIONALLY_COMPATIBLE = "conditionally-compatible"
    INCOMPATIBLE = "incompatible"
    REQUIRES_REVIEW = "requires-review"
    UNKNOWN = "unknown"

    @property
    def rank(self) -> int:
        """Aggregation rank; higher is worse."""
        return _VERDICT_RANK[self]

    @classmethod
    def worst(cls, verdicts: Iterable[CompatibilityVerdict]) -> CompatibilityVerdict:
        """Return the worst verdict, or ``compatible`` for no verdicts."""
        return max(verdicts, key=lambda v: v.rank, default=cls.COMPATIBLE)


_VERDICT_RANK = {
    CompatibilityVerdict.COMPATIBLE: 0,
    CompatibilityVerdict.CONDITIONALLY_COMPATIBLE: 1,
    CompatibilityVerdict.UNKNOWN: 2,
    CompatibilityVerdict.REQUIRES_REVIEW: 3,
    CompatibilityVerdict.INCOMPATIBLE: 4,
}


class LegalRiskLevel(str, Enum):
    """Ordinal exposure to legal or compliance consequences."""

    VERY_LOW = "very-low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very-high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        """Position in the ordering; higher is riskier."""
        return _RISK_ORDER.index(self)

    @classmethod
    def highest(cls, levels: Iterable[LegalRiskLevel]) -> LegalRiskLevel:
        """Return the highest level, or ``very-low`` for no levels."""
        return max(levels, key=lambda level: level.rank, default=cls.VERY_LOW)


_RISK_ORDER = list(LegalRiskLevel)


class PairwiseResult(BaseModel):
    """Full compatibility analysis of two licenses.

    ``conditions``, ``warnings`` and ``recommendations`` are always present;
    an empty list means none apply.
    """

    model_config = {"extra": "forbid"}

    license_a: License
    license_b: License
    verdict: CompatibilityVerdict
    risk_level: LegalRiskLevel
    explanation: str
    conditions: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def compatible(self) -> bool:
        """True if the licenses are fully compatible."""
        return self.verdict == CompatibilityVerdict.COMPATIBLE


class MatrixEntry(BaseModel):
    """One cell of the pairwise matrix; identifiers are lexically sorted."""

    model_config = {"extra": "forbid", "frozen": True}

    license_a: str
    license_b: str
    verdict: CompatibilityVerdict
    risk_level: LegalRiskLevel


class ConflictRecord(BaseModel):
    """An incompatible license pair that needs resolution."""

    model_config = {"extra": "forbid"}

    licenses: tuple[License, License]
    description: str
    severity: Severity = "critical"
    resolution: Optional[str] = None


class Recommendation(BaseModel):
    """An actionable recommendation for the project."""

    model_config = {"extra": "forbid"}

    type: RecommendationType
    priority: Priority
    description: str
    affected_licenses: list[str] = Field(default_factory=list)


class LicenseIssue(BaseModel):
    """A degradation recorded during analysis instead of being raised."""

    model_config = {"extra": "forbid"}

    type: IssueType
    severity: Severity
    package_name: str
    package_version: str = ""
    license: Optional[str] = None
    description: str


class ReportSummary(BaseModel):
    """Summary statistics for a compatibility report."""

    model_config = {"extra": "forbid"}

    total_packages: int = Field(default=0, ge=0)
    unique_licenses: int = Field(default=0, ge=0)
    unknown_license_packages: int = Field(default=0, ge=0)
    compatible_packages: int = Field(default=0, ge=0)
    incompatible_pairs: int = Field(default=0, ge=0)
    risk_score: int = Field(default=0, ge=0, le=100)


class PackageLicenses(BaseModel):
    """Canonical license identifiers of one analyzed package.

    Carries enough of the package identity for policy checks to run on a
    report without the original detection input.
    """

    model_config = {"extra": "forbid"}

    name: str
    version: str = ""
    licenses: list[str] = Field(
        default_factory=list,
        description="Canonical identifiers; unrecognized ids are kept as given",
    )
    publisher: Optional[str] = None
    publisher_domain: Optional[str] = None


class ProjectInfo(BaseModel):
    """The project being analyzed, taken from its first package."""

    model_config = {"extra": "forbid"}

    name: str = "Unknown Project"
    version: Optional[str] = None
    license: Optional[License] = Field(
        default=None, description="Declared project license, if it resolves"
    )


class ProjectCompatibilityReport(BaseModel):
    """Project-wide license compatibility report."""

    model_config = {"extra": "forbid"}

    project: Optional[ProjectInfo] = None
    packages: list[PackageLicenses] = Field(default_factory=list)
    licenses: list[License] = Field(default_factory=list)
    matrix: list[MatrixEntry] = Field(default_factory=list)
    overall_compatibility: CompatibilityVerdict = CompatibilityVerdict.COMPATIBLE
    highest_risk_level: LegalRiskLevel = LegalRiskLevel.VERY_LOW
    conflicts: list[ConflictRecord] = Field(default_factory=list)
    obligations: list[LicenseObligation] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    issues: list[LicenseIssue] = Field(default_factory=list)
    summary: ReportSummary = Field(default_factory=ReportSummary)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_conflicts(self) -> bool:
        """True if any license pair is incompatible."""
        return len(self.conflicts) > 0

    def get_entry(self, license_a: str, license_b: str) -> Optional[MatrixEntry]:
        """Look up the matrix entry for a pair in either order.

        Args:
            license_a: First license identifier.
            license_b: Second license identifier.

        Returns:
            The matching MatrixEntry, or None if the pair is not in the matrix.
        """
        first, second = sorted((license_a, license_b))
        for entry in self.matrix:
            if entry.license_a == first and entry.license_b == second:
                return entry
        return None
