"""Pydantic data models for license-risk."""

from license_risk.models.compatibility import (
    CompatibilityVerdict,
    ConflictRecord,
    LegalRiskLevel,
    LicenseIssue,
    MatrixEntry,
    PackageLicenses,
    PairwiseResult,
    ProjectCompatibilityReport,
    ProjectInfo,
    Recommendation,
    ReportSummary,
)
from license_risk.models.config import EngineConfig, LicenseOverride, RiskWeights
from license_risk.models.license import (
    License,
    LicenseCategory,
    LicenseObligation,
    ObligationKind,
)
from license_risk.models.package import PackageIdentity, PackageLicenseAnalysis
from license_risk.models.policy import LicensePolicy, PolicyViolation
from license_risk.models.risk import (
    ComplianceRequirement,
    LegalReview,
    LegalRiskReport,
    PatentRisk,
    RiskFactor,
)

__all__ = [
    "CompatibilityVerdict",
    "ComplianceRequirement",
    "ConflictRecord",
    "EngineConfig",
    "LegalReview",
    "LegalRiskLevel",
    "LegalRiskReport",
    "License",
    "LicenseCategory",
    "LicenseIssue",
    "LicenseObligation",
    "LicenseOverride",
    "LicensePolicy",
    "MatrixEntry",
    "ObligationKind",
    "PackageIdentity",
    "PackageLicenses",
    "PackageLicenseAnalysis",
    "PairwiseResult",
    "PatentRisk",
    "PolicyViolation",
    "ProjectCompatibilityReport",
    "ProjectInfo",
    "Recommendation",
    "ReportSummary",
    "RiskFactor",
    "RiskWeights",
]
