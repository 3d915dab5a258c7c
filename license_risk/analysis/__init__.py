"""License compatibility and legal risk analysis."""

from license_risk.analysis.compatibility import (
    RULES,
    CompatibilityResolver,
    pair_key,
)
from license_risk.analysis.filtering import FilterResult, filter_ignored_packages
from license_risk.analysis.overrides import apply_license_overrides
from license_risk.analysis.project import (
    ProjectCompatibilityAnalyzer,
    calculate_risk_score,
)
from license_risk.analysis.risk import LegalRiskAssessor

__all__ = [
    "RULES",
    "CompatibilityResolver",
    "FilterResult",
    "LegalRiskAssessor",
    "ProjectCompatibilityAnalyzer",
    "apply_license_overrides",
    "calculate_risk_score",
    "filter_ignored_packages",
    "pair_key",
]
