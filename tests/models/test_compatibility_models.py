"""Tests for compatibility and risk report models."""

import pytest
from pydantic import ValidationError

from license_risk.models.compatibility import (
    CompatibilityVerdict,
    ConflictRecord,
    LegalRiskLevel,
    MatrixEntry,
    PairwiseResult,
    ProjectCompatibilityReport,
    ReportSummary,
)
from license_risk.models.license import License, LicenseCategory
from license_risk.models.risk import LegalReview, LegalRiskReport, RiskFactor

MIT = License(identifier="MIT", name="MIT License", category=LicenseCategory.PERMISSIVE)
APACHE = License(
    identifier="Apache-2.0",
    name="Apache License 2.0",
    category=LicenseCategory.PERMISSIVE,
)


class TestCompatibilityVerdict:
    """Tests for verdict ordering."""

    def test_worst_of_empty_is_compatible(self) -> None:
        """Test that no verdicts aggregate to compatible."""
        assert CompatibilityVerdict.worst([]) == CompatibilityVerdict.COMPATIBLE

    def test_incompatible_dominates(self) -> None:
        """Test that incompatible beats every other verdict."""
        verdicts = [
            CompatibilityVerdict.COMPATIBLE,
            CompatibilityVerdict.INCOMPATIBLE,
            CompatibilityVerdict.REQUIRES_REVIEW,
            CompatibilityVerdict.UNKNOWN,
        ]
        assert CompatibilityVerdict.worst(verdicts) == CompatibilityVerdict.INCOMPATIBLE

    def test_review_worse_than_unknown(self) -> None:
        """Test the review and unknown ordering."""
        verdicts = [CompatibilityVerdict.UNKNOWN, CompatibilityVerdict.REQUIRES_REVIEW]
        assert (
            CompatibilityVerdict.worst(verdicts) == CompatibilityVerdict.REQUIRES_REVIEW
        )

    def test_unknown_worse_than_conditional(self) -> None:
        """Test the unknown and conditional ordering."""
        verdicts = [
            CompatibilityVerdict.CONDITIONALLY_COMPATIBLE,
            CompatibilityVerdict.UNKNOWN,
        ]
        assert CompatibilityVerdict.worst(verdicts) == CompatibilityVerdict.UNKNOWN

    def test_ranks_are_strictly_ordered(self) -> None:
        """Test that every verdict has a distinct rank."""
        ranks = [verdict.rank for verdict in CompatibilityVerdict]
        assert len(set(ranks)) == len(ranks)


class TestLegalRiskLevel:
    """Tests for risk level ordering."""

    def test_highest_of_empty(self) -> None:
        """Test that no levels aggregate to very-low."""
        assert LegalRiskLevel.highest([]) == LegalRiskLevel.VERY_LOW

    def test_highest(self) -> None:
        """Test picking the highest level."""
        levels = [LegalRiskLevel.LOW, LegalRiskLevel.CRITICAL, LegalRiskLevel.HIGH]
        assert LegalRiskLevel.highest(levels) == LegalRiskLevel.CRITICAL

    def test_rank_order(self) -> None:
        """Test ranks follow declaration order."""
        assert LegalRiskLevel.VERY_LOW.rank < LegalRiskLevel.MEDIUM.rank
        assert LegalRiskLevel.VERY_HIGH.rank < LegalRiskLevel.CRITICAL.rank


class TestPairwiseResult:
    """Tests for PairwiseResult model."""

    def test_lists_default_to_empty(self) -> None:
        """Test that detail lists are always present."""
        result = PairwiseResult(
            license_a=MIT,
            license_b=APACHE,
            verdict=CompatibilityVerdict.COMPATIBLE,
            risk_level=LegalRiskLevel.VERY_LOW,
            explanation="ok",
        )
        assert result.conditions == []
        assert result.warnings == []
        assert result.recommendations == []
        assert result.compatible is True

    def test_conditional_is_not_compatible(self) -> None:
        """Test the computed compatible flag for conditional verdicts."""
        result = PairwiseResult(
            license_a=MIT,
            license_b=APACHE,
            verdict=CompatibilityVerdict.CONDITIONALLY_COMPATIBLE,
            risk_level=LegalRiskLevel.MEDIUM,
            explanation="conditions",
        )
        assert result.compatible is False


class TestProjectCompatibilityReport:
    """Tests for ProjectCompatibilityReport model."""

    def test_empty_report(self) -> None:
        """Test the defaults of an empty report."""
        report = ProjectCompatibilityReport()
        assert report.overall_compatibility == CompatibilityVerdict.COMPATIBLE
        assert report.highest_risk_level == LegalRiskLevel.VERY_LOW
        assert report.has_conflicts is False
        assert report.summary.risk_score == 0

    def test_get_entry_either_order(self) -> None:
        """Test matrix lookup is symmetric."""
        entry = MatrixEntry(
            license_a="Apache-2.0",
            license_b="MIT",
            verdict=CompatibilityVerdict.COMPATIBLE,
            risk_level=LegalRiskLevel.VERY_LOW,
        )
        report = ProjectCompatibilityReport(matrix=[entry])

        assert report.get_entry("MIT", "Apache-2.0") == entry
        assert report.get_entry("Apache-2.0", "MIT") == entry
        assert report.get_entry("MIT", "GPL-3.0-only") is None

    def test_has_conflicts(self) -> None:
        """Test has_conflicts with a conflict record."""
        conflict = ConflictRecord(licenses=(MIT, APACHE), description="conflict")
        report = ProjectCompatibilityReport(conflicts=[conflict])
        assert report.has_conflicts is True
        assert conflict.severity == "critical"

    def test_summary_score_bounded(self) -> None:
        """Test that the summary rejects scores above 100."""
        with pytest.raises(ValidationError):
            ReportSummary(risk_score=101)
        with pytest.raises(ValidationError):
            ReportSummary(risk_score=-1)


class TestLegalRiskReport:
    """Tests for the legal risk models."""

    def test_defaults(self) -> None:
        """Test an empty legal risk report."""
        report = LegalRiskReport()
        assert report.overall_risk == LegalRiskLevel.VERY_LOW
        assert report.legal_review == LegalReview()
        assert report.patent_risks == []

    def test_invalid_factor_category(self) -> None:
        """Test that risk factor categories are a closed set."""
        with pytest.raises(ValidationError):
            RiskFactor(
                category="weather",  # type: ignore[arg-type]
                description="x",
                impact="low",
                likelihood="low",
                score=1,
            )

    def test_invalid_urgency(self) -> None:
        """Test that review urgency is a closed set."""
        with pytest.raises(ValidationError):
            LegalReview(urgency="asap")  # type: ignore[arg-type]
