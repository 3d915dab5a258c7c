"""Legal risk report models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from license_risk.models.compatibility import LegalRiskLevel

RiskCategory = Literal[
    "license-compatibility", "patent-risk", "compliance", "litigation", "governance"
]
Impact = Literal["low", "medium", "high", "critical"]
Likelihood = Literal["very-low", "low", "medium", "high", "very-high"]
Urgency = Literal["low", "medium", "high", "urgent"]


class RiskFactor(BaseModel):
    """A weighted contributor to the project's legal risk."""

    model_config = {"extra": "forbid"}

    category: RiskCategory
    description: str
    impact: Impact
    likelihood: Likelihood
    score: int = Field(ge=0, description="Per-factor risk score")
    mitigation: Optional[str] = None


class LegalReview(BaseModel):
    """Whether, how urgently, and on what the project needs legal review."""

    model_config = {"extra": "forbid"}

    required: bool = False
    urgency: Urgency = "low"
    scope: list[str] = Field(default_factory=list)
    estimated_hours: int = Field(default=0, ge=0)


class PatentRisk(BaseModel):
    """A license whose patent clauses may affect patent strategy."""

    model_config = {"extra": "forbid"}

    license: str
    description: str = (
        "License includes patent provisions that may affect patent strategy"
    )
    risk_level: LegalRiskLevel = LegalRiskLevel.MEDIUM


class ComplianceRequirement(BaseModel):
    """A compliance task implied by the project's obligations."""

    model_config = {"extra": "forbid"}

    requirement: str
    responsible: str


class LegalRiskReport(BaseModel):
    """Project-level legal risk assessment."""

    model_config = {"extra": "forbid"}

    overall_risk: LegalRiskLevel = LegalRiskLevel.VERY_LOW
    risk_score: int = Field(default=0, ge=0, le=100)
    risk_factors: list[RiskFactor] = Field(default_factory=list)
    legal_review: LegalReview = Field(default_factory=LegalReview)
    patent_risks: list[PatentRisk] = Field(default_factory=list)
    compliance_requirements: list[ComplianceRequirement] = Field(
        default_factory=list
    )
