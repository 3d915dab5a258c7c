"""Configuration Pydantic models for license-risk."""
from __future__ import annotations

from fnmatch import fnmatchcase
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from license_risk.constants import (
    DEFAULT_INCOMPATIBLE_WEIGHT,
    DEFAULT_UNKNOWN_LICENSE_WEIGHT,
)


class LicenseOverride(BaseModel):
    """Manual license override for a package.

    Used when license detection fails or needs correction.
    """

    model_config = {"extra": "forbid"}

    license: str = Field(min_length=1, description="SPDX license identifier to use")
    reason: str = Field(min_length=1, description="Reason for the override")


class RiskWeights(BaseModel):
    """Weights of the two terms of the project risk score."""

    model_config = {"extra": "forbid"}

    incompatible_pairs: float = Field(
        default=DEFAULT_INCOMPATIBLE_WEIGHT,
        ge=0,
        description="Weight of the incompatible-pair fraction.",
    )
    unknown_licenses: float = Field(
        default=DEFAULT_UNKNOWN_LICENSE_WEIGHT,
        ge=0,
        description="Weight of the fraction of packages without a license.",
    )


class EngineConfig(BaseModel):
    """Configuration for license-risk.

    All fields are optional so a partial file is valid.
    """

    model_config = {"extra": "forbid"}

    risk_weights: RiskWeights = Field(
        default_factory=RiskWeights,
        description="Risk score weights.",
    )
    ignored_packages: Optional[List[str]] = Field(
        default=None,
        description="Package names or shell-style patterns to leave out.",
    )
    overrides: Optional[Dict[str, LicenseOverride]] = Field(
        default=None,
        description="Manual license overrides by package name.",
    )
    max_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Threads used to build the compatibility matrix.",
    )

    @model_validator(mode="after")
    def _overrides_not_ignored(self) -> EngineConfig:
        # An ignored package never reaches the override step
        patterns = self.ignored_packages or []
        clashes = sorted(
            name
            for name in self.overrides or {}
            if any(fnmatchcase(name, pattern) for pattern in patterns)
        )
        if clashes:
            raise ValueError(
                "packages are both ignored and overridden: " + ", ".join(clashes)
            )
        return self
