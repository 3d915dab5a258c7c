"""Policy-related Pydantic models for license-risk."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

PolicySeverity = Literal["low", "medium", "high", "critical"]


class LicensePolicy(BaseModel):
    """Organization policy applied to the analyzed packages.

    Keys are camelCase in policy files; snake_case names are accepted too.
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    disallowed_licenses: list[str] = Field(
        default_factory=list,
        alias="disallowedLicenses",
        description="License identifiers that may not appear in the project",
    )
    max_severity: PolicySeverity = Field(
        default="critical",
        alias="maxSeverity",
        description="Highest vulnerability severity tolerated",
    )
    fail_on_policy_violation: bool = Field(
        default=False,
        alias="failOnPolicyViolation",
        description="Exit with an error status when violations are found",
    )
    require_known_publisher: bool = Field(
        default=False,
        alias="requireKnownPublisher",
        description="Flag packages whose publisher is not allow-listed",
    )
    allowed_publisher_names: list[str] = Field(
        default_factory=list,
        alias="allowedPublisherNames",
    )
    allowed_publisher_domains: list[str] = Field(
        default_factory=list,
        alias="allowedPublisherDomains",
    )


class PolicyViolation(BaseModel):
    """A policy violation for a package."""

    model_config = {"extra": "forbid"}

    package_name: str = Field(description="Name of the package with violation")
    package_version: str = Field(description="Version of the package")
    detected_license: Optional[str] = Field(
        default=None,
        description="The offending license (None for publisher violations)",
    )
    reason: str = Field(description="Why this is a violation")
