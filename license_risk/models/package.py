"""Per-package license detection input models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PackageIdentity(BaseModel):
    """Identity of an analyzed package."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Package name")
    version: str = Field(default="", description="Package version")
    publisher: Optional[str] = Field(
        default=None, description="Publisher or maintainer name, if known"
    )
    publisher_domain: Optional[str] = Field(
        default=None, description="Publisher domain, if known"
    )
    license: Optional[str] = Field(
        default=None, description="License the package itself declares, if any"
    )

    @property
    def display_name(self) -> str:
        """Package name with version, e.g. ``requests@2.31.0``."""
        return f"{self.name}@{self.version}" if self.version else self.name


class PackageLicenseAnalysis(BaseModel):
    """License detection output for a single package.

    Only the license identifiers feed compatibility logic. The confidence
    score is a detection-quality signal carried through for reporting.
    """

    model_config = {"extra": "forbid"}

    package: PackageIdentity = Field(description="The analyzed package")
    licenses: list[str] = Field(
        default_factory=list,
        description="Detected license identifiers (possibly empty)",
    )
    confidence: Optional[float] = Field(
        default=None, ge=0, le=1, description="Detection confidence (0-1)"
    )
    original_licenses: Optional[list[str]] = Field(
        default=None,
        description="Detected licenses before a configured override was applied",
    )
    override_reason: Optional[str] = Field(
        default=None, description="Reason for a configured license override"
    )

    @property
    def has_licenses(self) -> bool:
        """True if detection reported at least one non-blank identifier."""
        return any(lic.strip() for lic in self.licenses)

    @property
    def is_overridden(self) -> bool:
        """True if a configured override replaced the detected licenses."""
        return self.override_reason is not None
