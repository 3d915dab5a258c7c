"""License and obligation models for license-risk.

A License is an immutable catalog value. Obligations are a closed set of
kinds; each kind has exactly one canonical detail record (description,
severity and scope) used when aggregating project obligations.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

ObligationSeverity = Literal["low", "medium", "high", "critical"]
ObligationScope = Literal["file", "component", "project", "distribution"]


class LicenseCategory(str, Enum):
    """Categories of licenses by legal characteristics."""

    PERMISSIVE = "permissive"
    COPYLEFT = "copyleft"
    WEAK_COPYLEFT = "weak-copyleft"
    PROPRIETARY = "proprietary"
    PUBLIC_DOMAIN = "public-domain"
    CUSTOM = "custom"
    UNKNOWN = "unknown"


class ObligationKind(str, Enum):
    """Obligations a license imposes on its users."""

    ATTRIBUTION = "attribution"
    COPYLEFT = "copyleft"
    DISCLOSE_SOURCE = "disclose-source"
    SAME_LICENSE = "same-license"
    PATENT_GRANT = "patent-grant"
    NO_COMMERCIAL_USE = "no-commercial-use"
    SHARE_ALIKE = "share-alike"
    NOTICE_PRESERVATION = "notice-preservation"


class License(BaseModel):
    """A known software license.

    Placeholder licenses built for identifiers the catalog does not know
    have ``resolved=False`` and category ``unknown``.
    """

    model_config = {"extra": "forbid", "frozen": True}

    identifier: str = Field(description="Canonical SPDX-style identifier")
    name: str = Field(description="Human-readable display name")
    category: LicenseCategory = Field(description="License category")
    obligations: tuple[ObligationKind, ...] = Field(
        default=(),
        description="Ordered obligation kinds imposed by the license",
    )
    allows_commercial_use: bool = Field(default=True)
    allows_modification: bool = Field(default=True)
    allows_distribution: bool = Field(default=True)
    requires_source_disclosure: bool = Field(default=False)
    osi_approved: bool = Field(default=False)
    fsf_approved: bool = Field(default=False)
    url: Optional[str] = Field(default=None, description="Canonical license URL")
    deprecated_ids: tuple[str, ...] = Field(
        default=(),
        description="Deprecated identifiers that resolve to this license",
    )
    resolved: bool = Field(
        default=True,
        description="False for placeholders of unrecognized identifiers",
    )

    @classmethod
    def unrecognized(cls, identifier: str) -> License:
        """Build a placeholder for an identifier missing from the catalog.

        Args:
            identifier: The raw identifier reported by license detection.

        Returns:
            License with category ``unknown`` and no obligations.
        """
        return cls(
            identifier=identifier,
            name=identifier,
            category=LicenseCategory.UNKNOWN,
            allows_commercial_use=False,
            allows_modification=False,
            allows_distribution=False,
            resolved=False,
        )

    def has_obligation(self, kind: ObligationKind) -> bool:
        """Check whether the license imposes an obligation kind."""
        return kind in self.obligations


class LicenseObligation(BaseModel):
    """A concrete obligation with its severity and scope."""

    model_config = {"extra": "forbid", "frozen": True}

    kind: ObligationKind
    description: str
    severity: ObligationSeverity
    scope: ObligationScope

    @classmethod
    def for_kind(cls, kind: ObligationKind) -> LicenseObligation:
        """Return the canonical detail record for an obligation kind."""
        description, severity, scope = OBLIGATION_DETAILS[kind]
        return cls(kind=kind, description=description, severity=severity, scope=scope)


OBLIGATION_DETAILS: dict[
    ObligationKind, tuple[str, ObligationSeverity, ObligationScope]
] = {
    ObligationKind.ATTRIBUTION: (
        "Must include attribution to original authors",
        "medium",
        "distribution",
    ),
    ObligationKind.COPYLEFT: (
        "Must release derivative works under same license",
        "high",
        "project",
    ),
    ObligationKind.DISCLOSE_SOURCE: (
        "Must make source code available",
        "high",
        "distribution",
    ),
    ObligationKind.SAME_LICENSE: (
        "Must use same license for derivative works",
        "high",
        "project",
    ),
    ObligationKind.PATENT_GRANT: (
        "Includes patent grant and termination clauses",
        "medium",
        "component",
    ),
    ObligationKind.NO_COMMERCIAL_USE: (
        "Prohibits commercial use",
        "critical",
        "project",
    ),
    ObligationKind.SHARE_ALIKE: (
        "Must share adaptations under same license",
        "high",
        "project",
    ),
    ObligationKind.NOTICE_PRESERVATION: (
        "Must preserve copyright and license notices",
        "medium",
        "file",
    ),
}
