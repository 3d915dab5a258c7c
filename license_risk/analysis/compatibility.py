"""Pairwise license compatibility for license-risk.

Explicit rules cover the pairs a category fallback would get wrong (patent
clause and version conflicts, for example). Rules are keyed by the lexically
sorted identifier pair, so every lookup is symmetric.
"""

from __future__ import annotations

from typing import Optional, Union

from license_risk.analysis.risk import LegalRiskAssessor
from license_risk.catalog import LicenseCatalog, default_catalog
from license_risk.models.compatibility import CompatibilityVerdict, PairwiseResult
from license_risk.models.license import License, LicenseCategory

LicenseRef = Union[License, str]
PairKey = tuple[str, str]

_C = CompatibilityVerdict.COMPATIBLE
_CC = CompatibilityVerdict.CONDITIONALLY_COMPATIBLE
_I = CompatibilityVerdict.INCOMPATIBLE
_R = CompatibilityVerdict.REQUIRES_REVIEW


def pair_key(license_a: str, license_b: str) -> PairKey:
    """Return the canonical, lexically sorted key for a license pair."""
    first, second = sorted((license_a, license_b))
    return (first, second)


def _rules(
    *entries: tuple[str, str, CompatibilityVerdict],
) -> dict[PairKey, CompatibilityVerdict]:
    rules: dict[PairKey, CompatibilityVerdict] = {}
    for license_a, license_b, verdict in entries:
        rules[pair_key(license_a, license_b)] = verdict
    return rules


RULES: dict[PairKey, CompatibilityVerdict] = _rules(
    # MIT
    ("MIT", "Apache-2.0", _C),
    ("MIT", "BSD-3-Clause", _C),
    ("MIT", "BSD-2-Clause", _C),
    ("MIT", "ISC", _C),
    ("MIT", "GPL-3.0-only", _C),
    ("MIT", "GPL-2.0-only", _C),
    ("MIT", "LGPL-3.0-only", _C),
    ("MIT", "LGPL-2.1-only", _C),
    ("MIT", "MPL-2.0", _C),
    ("MIT", "EPL-2.0", _C),
    ("MIT", "AGPL-3.0-only", _C),
    ("MIT", "CC0-1.0", _C),
    ("MIT", "UNLICENSED", _I),
    ("MIT", "CC-BY-NC-4.0", _I),
    # Apache-2.0
    ("Apache-2.0", "BSD-3-Clause", _C),
    ("Apache-2.0", "BSD-2-Clause", _C),
    ("Apache-2.0", "GPL-3.0-only", _C),
    ("Apache-2.0", "GPL-2.0-only", _I),  # patent clauses
    ("Apache-2.0", "LGPL-3.0-only", _C),
    ("Apache-2.0", "LGPL-2.1-only", _CC),
    ("Apache-2.0", "MPL-2.0", _C),
    ("Apache-2.0", "EPL-2.0", _CC),
    ("Apache-2.0", "AGPL-3.0-only", _C),
    ("Apache-2.0", "UNLICENSED", _I),
    # GPL-3.0-only
    ("GPL-3.0-only", "BSD-3-Clause", _C),
    ("GPL-3.0-only", "BSD-2-Clause", _C),
    ("GPL-3.0-only", "GPL-2.0-only", _I),  # version conflict
    ("GPL-3.0-only", "LGPL-3.0-only", _C),
    ("GPL-3.0-only", "LGPL-2.1-only", _C),
    ("GPL-3.0-only", "MPL-2.0", _C),
    ("GPL-3.0-only", "EPL-2.0", _I),
    ("GPL-3.0-only", "AGPL-3.0-only", _C),
    ("GPL-3.0-only", "UNLICENSED", _I),
    ("GPL-3.0-only", "CC-BY-NC-4.0", _I),
    # GPL-2.0-only
    ("GPL-2.0-only", "BSD-3-Clause", _C),
    ("GPL-2.0-only", "BSD-2-Clause", _C),
    ("GPL-2.0-only", "LGPL-2.1-only", _C),
    ("GPL-2.0-only", "LGPL-3.0-only", _I),
    ("GPL-2.0-only", "MPL-2.0", _I),
    ("GPL-2.0-only", "EPL-2.0", _I),
    ("GPL-2.0-only", "UNLICENSED", _I),
    # LGPL-3.0-only
    ("LGPL-3.0-only", "BSD-3-Clause", _C),
    ("LGPL-3.0-only", "LGPL-2.1-only", _C),
    ("LGPL-3.0-only", "MPL-2.0", _C),
    ("LGPL-3.0-only", "UNLICENSED", _I),
    # MPL-2.0
    ("MPL-2.0", "BSD-3-Clause", _C),
    ("MPL-2.0", "EPL-2.0", _CC),
    ("MPL-2.0", "UNLICENSED", _I),
    # UNLICENSED
    ("UNLICENSED", "UNLICENSED", _R),
)


def _category_compatibility(
    category_a: LicenseCategory, category_b: LicenseCategory
) -> CompatibilityVerdict:
    """Infer compatibility from license categories.

    Total over every category pair. Directionality (permissive code absorbed
    into a copyleft work) is not modeled.

    Args:
        category_a: Category of the first license.
        category_b: Category of the second license.

    Returns:
        The inferred verdict.
    """
    categories = {category_a, category_b}

    if LicenseCategory.PROPRIETARY in categories:
        if categories == {LicenseCategory.PROPRIETARY}:
            return CompatibilityVerdict.REQUIRES_REVIEW
        return CompatibilityVerdict.INCOMPATIBLE

    if LicenseCategory.PUBLIC_DOMAIN in categories:
        return CompatibilityVerdict.COMPATIBLE

    if LicenseCategory.PERMISSIVE in categories:
        if categories <= {
            LicenseCategory.PERMISSIVE,
            LicenseCategory.WEAK_COPYLEFT,
            LicenseCategory.COPYLEFT,
        }:
            return CompatibilityVerdict.COMPATIBLE
        return CompatibilityVerdict.REQUIRES_REVIEW

    if categories == {LicenseCategory.COPYLEFT}:
        return CompatibilityVerdict.REQUIRES_REVIEW

    if categories == {LicenseCategory.COPYLEFT, LicenseCategory.WEAK_COPYLEFT}:
        return CompatibilityVerdict.CONDITIONALLY_COMPATIBLE

    return CompatibilityVerdict.REQUIRES_REVIEW


class CompatibilityResolver:
    """Decides whether two licenses can be combined in one distributed work."""

    def __init__(
        self,
        catalog: Optional[LicenseCatalog] = None,
        assessor: Optional[LegalRiskAssessor] = None,
    ) -> None:
        self.catalog = catalog or default_catalog()
        self.assessor = assessor or LegalRiskAssessor()

    def to_license(self, ref: LicenseRef) -> License:
        """Resolve an identifier to a License, or a placeholder if unknown."""
        if isinstance(ref, License):
            return ref
        return self.catalog.resolve(ref) or License.unrecognized(ref.strip())

    def compatibility(
        self, license_a: LicenseRef, license_b: LicenseRef
    ) -> CompatibilityVerdict:
        """Return the compatibility verdict for two licenses.

        Lookup order: explicit pair rule, unresolved license (``unknown``),
        identical identifiers (``compatible``), category fallback.

        Args:
            license_a: License or identifier.
            license_b: License or identifier.

        Returns:
            The verdict. Symmetric in its arguments.
        """
        lic_a = self.to_license(license_a)
        lic_b = self.to_license(license_b)

        rule = RULES.get(pair_key(lic_a.identifier, lic_b.identifier))
        if rule is not None:
            return rule

        if not lic_a.resolved or not lic_b.resolved:
            return CompatibilityVerdict.UNKNOWN

        if lic_a.identifier == lic_b.identifier:
            return CompatibilityVerdict.COMPATIBLE

        return _category_compatibility(lic_a.category, lic_b.category)

    def check(self, license_a: LicenseRef, license_b: LicenseRef) -> PairwiseResult:
        """Run the full pairwise analysis for two licenses.

        Args:
            license_a: License or identifier.
            license_b: License or identifier.

        Returns:
            PairwiseResult with verdict, risk level, explanation and the
            conditions, warnings and recommendations that apply.
        """
        lic_a = self.to_license(license_a)
        lic_b = self.to_license(license_b)
        verdict = self.compatibility(lic_a, lic_b)
        return PairwiseResult(
            license_a=lic_a,
            license_b=lic_b,
            verdict=verdict,
            risk_level=self.assessor.risk_level(verdict),
            explanation=self.assessor.explain(lic_a, lic_b, verdict),
            conditions=self.assessor.conditions(lic_a, lic_b, verdict),
            warnings=self.assessor.warnings(lic_a, lic_b, verdict),
            recommendations=self.assessor.recommendations(lic_a, lic_b, verdict),
        )
