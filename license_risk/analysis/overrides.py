"""Configured license overrides for packages with wrong or missing detection."""
from __future__ import annotations

import logging
from typing import Sequence

from license_risk.models.config import EngineConfig
from license_risk.models.package import PackageLicenseAnalysis

logger = logging.getLogger(__name__)


def apply_license_overrides(
    analyses: Sequence[PackageLicenseAnalysis],
    config: EngineConfig,
) -> list[PackageLicenseAnalysis]:
    """Replace the detected licenses of overridden packages.

    The override applies to every version of a package name. The replaced
    identifiers move to ``original_licenses`` so reports can show what
    detection found. Overrides naming a package that is not in the input are
    logged as warnings.

    Args:
        analyses: Package analyses from license detection.
        config: Configuration with the overrides mapping.

    Returns:
        New list of analyses; packages without an override are the same
        objects as in the input.
    """
    overrides = config.overrides or {}
    applied: set[str] = set()
    result: list[PackageLicenseAnalysis] = []

    for analysis in analyses:
        name = analysis.package.name
        override = overrides.get(name)
        if override is None:
            result.append(analysis)
            continue
        applied.add(name)
        logger.debug(
            "Overriding licenses of %s with %s: %s",
            analysis.package.display_name,
            override.license,
            override.reason,
        )
        result.append(
            analysis.model_copy(
                update={
                    "licenses": [override.license],
                    "original_licenses": list(analysis.licenses),
                    "override_reason": override.reason,
                }
            )
        )

    for name in sorted(set(overrides) - applied):
        logger.warning("License override for '%s' matches no analyzed package", name)
    return result
