"""Leaving configured packages out of the analysis.

Entries of ``ignored_packages`` are package names or shell-style patterns
such as ``internal-*``, matched case-sensitively. A package left out adds
nothing to the report: no licenses, no issues and no package count.
"""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase
from typing import NamedTuple, Sequence

from license_risk.models.config import EngineConfig
from license_risk.models.package import PackageLicenseAnalysis

logger = logging.getLogger(__name__)


class FilterResult(NamedTuple):
    """Analyses kept for analysis and the names left out, in input order."""

    analyses: list[PackageLicenseAnalysis]
    ignored_names: list[str]

    @property
    def ignored_count(self) -> int:
        return len(self.ignored_names)


def matching_pattern(name: str, patterns: Sequence[str]) -> str | None:
    """Return the first ignore entry matching a package name, if any."""
    return next((p for p in patterns if fnmatchcase(name, p)), None)


def filter_ignored_packages(
    analyses: Sequence[PackageLicenseAnalysis],
    config: EngineConfig,
) -> FilterResult:
    """Split analyses into those to analyze and those the config ignores.

    Ignore entries that match no package are logged, since they usually
    point at a renamed or removed dependency.
    """
    patterns = config.ignored_packages or []
    kept: list[PackageLicenseAnalysis] = []
    ignored: list[str] = []
    used: set[str] = set()

    for analysis in analyses:
        pattern = matching_pattern(analysis.package.name, patterns)
        if pattern is None:
            kept.append(analysis)
            continue
        logger.debug("Ignoring %s (matches %r)", analysis.package.display_name, pattern)
        ignored.append(analysis.package.name)
        used.add(pattern)

    for pattern in patterns:
        if pattern not in used:
            logger.info("Ignore entry %r matched no package", pattern)

    return FilterResult(analyses=kept, ignored_names=ignored)
