"""Shared fixtures for license-risk tests."""

from __future__ import annotations

from typing import Callable, Optional

import pytest
from click.testing import CliRunner

from license_risk.analysis.project import ProjectCompatibilityAnalyzer
from license_risk.catalog import LicenseCatalog, default_catalog
from license_risk.models.package import PackageIdentity, PackageLicenseAnalysis

AnalysisFactory = Callable[..., PackageLicenseAnalysis]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> LicenseCatalog:
    """Provide the built-in license catalog."""
    return default_catalog()


@pytest.fixture
def analyzer(catalog: LicenseCatalog) -> ProjectCompatibilityAnalyzer:
    """Provide a single-threaded analyzer over the built-in catalog."""
    return ProjectCompatibilityAnalyzer(catalog=catalog)


@pytest.fixture
def make_analysis() -> AnalysisFactory:
    """Build a PackageLicenseAnalysis from a name and license identifiers."""

    def _make(
        name: str,
        *licenses: str,
        version: str = "1.0.0",
        publisher: Optional[str] = None,
        publisher_domain: Optional[str] = None,
    ) -> PackageLicenseAnalysis:
        return PackageLicenseAnalysis(
            package=PackageIdentity(
                name=name,
                version=version,
                publisher=publisher,
                publisher_domain=publisher_domain,
            ),
            licenses=list(licenses),
        )

    return _make
