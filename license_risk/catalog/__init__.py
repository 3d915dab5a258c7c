"""License catalog for license-risk."""

from license_risk.catalog.registry import LicenseCatalog, default_catalog
from license_risk.catalog.seed import DEFAULT_ALIASES, DEFAULT_LICENSES

__all__ = [
    "DEFAULT_ALIASES",
    "DEFAULT_LICENSES",
    "LicenseCatalog",
    "default_catalog",
]
