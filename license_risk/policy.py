"""Policy file loading and evaluation for license-risk.

A policy is validated before any analysis runs; a malformed policy file
raises PolicyError instead of being partially applied.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from license_risk.catalog import LicenseCatalog, default_catalog
from license_risk.documents import DocumentFormat, read_document, validate_mapping
from license_risk.exceptions import PolicyError
from license_risk.models.package import PackageIdentity, PackageLicenseAnalysis
from license_risk.models.policy import LicensePolicy, PolicyViolation

logger = logging.getLogger(__name__)


def load_policy(path: Path) -> LicensePolicy:
    """Load and validate a policy file.

    Args:
        path: Policy file. ``.yaml`` and ``.yml`` files are parsed as YAML,
            anything else as JSON.

    Returns:
        Validated LicensePolicy.

    Raises:
        PolicyError: If the file cannot be read, cannot be parsed, or fails
            validation.
    """
    fmt: DocumentFormat = "yaml" if path.suffix.lower() in (".yaml", ".yml") else "json"
    data = read_document(path, fmt, PolicyError, "policy file")
    policy = validate_mapping(LicensePolicy, data, path, PolicyError, "policy file")

    logger.debug("Loaded policy from %s", path)
    return policy


def _canonical(identifier: str, catalog: LicenseCatalog) -> str:
    lic = catalog.resolve(identifier)
    return lic.identifier if lic is not None else identifier.strip()


def _is_known_publisher(package: PackageIdentity, policy: LicensePolicy) -> bool:
    """Check a package publisher against the allow-lists.

    With both allow-lists empty, any named publisher is accepted. Domains
    match exactly or as a parent domain.
    """
    names = {name.lower() for name in policy.allowed_publisher_names}
    domains = [d.lower().lstrip(".") for d in policy.allowed_publisher_domains]

    if not names and not domains:
        return bool(package.publisher or package.publisher_domain)

    if package.publisher and package.publisher.lower() in names:
        return True
    if package.publisher_domain:
        candidate = package.publisher_domain.lower()
        return any(
            candidate == domain or candidate.endswith(f".{domain}")
            for domain in domains
        )
    return False


def evaluate_policy(
    policy: LicensePolicy,
    analyses: list[PackageLicenseAnalysis],
    catalog: Optional[LicenseCatalog] = None,
) -> list[PolicyViolation]:
    """Check package analyses against a policy.

    Disallowed licenses are compared by canonical identifier, so aliases and
    deprecated spellings match on either side.

    Args:
        policy: Validated policy.
        analyses: Package analyses, after overrides.
        catalog: Catalog used to canonicalize identifiers.

    Returns:
        Violations in package order; empty if the project complies.
    """
    catalog = catalog or default_catalog()
    disallowed = {_canonical(lic, catalog) for lic in policy.disallowed_licenses}
    violations: list[PolicyViolation] = []

    for analysis in analyses:
        package = analysis.package
        for raw in analysis.licenses:
            if not raw.strip():
                continue
            canonical = _canonical(raw, catalog)
            if canonical in disallowed:
                violations.append(
                    PolicyViolation(
                        package_name=package.name,
                        package_version=package.version,
                        detected_license=canonical,
                        reason=(
                            f"Disallowed license {canonical} found in "
                            f"{package.display_name}"
                        ),
                    )
                )

        if policy.require_known_publisher and not _is_known_publisher(
            package, policy
        ):
            publisher = package.publisher or package.publisher_domain or "unknown"
            violations.append(
                PolicyViolation(
                    package_name=package.name,
                    package_version=package.version,
                    reason=(
                        f"Publisher '{publisher}' of {package.display_name} "
                        "is not in the allowed publisher list"
                    ),
                )
            )

    return violations
