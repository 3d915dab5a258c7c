"""Immutable license registry with case-insensitive alias resolution.

Identifiers are resolved in order: exact canonical identifier, then a
case-insensitive alias (deprecated ids and lower-cased canonical ids are
aliases too), then SPDX normalization through the license-expression library.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from boolean import ParseError
from license_expression import ExpressionError, get_spdx_licensing

from license_risk.catalog.seed import DEFAULT_ALIASES, DEFAULT_LICENSES
from license_risk.exceptions import CatalogError
from license_risk.models.license import License, LicenseCategory

logger = logging.getLogger(__name__)

# Initialize SPDX licensing for normalization
_licensing = get_spdx_licensing()


def _normalize_spdx(identifier: str) -> Optional[str]:
    """Normalize a single SPDX identifier using license-expression.

    Args:
        identifier: Raw identifier, already stripped.

    Returns:
        Canonical SPDX key, or None for compound expressions and
        identifiers the SPDX index does not know.
    """
    try:
        parsed = _licensing.parse(identifier, validate=True)
    except (ExpressionError, ParseError, IndexError, TypeError) as e:
        # boolean.py fails on unbalanced input such as "()" with a bare
        # IndexError instead of a ParseError
        logger.debug("Cannot normalize license %r: %s", identifier, e)
        return None
    if parsed is None or not hasattr(parsed, "key"):
        return None
    return str(parsed.key)


class LicenseCatalog:
    """Read-only registry of known licenses.

    The catalog is built once and never mutated, so a single instance can be
    shared between threads and analysis runs.
    """

    def __init__(
        self,
        licenses: Iterable[License] = DEFAULT_LICENSES,
        aliases: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Build the registry and its alias index.

        Args:
            licenses: Licenses to register. Identifiers must be unique.
            aliases: Informal name to canonical identifier mapping. Defaults
                to the built-in alias table.

        Raises:
            CatalogError: If an identifier is registered twice or an alias
                points at an identifier that is not registered.
        """
        by_id: dict[str, License] = {}
        for lic in licenses:
            if lic.identifier in by_id:
                raise CatalogError(f"Duplicate license identifier '{lic.identifier}'")
            by_id[lic.identifier] = lic

        index: dict[str, str] = {}
        for lic in by_id.values():
            index[lic.identifier.lower()] = lic.identifier
            for deprecated in lic.deprecated_ids:
                index[deprecated.lower()] = lic.identifier

        for alias, target in (DEFAULT_ALIASES if aliases is None else aliases).items():
            if target not in by_id:
                raise CatalogError(
                    f"Alias '{alias}' points at unknown license '{target}'"
                )
            index[alias.strip().lower()] = target

        self._licenses: Mapping[str, License] = MappingProxyType(by_id)
        self._aliases: Mapping[str, str] = MappingProxyType(index)
        logger.debug(
            "Built license catalog with %d licenses and %d aliases",
            len(by_id),
            len(index),
        )

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.resolve(identifier) is not None

    def __len__(self) -> int:
        return len(self._licenses)

    def resolve(self, identifier: Optional[str]) -> Optional[License]:
        """Resolve an identifier or informal name to a catalog license.

        Never raises: unknown, blank or malformed input yields None so the
        caller can degrade it to an unknown license.

        Args:
            identifier: Canonical identifier, alias or SPDX spelling.

        Returns:
            The matching License, or None if the catalog does not know it.
        """
        if not identifier:
            return None
        key = identifier.strip()
        if not key:
            return None

        found = self._lookup(key)
        if found is not None:
            return found

        normalized = _normalize_spdx(key)
        if normalized is not None and normalized != key:
            return self._lookup(normalized)
        return None

    def _lookup(self, key: str) -> Optional[License]:
        if key in self._licenses:
            return self._licenses[key]
        target = self._aliases.get(key.lower())
        if target is not None:
            return self._licenses[target]
        return None

    def get(self, identifier: str) -> Optional[License]:
        """Return the license registered under an exact canonical identifier."""
        return self._licenses.get(identifier)

    def all(self) -> list[License]:
        """Return every license, sorted by display name."""
        return sorted(self._licenses.values(), key=lambda lic: lic.name)

    def by_category(self, category: LicenseCategory) -> list[License]:
        """Return the licenses of one category, sorted by display name."""
        return [lic for lic in self.all() if lic.category == category]

    def search(self, query: str) -> list[License]:
        """Find licenses whose identifier, name or alias contains a query.

        Args:
            query: Case-insensitive substring.

        Returns:
            Matching licenses sorted by display name; empty for a blank query.
        """
        needle = query.strip().lower()
        if not needle:
            return []
        matched = {
            lic.identifier
            for lic in self._licenses.values()
            if needle in lic.identifier.lower() or needle in lic.name.lower()
        }
        matched.update(
            target for alias, target in self._aliases.items() if needle in alias
        )
        return [lic for lic in self.all() if lic.identifier in matched]

    def is_osi_approved(self, identifier: str) -> bool:
        """Check whether a license is OSI approved; False if unknown."""
        lic = self.resolve(identifier)
        return lic is not None and lic.osi_approved

    def is_fsf_approved(self, identifier: str) -> bool:
        """Check whether a license is FSF approved; False if unknown."""
        lic = self.resolve(identifier)
        return lic is not None and lic.fsf_approved


@lru_cache(maxsize=1)
def default_catalog() -> LicenseCatalog:
    """Return the shared catalog built from the built-in seed data."""
    return LicenseCatalog()
