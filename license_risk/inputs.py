"""Loading of license detection output for license-risk.

The input file is JSON or YAML: either a list of packages or a mapping with a
``packages`` key. Each package is ``{name, version, licenses, confidence?,
publisher?, publisherDomain?, license?}``, where ``license`` is the license the
package declares for itself. The first package names the project.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from license_risk.documents import (
    DocumentFormat,
    format_validation_errors,
    read_document,
)
from license_risk.exceptions import InputError
from license_risk.models.package import PackageIdentity, PackageLicenseAnalysis

logger = logging.getLogger(__name__)


class DetectedPackage(BaseModel):
    """One package entry of a detection input file."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    name: str = Field(min_length=1)
    version: str = ""
    licenses: list[str] = Field(default_factory=list)
    confidence: Optional[float] = Field(default=None, ge=0, le=1)
    publisher: Optional[str] = None
    publisher_domain: Optional[str] = Field(default=None, alias="publisherDomain")
    license: Optional[str] = None

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_string(cls, value: Any) -> Any:
        # YAML reads 1.0 as a float
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("licenses", mode="before")
    @classmethod
    def _single_license(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    def to_analysis(self) -> PackageLicenseAnalysis:
        """Convert the entry to the analyzer's input model."""
        return PackageLicenseAnalysis(
            package=PackageIdentity(
                name=self.name,
                version=self.version,
                publisher=self.publisher,
                publisher_domain=self.publisher_domain,
                license=self.license,
            ),
            licenses=self.licenses,
            confidence=self.confidence,
        )


def parse_analyses(data: Any, source: str = "input") -> list[PackageLicenseAnalysis]:
    """Validate already-parsed detection data.

    Args:
        data: A list of package mappings, or a mapping with a ``packages`` list.
        source: Name used in error messages.

    Returns:
        One PackageLicenseAnalysis per package, in input order.

    Raises:
        InputError: If the data does not have the expected shape.
    """
    if data is None:
        return []
    if isinstance(data, dict):
        if "packages" not in data:
            raise InputError(f"Invalid input in '{source}': missing 'packages' key")
        data = data["packages"] or []
    if not isinstance(data, list):
        raise InputError(
            f"Invalid input in '{source}': "
            f"expected a list of packages, got {type(data).__name__}"
        )

    analyses: list[PackageLicenseAnalysis] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise InputError(
                f"Invalid input in '{source}': package {index} is not a mapping"
            )
        try:
            entry = DetectedPackage.model_validate(item)
        except ValidationError as e:
            raise InputError(
                f"Invalid input in '{source}': package {index}: "
                f"{format_validation_errors(e)}"
            ) from e
        analyses.append(entry.to_analysis())
    return analyses


def load_analyses(path: Path) -> list[PackageLicenseAnalysis]:
    """Load license detection output from a JSON or YAML file.

    Args:
        path: Input file. ``.json`` files are parsed as JSON, anything else
            as YAML.

    Returns:
        One PackageLicenseAnalysis per package, in file order.

    Raises:
        InputError: If the file cannot be read or is malformed.
    """
    fmt: DocumentFormat = "json" if path.suffix.lower() == ".json" else "yaml"
    data = read_document(path, fmt, InputError, "input file")
    analyses = parse_analyses(data, source=str(path))
    logger.debug("Loaded %d packages from %s", len(analyses), path)
    return analyses
