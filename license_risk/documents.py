"""Reading of the YAML and JSON documents license-risk consumes.

Configuration, policy and detection input files all go through the same
steps: read the text, parse it, check the root shape, validate it with a
pydantic model. Each caller passes its own error type so failures surface as
ConfigurationError, PolicyError or InputError with the file named.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from license_risk.exceptions import LicenseRiskError

DocumentFormat = Literal["yaml", "json"]
ModelT = TypeVar("ModelT", bound=BaseModel)


def format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Messages of the form ``loc: msg`` joined with ``; ``.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def read_document(
    path: Path,
    fmt: DocumentFormat,
    error: type[LicenseRiskError],
    label: str,
) -> Any:
    """Read and parse a YAML or JSON file.

    Args:
        path: File to read.
        fmt: Syntax of the file.
        error: Exception type raised on failure.
        label: What the file is, e.g. ``"policy file"``, used in messages.

    Returns:
        The parsed document. None for an empty YAML file or one holding only
        comments.

    Raises:
        LicenseRiskError: The ``error`` type, if the file cannot be read or
            parsed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise error(f"Cannot read {label} '{path}': {e}") from e

    if fmt == "json":
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise error(f"Invalid JSON syntax in {label} '{path}': {e}") from e
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise error(f"Invalid YAML syntax in {label} '{path}': {e}") from e


def validate_mapping(
    model: type[ModelT],
    data: Any,
    path: Path,
    error: type[LicenseRiskError],
    label: str,
) -> ModelT:
    """Validate a parsed document whose root must be a mapping.

    A missing document (None) validates as an empty mapping, so every field
    takes its default.

    Raises:
        LicenseRiskError: The ``error`` type, if the root is not a mapping or
            the model rejects it.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise error(
            f"Invalid {label} '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise error(
            f"Invalid {label} '{path}': {format_validation_errors(e)}"
        ) from e
