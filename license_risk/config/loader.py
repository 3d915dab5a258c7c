"""Engine configuration loading for license-risk.

The configuration is a YAML mapping taken from ``--config`` or, without one,
from ``.license-risk.yaml`` / ``.license-risk.yml`` in the working directory.
After schema validation the override licenses are looked up in the license
catalog, so a misspelled override is reported before any analysis runs.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from license_risk.catalog import LicenseCatalog, default_catalog
from license_risk.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_risk.documents import read_document, validate_mapping
from license_risk.exceptions import ConfigurationError
from license_risk.models.config import EngineConfig

logger = logging.getLogger(__name__)

_LABEL = "configuration file"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the first default-named config file in a directory.

    Args:
        start_dir: Directory to look in. Defaults to the working directory.
    """
    directory = start_dir or Path.cwd()
    candidates = (directory / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.is_file()), None)


def _check_override_licenses(config: EngineConfig, catalog: LicenseCatalog) -> None:
    for package, override in (config.overrides or {}).items():
        if catalog.resolve(override.license) is None:
            logger.warning(
                "Override for '%s' uses license '%s', which is not in the "
                "license catalog; it will be analyzed as unknown",
                package,
                override.license,
            )


def load_config_file(
    path: Path, catalog: Optional[LicenseCatalog] = None
) -> EngineConfig:
    """Load and validate a configuration file.

    An empty file, or one with only comments, gives the default config.

    Args:
        path: YAML configuration file.
        catalog: Catalog the override licenses are checked against.

    Returns:
        Validated EngineConfig.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or fails validation.
    """
    data = read_document(path, "yaml", ConfigurationError, _LABEL)
    config = validate_mapping(EngineConfig, data, path, ConfigurationError, _LABEL)
    _check_override_licenses(config, catalog or default_catalog())
    logger.debug("Loaded configuration from %s", path)
    return config


def load_config(config_path: str | None = None) -> EngineConfig:
    """Load the explicit config file, a discovered one, or the defaults.

    Raises:
        ConfigurationError: If the selected file is invalid.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        logger.debug("No configuration file found, using defaults")
        return get_default_config()
    return load_config_file(path)
