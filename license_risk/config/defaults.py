"""Default configuration values for license-risk."""

from __future__ import annotations

from license_risk.models.config import EngineConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-risk.yaml", ".license-risk.yml"]


def get_default_config() -> EngineConfig:
    """Get the default configuration.

    Returns:
        EngineConfig with default risk weights and no overrides.
    """
    return EngineConfig()
