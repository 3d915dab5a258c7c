"""Configuration handling for license-risk."""
from __future__ import annotations

from license_risk.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_risk.config.loader import find_config_file, load_config, load_config_file
from license_risk.models.config import EngineConfig, LicenseOverride, RiskWeights

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "EngineConfig",
    "LicenseOverride",
    "RiskWeights",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
