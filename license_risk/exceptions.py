"""Custom exceptions for license-risk."""


class LicenseRiskError(Exception):
    """Base exception for all license-risk errors."""

    pass


class ConfigurationError(LicenseRiskError):
    """Exception raised when configuration is invalid."""

    pass


class InputError(LicenseRiskError):
    """Exception raised when license detection input cannot be loaded."""

    pass


class PolicyError(LicenseRiskError):
    """Exception raised when a policy file is malformed.

    Raised before any analysis runs; an unvalidated policy is never applied.
    """

    pass


class CatalogError(LicenseRiskError):
    """Exception raised when a license catalog is built inconsistently."""

    pass
