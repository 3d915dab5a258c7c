"""Tests for custom exceptions."""

import pytest

from license_risk.exceptions import (
    CatalogError,
    ConfigurationError,
    InputError,
    LicenseRiskError,
    PolicyError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_error_is_exception(self) -> None:
        """Test that LicenseRiskError inherits from Exception."""
        assert issubclass(LicenseRiskError, Exception)

    @pytest.mark.parametrize(
        "error_cls", [CatalogError, ConfigurationError, InputError, PolicyError]
    )
    def test_errors_inherit_from_base(self, error_cls: type) -> None:
        """Test that every library error can be caught as LicenseRiskError."""
        assert issubclass(error_cls, LicenseRiskError)

    def test_policy_error_keeps_message(self) -> None:
        """Test that PolicyError carries its message."""
        with pytest.raises(LicenseRiskError, match="bad policy"):
            raise PolicyError("bad policy")
