"""Tests for configured license overrides."""

import logging

from license_risk.analysis.overrides import apply_license_overrides
from license_risk.models.config import EngineConfig, LicenseOverride


def overrides(**licenses: str) -> EngineConfig:
    return EngineConfig(
        overrides={
            name.replace("_", "-"): LicenseOverride(license=lic, reason="Checked")
            for name, lic in licenses.items()
        }
    )


class TestApplyLicenseOverrides:
    """Tests for apply_license_overrides function."""

    def test_replaces_detected_licenses(self, make_analysis) -> None:
        """Test the override replaces detection and keeps what it replaced."""
        analyses = [make_analysis("requests", "Unknown", "Apache")]
        config = EngineConfig(
            overrides={
                "requests": LicenseOverride(
                    license="Apache-2.0", reason="Verified from LICENSE file"
                ),
            }
        )

        (result,) = apply_license_overrides(analyses, config)

        assert result.licenses == ["Apache-2.0"]
        assert result.original_licenses == ["Unknown", "Apache"]
        assert result.override_reason == "Verified from LICENSE file"
        assert result.is_overridden

    def test_fills_in_missing_license(self, make_analysis) -> None:
        """Test a package without detected licenses gets the override."""
        (result,) = apply_license_overrides(
            [make_analysis("internal-lib")], overrides(internal_lib="MIT")
        )

        assert result.licenses == ["MIT"]
        assert result.original_licenses == []

    def test_applies_to_every_version(self, make_analysis) -> None:
        """Test all versions of an overridden package are replaced."""
        analyses = [
            make_analysis("six", "", version="1.15.0"),
            make_analysis("six", "Unknown", version="1.16.0"),
        ]

        result = apply_license_overrides(analyses, overrides(six="MIT"))

        assert [a.licenses for a in result] == [["MIT"], ["MIT"]]
        assert [a.package.version for a in result] == ["1.15.0", "1.16.0"]

    def test_other_packages_kept_as_is(self, make_analysis) -> None:
        """Test packages without an override are the input objects."""
        click = make_analysis("click", "BSD-3-Clause")
        original = make_analysis("requests", "Unknown")

        result = apply_license_overrides([original, click], overrides(requests="MIT"))

        assert result[1] is click
        assert result[1].original_licenses is None
        assert original.licenses == ["Unknown"]
        assert original.override_reason is None

    def test_unmatched_override_warns(self, make_analysis, caplog) -> None:
        """Test an override for a package not in the input is reported."""
        with caplog.at_level(logging.WARNING, logger="license_risk.analysis.overrides"):
            result = apply_license_overrides(
                [make_analysis("click", "BSD-3-Clause")],
                overrides(click="MIT", left_pad="WTFPL"),
            )

        assert result[0].licenses == ["MIT"]
        assert "'left-pad' matches no analyzed package" in caplog.text
        assert "'click'" not in caplog.text

    def test_no_overrides(self, make_analysis) -> None:
        """Test an empty override mapping changes nothing."""
        analyses = [make_analysis("requests", "MIT")]

        assert apply_license_overrides(analyses, EngineConfig(overrides={})) == analyses
