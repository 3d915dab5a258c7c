"""Output formatters for license-risk."""

from license_risk.output.report_json import ReportJsonFormatter
from license_risk.output.terminal import TerminalFormatter

__all__ = [
    "ReportJsonFormatter",
    "TerminalFormatter",
]
