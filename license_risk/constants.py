"""Constants for license-risk."""

# Exit codes
EXIT_SUCCESS = 0  # Licenses are compatible
EXIT_ISSUES = 1  # Conflicts or policy violations found
EXIT_ERROR = 2  # Analysis failed due to error

# Default risk score weights
DEFAULT_INCOMPATIBLE_WEIGHT = 100
DEFAULT_UNKNOWN_LICENSE_WEIGHT = 50

RISK_SCORE_MIN = 0
RISK_SCORE_MAX = 100

CONFLICT_RESOLUTION = (
    "Remove one of the conflicting dependencies or find a compatible alternative."
)

LEGAL_DISCLAIMER = (
    "This tool provides license information for informational purposes only. "
    "It does not constitute legal advice. Consult a qualified attorney for "
    "legal guidance on license compliance."
)

LEGAL_DISCLAIMER_SHORT = (
    "This tool provides license information for informational purposes only. "
    "It does not constitute legal advice."
)
