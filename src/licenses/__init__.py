"""License expressions and license metadata."""

from .expression import LicenseExpressionParsingError, parse_license_expression
from .metadata import CURRENT_VERSION, EMPTY_VERSION, LicenseMetadata, LicenseType

__all__ = [
    "LicenseMetadata",
    "LicenseType",
    "LicenseExpressionParsingError",
    "parse_license_expression",
    "EMPTY_VERSION",
    "CURRENT_VERSION",
]
