"""NuGet versioning: package versions, numeric versions and version ranges."""

from .version import NuGetVersion, NumericVersion
from .models import FloatBehavior, FloatRange, VersionRange
from .parser import parse_float_range, parse_version_range

__all__ = [
    "NuGetVersion",
    "NumericVersion",
    "VersionRange",
    "FloatRange",
    "FloatBehavior",
    "parse_version_range",
    "parse_float_range",
]
