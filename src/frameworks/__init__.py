"""Target framework parsing and comparison.

This package provides:
- framework.py: the immutable NuGetFramework identity, its total order and sentinels
- parser.py: short folder name (net45) and long name (.NETFramework,Version=v4.5) parsing
- constants.py: identifier and short-name mappings
"""

from .constants import FrameworkIdentifiers
from .framework import (
    AGNOSTIC_FRAMEWORK,
    ANY_FRAMEWORK,
    UNSUPPORTED_FRAMEWORK,
    FrameworkParseError,
    NuGetFramework,
)
from .parser import parse, parse_folder, parse_framework_name

__all__ = [
    "NuGetFramework",
    "FrameworkIdentifiers",
    "FrameworkParseError",
    "ANY_FRAMEWORK",
    "AGNOSTIC_FRAMEWORK",
    "UNSUPPORTED_FRAMEWORK",
    "parse",
    "parse_folder",
    "parse_framework_name",
]
