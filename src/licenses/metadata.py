"""License metadata declared by a package manifest."""
from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from constants import Constants
from versioning.version import NumericVersion

from .expression import non_standard_license_keys


class LicenseType(Enum):
    """Kinds of license declaration a manifest may carry."""
    FILE = "file"
    EXPRESSION = "expression"

    @classmethod
    def from_text(cls, value: Optional[str]) -> Optional["LicenseType"]:
        """Map a ``type`` attribute onto a LicenseType ignoring case; None when unrecognized."""
        if value is None:
            return None
        key = value.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        return None


# Version assumed when the manifest declares none
EMPTY_VERSION = NumericVersion(1, 0, 0)
# Highest license expression version this reader knows how to evaluate
CURRENT_VERSION = NumericVersion(1, 0, 0)


@dataclass(frozen=True)
class LicenseMetadata:
    """A license declaration.

    ``license_expression`` is only set for expression licenses whose version
    is at most CURRENT_VERSION. An expression license without a parsed
    expression was written for a newer format; callers should fall back to
    the raw ``license`` text.
    """
    type: LicenseType
    license: str
    license_expression: Optional[Any]
    version: NumericVersion

    @property
    def is_expression_evaluated(self) -> bool:
        return self.license_expression is not None

    @property
    def license_url(self) -> str:
        if self.type == LicenseType.EXPRESSION:
            return Constants.LICENSE_EXPRESSION_URL + urllib.parse.quote(self.license.strip(), safe="")
        return Constants.LICENSE_FILE_DEPRECATION_URL

    @property
    def non_standard_licenses(self) -> Tuple[str, ...]:
        """License keys in the parsed expression that are not SPDX identifiers."""
        if self.license_expression is None:
            return ()
        return non_standard_license_keys(self.license_expression)
