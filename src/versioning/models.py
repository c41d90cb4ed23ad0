"""Data models for NuGet version ranges."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .version import NuGetVersion


class FloatBehavior(Enum):
    """Which part of a version is allowed to float to the highest available value."""
    NONE = "none"
    PRERELEASE = "prerelease"
    REVISION = "revision"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"
    ABSOLUTE_LATEST = "absolute_latest"
    PRERELEASE_REVISION = "prerelease_revision"
    PRERELEASE_PATCH = "prerelease_patch"
    PRERELEASE_MINOR = "prerelease_minor"
    PRERELEASE_MAJOR = "prerelease_major"


@dataclass(frozen=True)
class FloatRange:
    """A floating version such as ``1.*`` or ``2.0.0-beta*``."""
    float_behavior: FloatBehavior
    min_version: NuGetVersion
    release_prefix: Optional[str] = None
    original_string: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.original_string:
            return self.original_string
        return str(self.min_version)


@dataclass(frozen=True)
class VersionRange:
    """An interval of NuGet versions with optional floating lower bound.

    ``None`` bounds are unbounded. Equality ignores the original text.
    """
    min_version: Optional[NuGetVersion] = None
    is_min_inclusive: bool = False
    max_version: Optional[NuGetVersion] = None
    is_max_inclusive: bool = False
    float_range: Optional[FloatRange] = None
    original_string: Optional[str] = field(default=None, compare=False)

    @property
    def has_lower_bound(self) -> bool:
        return self.min_version is not None

    @property
    def has_upper_bound(self) -> bool:
        return self.max_version is not None

    @property
    def is_floating(self) -> bool:
        return self.float_range is not None and self.float_range.float_behavior != FloatBehavior.NONE

    def satisfies(self, version: NuGetVersion) -> bool:
        """Return True when the version falls inside the range bounds."""
        if self.min_version is not None:
            if self.is_min_inclusive:
                if version < self.min_version:
                    return False
            elif version <= self.min_version:
                return False
        if self.max_version is not None:
            if self.is_max_inclusive:
                if version > self.max_version:
                    return False
            elif version >= self.max_version:
                return False
        return True

    def to_normalized_string(self) -> str:
        """Render the range in interval notation, e.g. ``[1.0.0, 2.0.0)``."""
        if self.is_floating:
            return str(self.float_range)
        if (
            self.min_version is not None
            and self.max_version is not None
            and self.is_min_inclusive
            and self.is_max_inclusive
            and self.min_version == self.max_version
        ):
            return f"[{self.min_version}]"
        left = "[" if self.is_min_inclusive else "("
        right = "]" if self.is_max_inclusive else ")"
        low = str(self.min_version) if self.min_version is not None else ""
        high = str(self.max_version) if self.max_version is not None else ""
        return f"{left}{low}, {high}{right}"

    def __str__(self) -> str:
        return self.to_normalized_string()
