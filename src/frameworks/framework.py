"""Immutable target framework identity with full equality and a total order."""
from __future__ import annotations

import functools
from typing import Tuple

from .constants import (
    DOTTED_VERSION_FRAMEWORKS,
    LONG_TO_SHORT,
    NET5_MAJOR_VERSION,
    PROFILE_SHORT_NAMES,
    SINGLE_DIGIT_VERSION_FRAMEWORKS,
    FrameworkIdentifiers,
)

FrameworkVersion = Tuple[int, int, int, int]

EMPTY_VERSION: FrameworkVersion = (0, 0, 0, 0)

_DOTTED_VERSION_FRAMEWORKS = {name.lower() for name in DOTTED_VERSION_FRAMEWORKS}
_SINGLE_DIGIT_VERSION_FRAMEWORKS = {name.lower() for name in SINGLE_DIGIT_VERSION_FRAMEWORKS}


class FrameworkParseError(ValueError):
    """Raised when a framework string is malformed beyond being merely unknown."""


def normalize_version(parts) -> FrameworkVersion:
    """Pad or validate a sequence of version integers to exactly four parts."""
    values = tuple(int(part) for part in parts)
    if len(values) > 4:
        raise FrameworkParseError(f"Framework version has too many parts: {values}")
    return values + (0,) * (4 - len(values))  # type: ignore[return-value]


def format_version(version: FrameworkVersion, min_parts: int = 2) -> str:
    """Render a version with trailing zero parts dropped, keeping at least ``min_parts``."""
    parts = list(version)
    while len(parts) > min_parts and parts[-1] == 0:
        parts.pop()
    return ".".join(str(part) for part in parts)


@functools.total_ordering
class NuGetFramework:
    """A target framework such as ``.NETFramework 4.5`` or ``.NETCoreApp 6.0 (windows)``.

    Equality compares every part: identifier, profile and platform ignoring
    case, versions numerically. Ordering puts Any first and Unsupported last,
    then orders by identifier, version, profile, platform and platform version.
    """

    __slots__ = ("framework", "version", "profile", "platform", "platform_version")

    def __init__(
        self,
        framework: str,
        version: FrameworkVersion = EMPTY_VERSION,
        profile: str = "",
        platform: str = "",
        platform_version: FrameworkVersion = EMPTY_VERSION,
    ):
        if not framework:
            raise FrameworkParseError("Framework identifier must not be empty.")
        object.__setattr__(self, "framework", framework)
        object.__setattr__(self, "version", normalize_version(version))
        object.__setattr__(self, "profile", profile or "")
        object.__setattr__(self, "platform", platform or "")
        object.__setattr__(self, "platform_version", normalize_version(platform_version))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def is_any(self) -> bool:
        return self.framework.lower() == FrameworkIdentifiers.ANY.value.lower()

    @property
    def is_agnostic(self) -> bool:
        return self.framework.lower() == FrameworkIdentifiers.AGNOSTIC.value.lower()

    @property
    def is_unsupported(self) -> bool:
        return self.framework.lower() == FrameworkIdentifiers.UNSUPPORTED.value.lower()

    @property
    def is_specific_framework(self) -> bool:
        return not (self.is_any or self.is_agnostic or self.is_unsupported)

    @property
    def is_portable(self) -> bool:
        return self.framework.lower() == FrameworkIdentifiers.PORTABLE.value.lower()

    @property
    def has_profile(self) -> bool:
        return bool(self.profile)

    @property
    def has_platform(self) -> bool:
        return bool(self.platform)

    @property
    def is_net5_era(self) -> bool:
        return (
            self.framework.lower() == FrameworkIdentifiers.NET_CORE_APP.value.lower()
            and self.version[0] >= NET5_MAJOR_VERSION
        )

    @property
    def dotnet_framework_name(self) -> str:
        """Long form, e.g. ``.NETFramework,Version=v4.5,Profile=Client``."""
        name = f"{self.framework},Version=v{format_version(self.version)}"
        if self.profile:
            name += f",Profile={self.profile}"
        return name

    def get_short_folder_name(self) -> str:
        """Short form used in package folders and manifests, e.g. ``net45``."""
        if not self.is_specific_framework:
            return self.framework.lower()

        if self.is_net5_era:
            name = f"net{format_version(self.version)}"
            if self.platform:
                name += f"-{self.platform.lower()}"
                if self.platform_version != EMPTY_VERSION:
                    name += format_version(self.platform_version)
            return name

        short = LONG_TO_SHORT.get(self.framework.lower())
        if short is None:
            return self.dotnet_framework_name

        if self.is_portable:
            return f"{short}-{self.profile}" if self.profile else short

        name = short + self._short_version()
        if self.profile:
            name += f"-{self._short_profile()}"
        return name

    def _short_version(self) -> str:
        if self.version == EMPTY_VERSION:
            return ""
        if self.framework.lower() in _DOTTED_VERSION_FRAMEWORKS:
            return format_version(self.version)
        if self.framework.lower() in _SINGLE_DIGIT_VERSION_FRAMEWORKS and not any(self.version[1:]):
            return str(self.version[0])
        trimmed = format_version(self.version).split(".")
        if all(len(part) == 1 for part in trimmed):
            return "".join(trimmed)
        return ".".join(trimmed)

    def _short_profile(self) -> str:
        for short, long_name in PROFILE_SHORT_NAMES.items():
            if long_name and long_name.lower() == self.profile.lower():
                return short
        return self.profile

    def sort_key(self):
        """Key implementing the framework total order.

        Text parts fold to upper case, matching ordinal ignore-case ordering.
        """
        if self.is_any:
            rank = 0
        elif self.is_unsupported:
            rank = 2
        else:
            rank = 1
        return (
            rank,
            self.framework.upper(),
            self.version,
            self.profile.upper(),
            self.platform.upper(),
            self.platform_version,
        )

    def _identity(self):
        return (
            self.framework.upper(),
            self.version,
            self.profile.upper(),
            self.platform.upper(),
            self.platform_version,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, NuGetFramework):
            return NotImplemented
        return self._identity() == other._identity()

    def __lt__(self, other) -> bool:
        if not isinstance(other, NuGetFramework):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return self.get_short_folder_name()

    def __repr__(self) -> str:
        text = self.dotnet_framework_name
        if self.platform:
            text += f",Platform={self.platform}"
            if self.platform_version != EMPTY_VERSION:
                text += f"{format_version(self.platform_version)}"
        return f"NuGetFramework('{text}')"


ANY_FRAMEWORK = NuGetFramework(FrameworkIdentifiers.ANY.value)
AGNOSTIC_FRAMEWORK = NuGetFramework(FrameworkIdentifiers.AGNOSTIC.value)
UNSUPPORTED_FRAMEWORK = NuGetFramework(FrameworkIdentifiers.UNSUPPORTED.value)
