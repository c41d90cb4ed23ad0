"""NuGet package versions and plain numeric (assembly style) versions."""
from __future__ import annotations

import functools
import re
from typing import Optional, Sequence, Tuple

import semantic_version

_VERSION_RE = re.compile(
    r"^(?P<numbers>\d+(?:\.\d+){0,3})"
    r"(?:-(?P<release>[0-9A-Za-z\-]+(?:\.[0-9A-Za-z\-]+)*))?"
    r"(?:\+(?P<metadata>[0-9A-Za-z\-]+(?:\.[0-9A-Za-z\-]+)*))?$"
)


@functools.total_ordering
class NuGetVersion:
    """A NuGet package version: up to four numeric parts plus SemVer 2 labels.

    Prerelease precedence follows SemVer 2 with labels compared ignoring case.
    Build metadata is kept for display but ignored by equality and ordering.
    """

    __slots__ = ("_numbers", "_semver", "_precedence", "_original")

    def __init__(
        self,
        major: int,
        minor: int = 0,
        patch: int = 0,
        revision: int = 0,
        release_labels: Sequence[str] = (),
        metadata: Optional[str] = None,
        original: Optional[str] = None,
    ):
        labels = tuple(release_labels)
        build = tuple(metadata.split(".")) if metadata else ()
        # semantic_version validates the label and metadata identifiers
        self._semver = semantic_version.Version(
            major=major, minor=minor, patch=patch, prerelease=labels, build=build
        )
        self._precedence = semantic_version.Version(
            major=0, minor=0, patch=0, prerelease=tuple(label.lower() for label in labels)
        )
        self._numbers = (major, minor, patch, revision)
        self._original = original

    @classmethod
    def parse(cls, value: str) -> "NuGetVersion":
        """Parse a version string, raising ValueError when it is not a valid NuGet version."""
        version = cls.try_parse(value)
        if version is None:
            raise ValueError(f"'{value}' is not a valid version string.")
        return version

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["NuGetVersion"]:
        """Parse a version string, returning None when it is invalid."""
        if value is None:
            return None
        text = value.strip()
        match = _VERSION_RE.match(text)
        if not match:
            return None
        numbers = [int(part) for part in match.group("numbers").split(".")]
        numbers.extend([0] * (4 - len(numbers)))
        release = match.group("release")
        labels = release.split(".") if release else ()
        try:
            return cls(*numbers, release_labels=labels, metadata=match.group("metadata"), original=text)
        except ValueError:
            return None

    @property
    def major(self) -> int:
        return self._numbers[0]

    @property
    def minor(self) -> int:
        return self._numbers[1]

    @property
    def patch(self) -> int:
        return self._numbers[2]

    @property
    def revision(self) -> int:
        return self._numbers[3]

    @property
    def release_labels(self) -> Tuple[str, ...]:
        return tuple(self._semver.prerelease)

    @property
    def release(self) -> str:
        return ".".join(self._semver.prerelease)

    @property
    def metadata(self) -> Optional[str]:
        return ".".join(self._semver.build) or None

    @property
    def is_prerelease(self) -> bool:
        return bool(self._semver.prerelease)

    @property
    def original_version(self) -> Optional[str]:
        return self._original

    def to_normalized_string(self) -> str:
        """Render ``major.minor.patch[.revision][-release]`` without metadata."""
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.revision:
            text += f".{self.revision}"
        if self.is_prerelease:
            text += f"-{self.release}"
        return text

    def to_full_string(self) -> str:
        text = self.to_normalized_string()
        if self.metadata:
            text += f"+{self.metadata}"
        return text

    def _key(self):
        return (self._numbers, self._precedence)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other) -> bool:
        if not isinstance(other, NuGetVersion):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((self._numbers, tuple(self._precedence.prerelease)))

    def __str__(self) -> str:
        return self.to_normalized_string()

    def __repr__(self) -> str:
        return f"NuGetVersion('{self.to_full_string()}')"


@functools.total_ordering
class NumericVersion:
    """A 2-4 part numeric version (``major.minor[.build[.revision]]``).

    Undeclared build and revision parts are -1 and sort before 0, so
    ``1.0 < 1.0.0 < 1.0.0.0``.
    """

    __slots__ = ("major", "minor", "build", "revision")

    def __init__(self, major: int, minor: int, build: int = -1, revision: int = -1):
        if major < 0 or minor < 0:
            raise ValueError("Version components must be non-negative.")
        if revision >= 0 and build < 0:
            raise ValueError("A revision requires a build component.")
        self.major = major
        self.minor = minor
        self.build = build
        self.revision = revision

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["NumericVersion"]:
        """Parse ``value``, returning None unless it has 2-4 non-negative integer parts."""
        if value is None:
            return None
        parts = value.strip().split(".")
        if not 2 <= len(parts) <= 4:
            return None
        numbers = []
        for part in parts:
            part = part.strip()
            if not part.isdigit() or not part.isascii():
                return None
            number = int(part)
            if number > 2147483647:
                return None
            numbers.append(number)
        return cls(*numbers)

    @classmethod
    def parse(cls, value: str) -> "NumericVersion":
        version = cls.try_parse(value)
        if version is None:
            raise ValueError(f"'{value}' is not a valid version string.")
        return version

    def _key(self):
        return (self.major, self.minor, self.build, self.revision)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NumericVersion):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other) -> bool:
        if not isinstance(other, NumericVersion):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return ".".join(str(part) for part in self._key() if part >= 0)

    def __repr__(self) -> str:
        return f"NumericVersion('{self}')"
