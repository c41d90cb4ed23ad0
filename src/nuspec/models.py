"""Immutable domain values produced by the manifest reader."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from frameworks import NuGetFramework
from frameworks.constants import EMPTY_FOLDER_PLACEHOLDER
from versioning import NuGetVersion, NumericVersion, VersionRange


@dataclass(frozen=True, eq=False)
class PackageIdentity:
    """Package id and version; ids compare ignoring case."""
    id: str
    version: Optional[NuGetVersion] = None

    @property
    def has_version(self) -> bool:
        return self.version is not None

    def __eq__(self, other) -> bool:
        if not isinstance(other, PackageIdentity):
            return NotImplemented
        return self.id.lower() == other.id.lower() and self.version == other.version

    def __hash__(self) -> int:
        return hash((self.id.lower(), self.version))

    def __str__(self) -> str:
        if self.version is None:
            return self.id
        return f"{self.id}.{self.version}"


@dataclass(frozen=True, eq=False)
class PackageDependency:
    """A dependency on another package.

    Equality is structural: the id and the flags compare ignoring case, the
    range by value.
    """
    id: str
    version_range: Optional[VersionRange] = None
    include: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.id:
            raise ValueError("A package dependency requires a non-empty id.")

    def _key(self):
        return (
            self.id.lower(),
            self.version_range,
            tuple(flag.lower() for flag in self.include),
            tuple(flag.lower() for flag in self.exclude),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, PackageDependency):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        if self.version_range is None:
            return self.id
        return f"{self.id} {self.version_range}"


@dataclass(frozen=True)
class PackageDependencyGroup:
    """Dependencies declared for one target framework, free of duplicates."""
    target_framework: NuGetFramework
    packages: Tuple[PackageDependency, ...] = ()


@dataclass(frozen=True)
class FrameworkSpecificGroup:
    """Items (reference files, assembly names) declared for one target framework."""
    target_framework: NuGetFramework
    items: Tuple[str, ...] = ()

    @property
    def has_empty_folder(self) -> bool:
        return any(item == EMPTY_FOLDER_PLACEHOLDER for item in self.items)


@dataclass(frozen=True)
class ContentFilesEntry:
    """A ``contentFiles/files`` declaration."""
    include: str
    exclude: Optional[str] = None
    build_action: Optional[str] = None
    copy_to_output: Optional[bool] = None
    flatten: Optional[bool] = None


@dataclass(frozen=True)
class RepositoryMetadata:
    """Source repository information; missing attributes are empty strings."""
    type: str = ""
    url: str = ""
    branch: str = ""
    commit: str = ""


@dataclass(frozen=True)
class PackageType:
    """A declared package type such as ``Dependency`` or ``DotnetTool``."""
    name: str
    version: NumericVersion = field(default_factory=lambda: NumericVersion(0, 0))
