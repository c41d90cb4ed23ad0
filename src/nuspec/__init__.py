"""Package manifest (.nuspec) reading.

This package provides:
- reader.py: NuspecReader, the dependency/reference/framework assembly/content file/license resolvers
- core_reader.py: NuspecCoreReader, identity and plain metadata access
- models.py: immutable result values
- flags.py: include/exclude flag canonicalization
- document.py: XML loading, qualified names and lazy sequences
- errors.py: PackagingException
"""

from .core_reader import NuspecCoreReader
from .errors import PackagingException
from .flags import canonicalize_flags
from .models import (
    ContentFilesEntry,
    FrameworkSpecificGroup,
    PackageDependency,
    PackageDependencyGroup,
    PackageIdentity,
    PackageType,
    RepositoryMetadata,
)
from .reader import NuspecReader

__all__ = [
    "NuspecReader",
    "NuspecCoreReader",
    "PackagingException",
    "canonicalize_flags",
    "ContentFilesEntry",
    "FrameworkSpecificGroup",
    "PackageDependency",
    "PackageDependencyGroup",
    "PackageIdentity",
    "PackageType",
    "RepositoryMetadata",
]
