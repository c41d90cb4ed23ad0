"""Manifest reader: dependency, reference, framework assembly, content file and license resolution."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from common.logging_utils import extra_context, is_debug_enabled
from constants import LogCode, Messages
from frameworks import ANY_FRAMEWORK, NuGetFramework
from frameworks import parse as parse_framework
from licenses import (
    CURRENT_VERSION,
    EMPTY_VERSION,
    LicenseExpressionParsingError,
    LicenseMetadata,
    LicenseType,
    parse_license_expression,
)
from versioning import NumericVersion, VersionRange, parse_version_range

from .core_reader import ID, VERSION, NuspecCoreReader
from .document import LazySequence, element_text, element_to_string, get_attribute_value
from .errors import PackagingException
from .flags import canonicalize_flags, ignore_case_key
from .models import (
    ContentFilesEntry,
    FrameworkSpecificGroup,
    PackageDependency,
    PackageDependencyGroup,
    RepositoryMetadata,
)

logger = logging.getLogger(__name__)

# node names
DEPENDENCIES = "dependencies"
GROUP = "group"
TARGET_FRAMEWORK = "targetFramework"
DEPENDENCY = "dependency"
REFERENCES = "references"
REFERENCE = "reference"
FILE = "file"
FRAMEWORK_ASSEMBLIES = "frameworkAssemblies"
FRAMEWORK_ASSEMBLY = "frameworkAssembly"
ASSEMBLY_NAME = "assemblyName"
LANGUAGE = "language"
CONTENT_FILES = "contentFiles"
FILES = "files"
BUILD_ACTION = "buildAction"
FLATTEN = "flatten"
COPY_TO_OUTPUT = "copyToOutput"
INCLUDE_FLAGS = "include"
EXCLUDE_FLAGS = "exclude"
LICENSE_URL = "licenseUrl"
REPOSITORY = "repository"
LICENSE = "license"
TYPE = "type"

_BOOLEAN_VALUES = {"true": True, "false": False}


class NuspecReader(NuspecCoreReader):
    """Interprets a manifest's dependency groups, references, framework assemblies,
    content files and license.

    Every resolver is a pure function of the document. Lazy resolvers return a
    LazySequence that re-runs the resolution on each iteration.

    Args:
        root: Parsed manifest root element.
        framework_parser: Turns a framework string into a NuGetFramework;
            defaults to ``frameworks.parse``.
    """

    def __init__(
        self,
        root: ET.Element,
        framework_parser: Optional[Callable[[str], NuGetFramework]] = None,
    ):
        super().__init__(root)
        self._framework_parser = framework_parser or parse_framework

    # -- dependencies -----------------------------------------------------

    def get_dependency_groups(self, use_strict_version_check: bool = False) -> LazySequence[PackageDependencyGroup]:
        """Read package dependencies for all frameworks.

        Explicit ``group`` elements each produce a group, even when empty.
        Only a manifest without any group falls back to the legacy flat list,
        which produces a single Any-framework group when it is non-empty.

        Args:
            use_strict_version_check: Reject dependencies whose version range
                is missing or unparseable instead of leaving them unconstrained.
        """
        return LazySequence(lambda: self._iter_dependency_groups(use_strict_version_check))

    def _iter_dependency_groups(self, use_strict_version_check: bool) -> Iterator[PackageDependencyGroup]:
        names = self._names
        group_found = False

        for group in self._metadata.findall(names(DEPENDENCIES, GROUP)):
            group_found = True
            framework = self._group_framework(group)
            packages = self._get_package_dependencies(
                group.findall(names(DEPENDENCY)), use_strict_version_check
            )
            yield PackageDependencyGroup(framework, packages)

        # legacy behavior
        if not group_found:
            packages = self._get_package_dependencies(
                self._metadata.findall(names(DEPENDENCIES, DEPENDENCY)), use_strict_version_check
            )
            if packages:
                if is_debug_enabled(logger):
                    logger.debug("Using legacy ungrouped dependencies", extra=extra_context(
                        event="decision", component="nuspec", action="get_dependency_groups",
                        outcome="legacy_fallback", count=len(packages)
                    ))
                yield PackageDependencyGroup(ANY_FRAMEWORK, packages)

    def _get_package_dependencies(
        self, nodes: Iterable[ET.Element], use_strict_version_check: bool
    ) -> Tuple[PackageDependency, ...]:
        # dict keeps first-seen order while absorbing structural duplicates
        packages: Dict[PackageDependency, None] = {}

        for node in nodes:
            version_range: Optional[VersionRange] = None
            range_text = get_attribute_value(node, VERSION)

            if range_text:
                version_range = parse_version_range(range_text)
                if version_range is None and use_strict_version_check:
                    raise self._invalid_dependency_version(node, range_text)
            elif use_strict_version_check:
                raise self._invalid_dependency_version(node, range_text)

            dependency_id = get_attribute_value(node, ID)
            if not dependency_id:
                raise self._invalid_entry(node)

            dependency = PackageDependency(
                dependency_id,
                version_range,
                canonicalize_flags(get_attribute_value(node, INCLUDE_FLAGS)),
                canonicalize_flags(get_attribute_value(node, EXCLUDE_FLAGS)),
            )
            packages.setdefault(dependency, None)

        return tuple(packages)

    # -- references -------------------------------------------------------

    def get_reference_groups(self) -> LazySequence[FrameworkSpecificGroup]:
        """Reference item groups, with the pre-grouping flat list as fallback."""
        return LazySequence(self._iter_reference_groups)

    def _iter_reference_groups(self) -> Iterator[FrameworkSpecificGroup]:
        names = self._names
        group_found = False

        for group in self._metadata.findall(names(REFERENCES, GROUP)):
            group_found = True
            framework = self._group_framework(group)
            items = self._reference_files(group.findall(names(REFERENCE)))
            yield FrameworkSpecificGroup(framework, items)

        # flat list of references, only used when there are no groups
        if not group_found:
            items = self._reference_files(self._metadata.findall(names(REFERENCES, REFERENCE)))
            if items:
                yield FrameworkSpecificGroup(ANY_FRAMEWORK, items)

    @staticmethod
    def _reference_files(nodes: Iterable[ET.Element]) -> Tuple[str, ...]:
        files = (get_attribute_value(node, FILE) for node in nodes)
        return tuple(name for name in files if name)

    # -- framework assemblies ---------------------------------------------

    def get_framework_assembly_groups(self) -> List[FrameworkSpecificGroup]:
        """Framework assembly groups merged by parsed framework and sorted.

        ``targetFramework`` may list several frameworks separated by commas;
        each listed framework receives the assembly names. Frameworks that
        parse to the same identity are merged even when spelled differently.
        """
        names = self._names

        # Group elements sharing the same declared text first
        by_declared_text: Dict[str, List[ET.Element]] = {}
        for node in self._metadata.findall(names(FRAMEWORK_ASSEMBLIES, FRAMEWORK_ASSEMBLY)):
            declared = get_attribute_value(node, TARGET_FRAMEWORK) or ""
            by_declared_text.setdefault(declared, []).append(node)

        groups: Dict[NuGetFramework, Dict[str, str]] = {}
        for declared, nodes in by_declared_text.items():
            if not declared:
                frameworks = [ANY_FRAMEWORK]
            else:
                frameworks = [
                    self._framework_parser(segment.strip())
                    for segment in declared.split(",")
                    if segment.strip()
                ]

            assembly_names = [get_attribute_value(node, ASSEMBLY_NAME) for node in nodes]
            for framework in frameworks:
                items = groups.setdefault(framework, {})
                for assembly_name in assembly_names:
                    if assembly_name:
                        items.setdefault(ignore_case_key(assembly_name), assembly_name)

        results = [
            FrameworkSpecificGroup(framework, tuple(sorted(groups[framework].values(), key=ignore_case_key)))
            for framework in sorted(groups, key=NuGetFramework.sort_key)
        ]
        if is_debug_enabled(logger):
            logger.debug("Merged framework assembly groups", extra=extra_context(
                event="function_exit", component="nuspec", action="get_framework_assembly_groups",
                count=len(results)
            ))
        return results

    # -- content files ----------------------------------------------------

    def get_content_files(self) -> LazySequence[ContentFilesEntry]:
        """Content file entries; a missing ``include`` or a non-boolean flag raises."""
        return LazySequence(self._iter_content_files)

    def _iter_content_files(self) -> Iterator[ContentFilesEntry]:
        for node in self._metadata.findall(self._names(CONTENT_FILES, FILES)):
            include = get_attribute_value(node, INCLUDE_FLAGS)
            if not include:
                raise self._invalid_entry(node)

            exclude = get_attribute_value(node, EXCLUDE_FLAGS) or None

            yield ContentFilesEntry(
                include=include,
                exclude=exclude,
                build_action=get_attribute_value(node, BUILD_ACTION),
                copy_to_output=self._attribute_as_optional_bool(node, COPY_TO_OUTPUT),
                flatten=self._attribute_as_optional_bool(node, FLATTEN),
            )

    def _attribute_as_optional_bool(self, node: ET.Element, name: str) -> Optional[bool]:
        value = get_attribute_value(node, name)
        if value is None:
            return None
        try:
            return _BOOLEAN_VALUES[value.lower()]
        except KeyError:
            raise self._invalid_entry(node) from None

    # -- license ----------------------------------------------------------

    def get_license_metadata(self) -> Optional[LicenseMetadata]:
        """Interpret the ``license`` element.

        Returns None when there is no license element or its type is not
        recognized. Expression licenses declared with a version newer than
        this reader understands are returned without a parsed expression.

        Raises:
            PackagingException: NU5034 for an invalid ``version`` attribute,
                NU5032 for an expression that does not parse.
        """
        node = self._metadata.find(self._names(LICENSE))
        if node is None:
            return None

        license_type = LicenseType.from_text(get_attribute_value(node, TYPE))
        if license_type is None:
            if is_debug_enabled(logger):
                logger.debug("Ignoring license with unrecognized type", extra=extra_context(
                    event="decision", component="nuspec", action="get_license_metadata",
                    target=get_attribute_value(node, TYPE), outcome="ignored"
                ))
            return None

        license_text = element_text(node)
        version_text = get_attribute_value(node, VERSION)

        if version_text is not None:
            version = NumericVersion.try_parse(version_text)
            if version is None:
                raise PackagingException(
                    Messages.INVALID_LICENSE_EXPRESSION_VERSION.format(version_text),
                    log_code=LogCode.NU5034,
                )
        else:
            version = EMPTY_VERSION

        if license_type == LicenseType.EXPRESSION:
            if version <= CURRENT_VERSION:
                try:
                    expression = parse_license_expression(license_text)
                except LicenseExpressionParsingError as e:
                    raise PackagingException(str(e), log_code=LogCode.NU5032) from e
                return LicenseMetadata(license_type, license_text, expression, version)

            if is_debug_enabled(logger):
                logger.debug("License expression version newer than supported", extra=extra_context(
                    event="decision", component="nuspec", action="get_license_metadata",
                    target=str(version), outcome="not_evaluated"
                ))
            return LicenseMetadata(license_type, license_text, None, version)

        return LicenseMetadata(license_type, license_text, None, EMPTY_VERSION)

    # -- scalar metadata --------------------------------------------------

    def get_title(self) -> Optional[str]:
        return self.get_metadata_value("title")

    def get_authors(self) -> Optional[str]:
        return self.get_metadata_value("authors")

    def get_owners(self) -> Optional[str]:
        return self.get_metadata_value("owners")

    def get_tags(self) -> Optional[str]:
        return self.get_metadata_value("tags")

    def get_description(self) -> Optional[str]:
        return self.get_metadata_value("description")

    def get_release_notes(self) -> Optional[str]:
        return self.get_metadata_value("releaseNotes")

    def get_summary(self) -> Optional[str]:
        return self.get_metadata_value("summary")

    def get_project_url(self) -> Optional[str]:
        return self.get_metadata_value("projectUrl")

    def get_icon_url(self) -> Optional[str]:
        return self.get_metadata_value("iconUrl")

    def get_copyright(self) -> Optional[str]:
        return self.get_metadata_value("copyright")

    def get_language(self) -> Optional[str]:
        return self.get_metadata_value(LANGUAGE)

    def get_license_url(self) -> Optional[str]:
        return self.get_metadata_value(LICENSE_URL)

    def get_require_license_acceptance(self) -> bool:
        value = self.get_metadata_value("requireLicenseAcceptance")
        return value is not None and value.strip().lower() == "true"

    def get_repository_metadata(self) -> RepositoryMetadata:
        node = self._metadata.find(self._names(REPOSITORY))
        if node is None:
            return RepositoryMetadata()
        return RepositoryMetadata(
            type=get_attribute_value(node, "type") or "",
            url=get_attribute_value(node, "url") or "",
            branch=get_attribute_value(node, "branch") or "",
            commit=get_attribute_value(node, "commit") or "",
        )

    # -- helpers ----------------------------------------------------------

    def _group_framework(self, group: ET.Element) -> NuGetFramework:
        declared = get_attribute_value(group, TARGET_FRAMEWORK)
        if not declared or not declared.strip():
            return ANY_FRAMEWORK
        return self._framework_parser(declared)

    def _invalid_entry(self, node: ET.Element) -> PackagingException:
        return PackagingException(
            Messages.INVALID_NUSPEC_ENTRY.format(element_to_string(node), self.identity_text())
        )

    def _invalid_dependency_version(self, node: ET.Element, range_text: Optional[str]) -> PackagingException:
        return PackagingException(
            Messages.INVALID_DEPENDENCY_VERSION.format(
                get_attribute_value(node, ID), self.identity_text(), range_text or ""
            )
        )
