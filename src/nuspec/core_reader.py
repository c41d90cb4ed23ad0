"""Base manifest reader: document access, identity and scalar metadata."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from constants import Messages
from versioning import NuGetVersion, NumericVersion

from .document import (
    QualifiedNames,
    element_text,
    get_attribute_value,
    load_document,
    local_name,
    parse_document,
)
from .errors import PackagingException
from .models import PackageIdentity, PackageType

logger = logging.getLogger(__name__)

METADATA = "metadata"
ID = "id"
VERSION = "version"
MIN_CLIENT_VERSION = "minClientVersion"
DEVELOPMENT_DEPENDENCY = "developmentDependency"
SERVICEABLE = "serviceable"
PACKAGE_TYPES = "packageTypes"
PACKAGE_TYPE = "packageType"
NAME = "name"


class NuspecCoreReader:
    """Reads the parts of a manifest every package has: identity and plain metadata.

    The reader wraps an already parsed element tree and never modifies it.
    """

    def __init__(self, root: ET.Element):
        self._root = root
        metadata = root.find(QualifiedNames.for_element(root)(METADATA))
        if metadata is None:
            raise PackagingException(Messages.MISSING_METADATA_NODE.format(METADATA))
        self._metadata = metadata
        self._names = QualifiedNames.for_element(metadata)

    @classmethod
    def from_file(cls, source, **kwargs):
        """Build a reader from a path or binary file object."""
        return cls(load_document(source), **kwargs)

    @classmethod
    def from_string(cls, text, **kwargs):
        """Build a reader from XML text."""
        return cls(parse_document(text), **kwargs)

    @property
    def xml(self) -> ET.Element:
        return self._root

    @property
    def metadata_node(self) -> ET.Element:
        return self._metadata

    def get_metadata_value(self, name: str) -> Optional[str]:
        """Return the text of the first ``metadata/<name>`` element, or None."""
        node = self._metadata.find(self._names(name))
        if node is None:
            return None
        return element_text(node)

    def get_id(self) -> Optional[str]:
        value = self.get_metadata_value(ID)
        return value.strip() if value is not None else None

    def get_version(self) -> Optional[NuGetVersion]:
        value = self.get_metadata_value(VERSION)
        if value is None:
            return None
        version = NuGetVersion.try_parse(value)
        if version is None:
            raise PackagingException(Messages.INVALID_PACKAGE_VERSION.format(value.strip()))
        return version

    def get_identity(self) -> PackageIdentity:
        package_id = self.get_id()
        if not package_id:
            raise PackagingException(Messages.MISSING_PACKAGE_ID)
        return PackageIdentity(package_id, self.get_version())

    def identity_text(self) -> str:
        """Identity for error messages; never raises, even for a broken id or version."""
        package_id = (self.get_metadata_value(ID) or "").strip()
        version = (self.get_metadata_value(VERSION) or "").strip()
        if package_id and version:
            return f"{package_id}.{version}"
        return package_id or version

    def get_min_client_version(self) -> Optional[NuGetVersion]:
        value = get_attribute_value(self._metadata, MIN_CLIENT_VERSION)
        if not value:
            return None
        version = NuGetVersion.try_parse(value)
        if version is None:
            raise PackagingException(Messages.INVALID_PACKAGE_VERSION.format(value))
        return version

    def get_package_types(self) -> Tuple[PackageType, ...]:
        package_types: List[PackageType] = []
        for node in self._metadata.findall(self._names(PACKAGE_TYPES, PACKAGE_TYPE)):
            name = get_attribute_value(node, NAME)
            if not name:
                continue
            version_text = get_attribute_value(node, VERSION)
            if version_text:
                version = NumericVersion.try_parse(version_text)
                if version is None:
                    raise PackagingException(Messages.INVALID_PACKAGE_VERSION.format(version_text))
                package_types.append(PackageType(name, version))
            else:
                package_types.append(PackageType(name))
        return tuple(package_types)

    def _get_flag(self, name: str) -> bool:
        value = self.get_metadata_value(name)
        return value is not None and value.strip().lower() == "true"

    def is_serviceable(self) -> bool:
        return self._get_flag(SERVICEABLE)

    def get_development_dependency(self) -> bool:
        return self._get_flag(DEVELOPMENT_DEPENDENCY)

    def get_metadata(self) -> List[Tuple[str, str]]:
        """Return (name, text) for every metadata child that holds plain text."""
        items: List[Tuple[str, str]] = []
        for node in self._metadata:
            if not isinstance(node.tag, str) or len(node):
                continue
            value = element_text(node)
            if value:
                items.append((local_name(node), value))
        return items
