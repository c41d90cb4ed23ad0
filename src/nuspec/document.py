"""XML document helpers: loading, qualified names and attribute access."""
from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from typing import Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


def namespace_of(element: ET.Element) -> str:
    """Return the namespace URI of an element tag (``{uri}name``), or ''."""
    tag = element.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return ""


def local_name(element: ET.Element) -> str:
    """Return an element tag without its namespace."""
    tag = element.tag
    if isinstance(tag, str) and "}" in tag:
        return tag.split("}", 1)[1]
    return tag


class QualifiedNames:
    """Builds ElementTree tags in one document namespace.

    ``names("dependencies")`` gives ``{uri}dependencies`` for a namespaced
    document and ``dependencies`` for one without a namespace. Several names
    form a child path for ``findall``.
    """

    def __init__(self, namespace: str = ""):
        self.namespace = namespace or ""

    @classmethod
    def for_element(cls, element: ET.Element) -> "QualifiedNames":
        return cls(namespace_of(element))

    def __call__(self, *local_names: str) -> str:
        if self.namespace:
            return "/".join(f"{{{self.namespace}}}{name}" for name in local_names)
        return "/".join(local_names)


def get_attribute_value(element: ET.Element, name: str) -> Optional[str]:
    """Return an unqualified attribute value, or None when it is absent."""
    return element.get(name)


def element_text(element: ET.Element) -> str:
    """Return the concatenated text content of an element and its descendants."""
    return "".join(element.itertext())


def element_to_string(element: ET.Element) -> str:
    """Serialize an element (without its tail text) for error messages."""
    detached = copy.copy(element)
    detached.tail = None
    return ET.tostring(detached, encoding="unicode").strip()


def load_document(source) -> ET.Element:
    """Parse a manifest from a path or binary file object and return its root element.

    Raises:
        ET.ParseError: if the document is not well-formed XML.
        OSError: if the file cannot be read.
    """
    tree = ET.parse(source)
    return tree.getroot()


def parse_document(text: str | bytes) -> ET.Element:
    """Parse a manifest held in memory and return its root element."""
    return ET.fromstring(text)


class LazySequence(Generic[T]):
    """Re-iterable view over a generator function.

    Each iteration calls the factory again, so results are recomputed from
    the document and no iteration state is shared between consumers.
    """

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._factory!r})"
