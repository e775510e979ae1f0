# classmanip/sources.py
"""
Element adapters for ClassList.

A class list reads the class attribute of its source once, when it is
built, and writes it back only on apply(). Anything exposing
get_attribute()/set_attribute() can act as a source. as_source() wraps the
element types Python code usually has at hand:

- BeautifulSoup tags (bs4 keeps "class" as a list of names)
- DOM-style elements with getAttribute()/setAttribute(), e.g. xml.dom.minidom
- xml.etree.ElementTree elements (and lxml elements, which share get()/set())
"""

from typing import Optional, Protocol
from xml.etree import ElementTree as ET

from bs4 import Tag

from .exceptions import InvalidArgument
from .tokens import normalize_class_string, split_class_string


class Source(Protocol):
    def get_attribute(self, name: str) -> Optional[str]: ...

    def set_attribute(self, name: str, value: str) -> None: ...


class DummySource:
    """
    Detached in-memory element used when a list is built from a bare string.

    Writes only ever land in the dummy's own attribute dict.
    """

    def __init__(self, class_string: str):
        if not isinstance(class_string, str):
            raise InvalidArgument(class_string)
        self.attributes = {"class": normalize_class_string(class_string)}

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def __repr__(self):
        return f"DummySource({self.attributes.get('class', '')!r})"


class TagSource:
    """Adapter for a BeautifulSoup Tag."""

    def __init__(self, tag: Tag):
        self.tag = tag

    def get_attribute(self, name: str) -> Optional[str]:
        value = self.tag.get(name)
        if value is None:
            return None
        # bs4 parses multi-valued attributes such as "class" into a list
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    def set_attribute(self, name: str, value: str) -> None:
        # Store class as a list, the same shape bs4 produces when parsing
        self.tag[name] = split_class_string(value)


class DomSource:
    """Adapter for DOM-style elements exposing getAttribute()/setAttribute()."""

    def __init__(self, element):
        self.element = element

    def get_attribute(self, name: str) -> Optional[str]:
        # minidom returns "" for a missing attribute
        return self.element.getAttribute(name) or None

    def set_attribute(self, name: str, value: str) -> None:
        self.element.setAttribute(name, value)


class ElementTreeSource:
    """Adapter for xml.etree (and lxml) elements."""

    def __init__(self, element):
        self.element = element

    def get_attribute(self, name: str) -> Optional[str]:
        return self.element.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.element.set(name, value)


def _has_methods(obj, *names) -> bool:
    return all(callable(getattr(obj, name, None)) for name in names)


def as_source(obj) -> Source:
    """
    Wrap an element so ClassList can read and write its class attribute.

    Args:
        obj: A Source, a bs4 Tag, a DOM-style element or an ElementTree element

    Returns:
        An object implementing the Source protocol

    Raises:
        InvalidArgument: If obj is none of the supported element types
    """
    # Tag must be checked first: its __getattr__ turns unknown attribute
    # names into child lookups, so duck typing on it is unreliable.
    if isinstance(obj, Tag):
        return TagSource(obj)
    if isinstance(obj, (str, bytes, int, float, bool)) or obj is None:
        raise InvalidArgument(obj)
    if _has_methods(obj, "get_attribute", "set_attribute"):
        return obj
    if _has_methods(obj, "getAttribute", "setAttribute"):
        return DomSource(obj)
    if isinstance(obj, ET.Element) or (
        _has_methods(obj, "get", "set") and hasattr(obj, "attrib")
    ):
        return ElementTreeSource(obj)

    raise InvalidArgument(obj)
