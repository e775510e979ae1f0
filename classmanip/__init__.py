# classmanip/__init__.py
"""
A chainable API for manipulating an element's classes or a class string.

    >>> from classmanip import class_list
    >>> class_list("foo bar").toggle("bar baz").to_string()
    'foo baz'

Nothing is written to an element until apply() is called. The add(),
remove() and toggle() shortcuts apply straight away.
"""

from .classlist import ClassList, add, class_list, has, remove, toggle
from .exceptions import ClassManipError, InvalidArgument
from .sources import DomSource, DummySource, ElementTreeSource, Source, TagSource, as_source

__all__ = [
    "ClassList",
    "ClassManipError",
    "DomSource",
    "DummySource",
    "ElementTreeSource",
    "InvalidArgument",
    "Source",
    "TagSource",
    "add",
    "as_source",
    "class_list",
    "has",
    "remove",
    "toggle",
]
