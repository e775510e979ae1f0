# classmanip/classlist.py
"""
Chainable wrapper around the "class" attribute of an element.

ClassList parses the class attribute into an ordered list of names once,
when it is built. All changes stay in memory until apply() writes the joined
string back to the element:

    >>> ClassList("foo bar").add("baz").remove("foo").to_string()
    'bar baz'

Every mutating method returns the list itself so calls can be chained.
Methods taking a single name treat a name containing whitespace as several
names, so add("a b") adds both "a" and "b".
"""

import logging
from functools import cmp_to_key
from typing import Callable, Iterator, List, Optional

from .config import CLASS_ATTRIBUTE, TOKEN_SEPARATOR
from .exceptions import InvalidArgument
from .sources import DummySource, Source, as_source
from .tokens import Names, as_token_list, has_whitespace, split_class_string

logger = logging.getLogger(__name__)


class ClassList:
    def __init__(self, source):
        if isinstance(source, str):
            source = DummySource(source)
        else:
            try:
                source = as_source(source)
            except InvalidArgument:
                logger.debug("Cannot build a class list from %s", type(source).__name__)
                raise

        self._source: Source = source
        # Duplicates already present in the element are kept as they are;
        # only add() enforces uniqueness.
        self._classes: List[str] = split_class_string(
            source.get_attribute(CLASS_ATTRIBUTE)
        )

    @property
    def source(self) -> Source:
        return self._source

    def apply(self) -> "ClassList":
        """Write the class list to the source element."""
        value = self.to_string()
        logger.debug("Applying class=%r to %r", value, self._source)
        self._source.set_attribute(CLASS_ATTRIBUTE, value)
        return self

    def add(self, name: str) -> "ClassList":
        """Add a class name, unless it is already in the list."""
        if has_whitespace(name):
            return self.add_many(split_class_string(name))

        if name and not self.has(name):
            self._classes.append(name)

        return self

    def add_many(self, names: Names) -> "ClassList":
        for name in as_token_list(names):
            self.add(name)
        return self

    def has(self, name: str) -> bool:
        """
        Check whether a class name is in the list.

        A name with whitespace in it is true only when every name it
        contains is present.
        """
        if has_whitespace(name):
            return self.has_all(name)

        return name in self._classes

    def has_some(self, names: Names) -> bool:
        return any(self.has(name) for name in as_token_list(names))

    def has_all(self, names: Names) -> bool:
        return all(self.has(name) for name in as_token_list(names))

    def remove(self, name: str) -> "ClassList":
        if has_whitespace(name):
            return self.remove_many(split_class_string(name))

        if self.has(name):
            self._classes.remove(name)

        return self

    def remove_many(self, names: Names) -> "ClassList":
        for name in as_token_list(names):
            self.remove(name)
        return self

    def toggle(self, name: str) -> "ClassList":
        """Remove a class name when it is present, add it when it is not."""
        if has_whitespace(name):
            return self.toggle_many(split_class_string(name))

        return self.remove(name) if self.has(name) else self.add(name)

    def toggle_many(self, names: Names) -> "ClassList":
        for name in as_token_list(names):
            self.toggle(name)
        return self

    def clear(self) -> "ClassList":
        self._classes.clear()
        return self

    def filter(self, predicate: Callable[[str, int, "ClassList"], bool]) -> "ClassList":
        """
        Remove the class names that fail a predicate.

        Args:
            predicate: Called as predicate(name, index, class_list). Names for
                which it returns a falsy value are removed.

        Returns:
            The same ClassList

        The predicate sees the names and indices as they were before this
        call started removing anything.
        """
        for index, name in enumerate(list(self._classes)):
            if not predicate(name, index, self):
                self.remove(name)

        return self

    def sort(self, comparator: Optional[Callable[[str, str], int]] = None) -> "ClassList":
        """
        Sort the class names in place.

        Without a comparator names are ordered by code point. A comparator
        takes two names and returns a negative number, zero or a positive
        number, like a cmp() function.
        """
        if comparator is None:
            self._classes.sort()
        else:
            self._classes.sort(key=cmp_to_key(comparator))
        return self

    def size(self) -> int:
        return len(self._classes)

    def to_array(self) -> List[str]:
        return list(self._classes)

    def to_string(self) -> str:
        return TOKEN_SEPARATOR.join(self._classes)

    def copy_to(self, other) -> "ClassList":
        """
        Copy this list's class names onto another element.

        Returns a new ClassList for ``other`` holding only these names. Like
        any ClassList it has to be applied before the element changes.
        """
        copy = ClassList(other).clear().add_many(self._classes)
        logger.debug("Copied class=%r to %r", copy.to_string(), copy.source)
        return copy

    def __len__(self):
        return self.size()

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_array())

    def __contains__(self, name):
        return isinstance(name, str) and self.has(name)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"ClassList({self.to_string()!r})"


def class_list(source) -> ClassList:
    """Create a chainable class list for an element or a class string."""
    return ClassList(source)


def add(source, name: str) -> ClassList:
    """Add a class to an element and apply the change immediately."""
    return ClassList(source).add(name).apply()


def remove(source, name: str) -> ClassList:
    """Remove a class from an element and apply the change immediately."""
    return ClassList(source).remove(name).apply()


def toggle(source, name: str) -> ClassList:
    """Toggle a class on an element and apply the change immediately."""
    return ClassList(source).toggle(name).apply()


def has(source, name: str) -> bool:
    """Check whether an element has a class. Nothing is written."""
    return ClassList(source).has(name)
