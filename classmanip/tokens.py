# classmanip/tokens.py
"""Helpers for turning class strings into token lists and back."""

from typing import Iterable, List, Union

from .config import TOKEN_SEPARATOR, WHITESPACE_PATTERN

Names = Union[str, Iterable[str]]


def split_class_string(value) -> List[str]:
    """
    Split a class string on runs of whitespace, dropping empty segments.

    Non-string values are coerced with str() first, so a stray number ends
    up as a single token rather than an error.
    """
    if value is None:
        return []
    if not isinstance(value, str):
        value = str(value)
    return value.split()


def normalize_class_string(value) -> str:
    """Collapse whitespace runs and trim the ends of a class string."""
    return TOKEN_SEPARATOR.join(split_class_string(value))


def has_whitespace(name: str) -> bool:
    return bool(WHITESPACE_PATTERN.search(name))


def as_token_list(names: Names) -> List[str]:
    """
    Accept either a space-delimited class string or a sequence of names.

    Sequence items are kept as given (an item with spaces is split later by
    the single-name operation that receives it).
    """
    if isinstance(names, str):
        return split_class_string(names)
    return list(names)
