# classmanip/config.py
import re

# The only attribute a class list ever reads or writes
CLASS_ATTRIBUTE = "class"

# Class names are separated by runs of any whitespace
WHITESPACE_PATTERN = re.compile(r"\s")

TOKEN_SEPARATOR = " "


def get_classlist_config():
    """
    Settings shared by the parser, the element adapters and ClassList.

    Returned as a plain dict so callers (and tests) can inspect the values
    without importing the individual constants.
    """
    return {
        "attribute": CLASS_ATTRIBUTE,
        "whitespace": WHITESPACE_PATTERN,
        "separator": TOKEN_SEPARATOR,
    }
