import pytest

from classmanip.config import get_classlist_config
from classmanip.tokens import as_token_list, has_whitespace, normalize_class_string, split_class_string


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("foo bar", ["foo", "bar"]),
        ("  foo   bar  ", ["foo", "bar"]),
        ("foo\tbar\n baz", ["foo", "bar", "baz"]),
        ("", []),
        ("   ", []),
        (None, []),
    ],
)
def test_split_class_string(raw, expected):
    assert split_class_string(raw) == expected


def test_split_class_string_coerces_non_strings():
    """Non-string values become a single token, as str() renders them."""
    assert split_class_string(42) == ["42"]


def test_normalize_class_string():
    assert normalize_class_string("\t a   b\n\nc ") == "a b c"
    assert normalize_class_string("") == ""


def test_has_whitespace():
    assert has_whitespace("a b")
    assert has_whitespace("a\tb")
    assert has_whitespace(" ")
    assert not has_whitespace("ab")
    assert not has_whitespace("")


def test_as_token_list_accepts_strings_and_sequences():
    assert as_token_list("a  b c") == ["a", "b", "c"]
    assert as_token_list(["a", "b c"]) == ["a", "b c"]
    assert as_token_list(("a",)) == ["a"]


def test_config_exposes_class_attribute():
    config = get_classlist_config()
    assert config["attribute"] == "class"
    assert config["separator"] == " "
    assert config["whitespace"].search("a b")
