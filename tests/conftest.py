import pytest


class FakeElement:
    """Minimal element with a Python-style attribute interface."""

    def __init__(self, class_string=None):
        self.attributes = {}
        if class_string is not None:
            self.attributes["class"] = class_string

    def get_attribute(self, name):
        return self.attributes.get(name)

    def set_attribute(self, name, value):
        self.attributes[name] = value


@pytest.fixture
def element():
    return FakeElement("foo bar baz")


@pytest.fixture
def make_element():
    return FakeElement
