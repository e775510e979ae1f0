import classmanip


def test_add_applies_immediately(element):
    handle = classmanip.add(element, "nub")
    assert element.get_attribute("class") == "foo bar baz nub"
    assert handle.to_string() == "foo bar baz nub"


def test_remove_applies_immediately(element):
    classmanip.remove(element, "bar")
    assert element.get_attribute("class") == "foo baz"


def test_toggle_applies_immediately(element):
    classmanip.toggle(element, "bar nub")
    assert element.get_attribute("class") == "foo baz nub"


def test_has_does_not_write(make_element):
    el = make_element("  foo   bar ")
    assert classmanip.has(el, "foo") is True
    assert classmanip.has(el, "nub") is False
    assert el.get_attribute("class") == "  foo   bar "


def test_shortcuts_accept_class_strings():
    assert classmanip.add("a b", "c").to_string() == "a b c"
    assert classmanip.has("a b", "b a") is True
