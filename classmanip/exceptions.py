# classmanip/exceptions.py
"""Exceptions raised by classmanip."""


class ClassManipError(Exception):
    """Base class for all classmanip errors."""


class InvalidArgument(ClassManipError, TypeError):
    """
    Raised when a class list is built from something that is neither a
    class string nor an element exposing a class attribute.
    """

    def __init__(self, value):
        self.value = value
        super().__init__(
            "class_list() expects an element or a string as its argument, "
            f"got {type(value).__name__}"
        )
