from typing import Any


class Value:
    """
    A caller-owned cell for a flag or parameter to write into.

    Python booleans and strings cannot be changed in place, so the
    caller keeps the cell and reads `.value` after parsing.
    """

    def __init__(self, value: Any = None):
        self.value = value

    def __repr__(self):
        return f"Value({self.value!r})"


class AttributeValue:
    """Writes through to an attribute of a caller object."""

    def __init__(self, target: Any, attribute: str):
        self.target = target
        self.attribute = attribute

    @property
    def value(self) -> Any:
        return getattr(self.target, self.attribute)

    @value.setter
    def value(self, value: Any) -> None:
        setattr(self.target, self.attribute, value)

    def __repr__(self):
        return f"AttributeValue({self.target!r}, {self.attribute!r})"
