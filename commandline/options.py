from typing import Iterable, MutableSequence, Set, Union

from commandline.exceptions import InvalidOptionFormatError, OptionExistsError
from commandline.values import AttributeValue, Value

Binding = Union[Value, AttributeValue]


def option_name(name: str) -> str:
    """Get the option name including dashes."""
    return "--" + name


class Label:
    """Name and description shared by every kind of option."""

    __slots__ = ["_name", "_description"]

    def __init__(self, name: str, description: str = ""):
        # name: option name without dashes.
        self._name = name
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def option_name(self) -> str:
        return option_name(self._name)

    def __repr__(self):
        return f"Label({self._name!r}, {self._description!r})"


class _Described:
    label: Label

    @property
    def name(self) -> str:
        return self.label.name

    @property
    def description(self) -> str:
        return self.label.description

    def option_name(self) -> str:
        return self.label.option_name()

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, {self.description!r})"


class Flag(_Described):
    """
    A boolean flag.  The presence of this flag in the command line options
    will set its value to true.
    """

    def __init__(self, name: str, value: Binding, description: str = ""):
        self.label = Label(name, description)
        self.value = value


class Parameter(_Described):
    """A single parameter.  The parameter value follows the option name."""

    def __init__(self, name: str, value: Binding, description: str = ""):
        self.label = Label(name, description)
        self.value = value


class List(_Described):
    """
    A list of parameters.  The parameters follow the option name until
    another option name (identified by two dashes) or the end of the list
    is encountered.
    """

    def __init__(self, name: str, values: MutableSequence[str], description: str = ""):
        self.label = Label(name, description)
        self.values = values


Option = Union[Flag, Parameter, List]


def check_options(options: Iterable[Option]) -> None:
    """
    Check a collection for names that cannot be matched or that collide.

    parse() itself never does this; call it once where the options are
    declared.
    """
    seen: Set[str] = set()
    for option in options:
        name = option.name
        if not name or name.startswith("-"):
            raise InvalidOptionFormatError(name)
        if name in seen:
            raise OptionExistsError(name)
        seen.add(name)
