"""Properties that describe a command-line option."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


class Property:
    """Base for everything that can be combined into an option."""

    __slots__ = ()


@dataclass(frozen=True)
class Exact:
    """An option that takes exactly ``size`` arguments."""

    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError("arity size must be an integer")
        if self.size < 0:
            raise ValueError("arity size must not be negative")

    def number_args(self) -> int:
        """Return the number of arguments."""
        return self.size


ONE = Exact(1)
TWO = Exact(2)
THREE = Exact(3)
FOUR = Exact(4)


@dataclass(frozen=True)
class OneOrMore:
    """An option that takes at least one argument."""


Arity = Union[Exact, OneOrMore]


@dataclass(frozen=True)
class ArityProperty(Property):
    """How many arguments an option consumes."""

    arity: Arity

    def __post_init__(self) -> None:
        if not isinstance(self.arity, (Exact, OneOrMore)):
            raise TypeError(f"not an arity: {self.arity!r}")

    def number_args(self) -> int:
        """Return the argument count; only defined for an exact arity."""
        if not isinstance(self.arity, Exact):
            raise TypeError("argument count is only known for an exact arity")
        return self.arity.number_args()


@dataclass(frozen=True)
class RequiredProperty(Property):
    """Marks an option that must be given."""


@dataclass(frozen=True)
class DefaultValueProperty(Property):
    """The value an option takes when it is not given."""

    value: Any


@dataclass(frozen=True)
class ArgumentProperty(Property):
    """The long name of an option and the type of its value."""

    name: str
    value_type: type

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError("option name must be a string")


@dataclass(frozen=True)
class ShortNameProperty(Property):
    """The short (single dash) name of an option."""

    short_name: str

    def __post_init__(self) -> None:
        if not isinstance(self.short_name, str):
            raise TypeError("short name must be a string")