"""Building options by combining properties with ``|``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from optica.program_option import ProgramOption
from optica.properties import (
    ArgumentProperty,
    Arity,
    ArityProperty,
    DefaultValueProperty,
    Property,
    RequiredProperty,
    ShortNameProperty,
)


@dataclass(frozen=True)
class ProgramOptionBuilder:
    """An ordered collection of properties that becomes an option."""

    properties: tuple[Property, ...] = ()

    def __or__(self, other: object) -> ProgramOptionBuilder:
        if not isinstance(other, ProgramOptionBuilder):
            return NotImplemented
        return ProgramOptionBuilder(self.properties + other.properties)

    def build(self) -> ProgramOption:
        """Turn the collected properties into a ProgramOption."""
        return ProgramOption(*self.properties)


def flag(name: str) -> ProgramOptionBuilder:
    """Start a boolean option."""
    return ProgramOptionBuilder((ArgumentProperty(name, bool),))


def option(name: str, value_type: type) -> ProgramOptionBuilder:
    """Start an option whose value has type ``value_type``."""
    return ProgramOptionBuilder((ArgumentProperty(name, value_type),))


def nargs(arity: Arity) -> ProgramOptionBuilder:
    """Set how many arguments the option takes."""
    return ProgramOptionBuilder((ArityProperty(arity),))


def default_value(value: Any) -> ProgramOptionBuilder:
    """Set the value used when the option is absent."""
    return ProgramOptionBuilder((DefaultValueProperty(value),))


def short_name(name: str) -> ProgramOptionBuilder:
    """Set the single-dash name of the option."""
    return ProgramOptionBuilder((ShortNameProperty(name),))


def required() -> ProgramOptionBuilder:
    """Mark the option as mandatory."""
    return ProgramOptionBuilder((RequiredProperty(),))