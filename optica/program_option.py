"""A single command-line option and its token matching."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto
from typing import Any, NamedTuple

from optica.properties import (
    ArgumentProperty,
    ArityProperty,
    DefaultValueProperty,
    Property,
    RequiredProperty,
    ShortNameProperty,
)
from optica.type_parsers import TypeParseError, parse_type


class ParsingStatus(Enum):
    """Outcome of trying an option against the token stream."""

    OK = auto()
    PARSED_FROM_DEFAULT = auto()
    ERROR = auto()


class OptionError(Exception):
    """Base for errors raised while parsing options."""


class RequiredOptionMissingError(OptionError):
    """A required option was not found."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Option '{name}' is required but not found")


class OptionValueError(OptionError):
    """An option was found but its arguments could not be parsed."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Cannot parse option: {token}")


class ConsumeResult(NamedTuple):
    status: ParsingStatus
    value: Any
    position: int


class ArgsResult(NamedTuple):
    ok: bool
    value: Any
    position: int


class ProgramOption:
    """An option assembled from properties."""

    def __init__(self, *properties: Property) -> None:
        seen: set[type] = set()
        for prop in properties:
            if not isinstance(prop, Property):
                raise TypeError(f"not a property: {prop!r}")
            if type(prop) in seen:
                raise ValueError(f"duplicate property {type(prop).__name__}")
            seen.add(type(prop))
        self.properties: tuple[Property, ...] = properties

        argument = self._find(ArgumentProperty)
        if argument is None:
            raise TypeError("an option needs a name and value type")
        self.name: str = argument.name
        self.value_type: type = argument.value_type

        self.arity: ArityProperty | None = self._find(ArityProperty)
        short = self._find(ShortNameProperty)
        self.short_name: str | None = short.short_name if short else None
        self.required: bool = self._find(RequiredProperty) is not None
        default = self._find(DefaultValueProperty)
        self.has_default: bool = default is not None
        self.default: Any = default.value if default else None

    def _find(self, kind: type) -> Any:
        return next((p for p in self.properties if isinstance(p, kind)), None)

    def __repr__(self) -> str:
        return f"ProgramOption{self.properties!r}"

    def _fallback(self, position: int) -> ConsumeResult:
        if self.required:
            raise RequiredOptionMissingError(self.name)
        if self.has_default:
            return ConsumeResult(ParsingStatus.PARSED_FROM_DEFAULT, self.default, position)
        return ConsumeResult(ParsingStatus.ERROR, None, position)

    def _matches(self, token: str) -> bool:
        if token.startswith("--") and token[2:] == self.name:
            return True
        return (
            self.short_name is not None
            and token.startswith("-")
            and token[1:] == self.short_name
        )

    def try_consume(self, tokens: Sequence[str], start: int) -> ConsumeResult:
        """Try to match this option at ``tokens[start]``.

        Returns the status, the value and the position after what was
        consumed. A required option that does not match raises
        RequiredOptionMissingError; a matched option whose arguments do
        not parse raises OptionValueError.
        """
        if start >= len(tokens):
            return self._fallback(start)
        token = tokens[start]
        if not self._matches(token):
            return self._fallback(start)
        ok, value, position = self.consume_args(tokens, start + 1)
        if not ok:
            raise OptionValueError(token)
        return ConsumeResult(ParsingStatus.OK, value, position)

    def consume_args(self, tokens: Sequence[str], start: int) -> ArgsResult:
        """Consume this option's arguments beginning at ``tokens[start]``."""
        if self.arity is None:
            return ArgsResult(False, None, start)
        count = self.arity.number_args()
        end = start + count
        if end > len(tokens):
            return ArgsResult(False, None, start)
        text = " ".join(tokens[start:end])
        try:
            value = parse_type(self.value_type, text)
        except TypeParseError:
            return ArgsResult(False, None, end)
        return ArgsResult(True, value, end)