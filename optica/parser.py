"""Parsing a command line against a set of options."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from optica.builder import ProgramOptionBuilder
from optica.program_option import OptionError, ParsingStatus, ProgramOption
from optica.utils import split_string


class UnknownArgumentError(OptionError):
    """A token matched none of the options."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown Argument: {token}")


class ParserResult:
    """Values found by a parse, looked up by option name."""

    def __init__(self, entries: Iterable[tuple[str, Any]] = ()) -> None:
        self._values: dict[str, Any] = {}
        for name, value in entries:
            self._values.setdefault(name, value)

    def get(self, name: str) -> Any:
        """Return the option's value, or None when it has none."""
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"no option named {name!r}") from None

    def __repr__(self) -> str:
        return f"ParserResult({self._values!r})"


class Parser:
    """Matches whitespace-separated tokens against a fixed list of options."""

    def __init__(self, *options: ProgramOption | ProgramOptionBuilder) -> None:
        built = []
        for opt in options:
            if isinstance(opt, ProgramOptionBuilder):
                opt = opt.build()
            elif not isinstance(opt, ProgramOption):
                raise TypeError(f"not an option: {opt!r}")
            built.append(opt)
        self.options: tuple[ProgramOption, ...] = tuple(built)

    def parse(self, data: str) -> ParserResult:
        """Parse ``data``, a space-separated command line.

        Each round tries the options in order until one matches the
        current token; options passed over along the way record their
        defaults.
        """
        tokens = split_string(data, " ")
        values: list[Any] = [None] * len(self.options)
        position = 0
        while True:
            matched = False
            for index, opt in enumerate(self.options):
                status, value, position = opt.try_consume(tokens, position)
                if status is not ParsingStatus.ERROR:
                    values[index] = value
                if status is ParsingStatus.OK:
                    matched = True
                    break
            if not matched and position < len(tokens):
                raise UnknownArgumentError(tokens[position])
            if position >= len(tokens):
                break
        return ParserResult(zip((opt.name for opt in self.options), values))