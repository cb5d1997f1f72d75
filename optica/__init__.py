"""Declarative command-line option parsing built from composable properties."""

__version__ = "0.1.0"

__all__ = ["builder", "parser", "program_option", "properties", "type_parsers", "utils"]