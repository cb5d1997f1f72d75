# optica

optica builds command-line option parsers by composing small option
properties with the `|` operator. Each option declares its long name, its
value type, how many arguments it takes, and optionally a short name, a
default value or a required marker.

## Installation

```
pip install optica
```

## Usage

```python
from optica.builder import option, nargs, default_value, short_name
from optica.properties import Exact
from optica.parser import Parser

parser = Parser(
    option("Day", int) | nargs(Exact(1)) | default_value(13) | short_name("D")
)

print(parser.parse("--Day 5").get("Day"))  # 5
print(parser.parse("-D 7").get("Day"))     # 7
print(parser.parse("").get("Day"))         # 13, taken from the default
```

### Building options

The functions in `optica.builder` each return a `ProgramOptionBuilder`
holding one property:

- `option(name, value_type)`: the long name (matched as `--name`) and the value type
- `flag(name)`: like `option`, with value type `bool`
- `nargs(arity)`: how many tokens follow the option, for example `Exact(1)`
- `default_value(value)`: the value used when the option is absent
- `short_name(name)`: an alternative spelling matched as `-name`
- `required()`: the option must be present

Builders combine with `|`; `ProgramOptionBuilder.build()` turns the result
into a `optica.program_option.ProgramOption`. An option needs a name and
type (from `option` or `flag`), and each kind of property may appear only
once. A `Parser` accepts either builders or finished options.

`optica.properties` defines the property classes and the arities `Exact(n)`
(with the shortcuts `ONE`, `TWO`, `THREE`, `FOUR`) and `OneOrMore`. Only an
exact arity has a known argument count; `ArityProperty.number_args()` raises
`TypeError` for `OneOrMore`.

### How parsing works

`Parser.parse(data)` splits `data` on single spaces (so two spaces in a row
produce an empty token, which matches no option). In each round the options
are tried in order against the current token until one matches; options
tried along the way that have a default record it. The matched option
consumes its arguments, which are joined with spaces and converted to its
value type.

`ParserResult.get(name)` returns the option's value, or `None` when it got
none. Asking for a name that no option declares raises `KeyError`.

### Values

Values are converted with `optica.type_parsers.parse_type`. Only `int` is
supported: `parse_int` reads an optional minus sign followed by digits,
ignores any trailing text, and requires the value to fit in a signed 32-bit
integer. Any other value type, including the `bool` of `flag`, raises
`TypeError` when an argument has to be converted. An option without
`nargs` cannot take a value, so giving it on the command line raises
`OptionValueError`.

### Errors

- `optica.parser.UnknownArgumentError`: a token matched no option
- `optica.program_option.RequiredOptionMissingError`: a required option was not found
- `optica.program_option.OptionValueError`: an option's arguments were missing or could not be parsed
- `optica.type_parsers.TypeParseError`: text could not be converted to an integer

The first three derive from `optica.program_option.OptionError`.

## What it does not do

optica is a library only: it installs no command, generates no help or
usage text, and reads no values from the environment or configuration files.

## Running the tests

```
pip install -e ".[test]"
pytest
```