import pytest

from optica.builder import (
    ProgramOptionBuilder,
    default_value,
    flag,
    nargs,
    option,
    required,
    short_name,
)
from optica.properties import (
    ONE,
    ArgumentProperty,
    ArityProperty,
    DefaultValueProperty,
    RequiredProperty,
    ShortNameProperty,
)


def test_pipe_concatenates_in_order():
    builder = option("Day", int) | nargs(ONE) | default_value(13) | short_name("D")
    assert builder.properties == (
        ArgumentProperty("Day", int),
        ArityProperty(ONE),
        DefaultValueProperty(13),
        ShortNameProperty("D"),
    )


def test_pipe_is_associative():
    a, b, c = option("Day", int), nargs(ONE), required()
    assert (a | b) | c == a | (b | c)


def test_build_creates_option():
    built = (option("Day", int) | nargs(ONE) | default_value(13) | short_name("D")).build()
    assert built.name == "Day"
    assert built.value_type is int
    assert built.default == 13
    assert built.short_name == "D"
    assert built.required is False


def test_flag_is_boolean():
    assert flag("verbose").build().value_type is bool


def test_required_builder():
    assert required().properties == (RequiredProperty(),)
    assert (option("Day", int) | required()).build().required is True


def test_build_without_name_fails():
    with pytest.raises(TypeError):
        (nargs(ONE) | default_value(1)).build()


def test_build_with_duplicate_property_fails():
    with pytest.raises(ValueError):
        (option("Day", int) | default_value(1) | default_value(2)).build()


def test_nargs_rejects_non_arity():
    with pytest.raises(TypeError):
        nargs("one")


def test_pipe_with_other_type_fails():
    with pytest.raises(TypeError):
        option("Day", int) | 3


def test_empty_builder_has_no_properties():
    assert ProgramOptionBuilder().properties == ()