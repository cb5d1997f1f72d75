import pytest

from optica.properties import (
    FOUR,
    ONE,
    THREE,
    TWO,
    ArgumentProperty,
    ArityProperty,
    DefaultValueProperty,
    Exact,
    OneOrMore,
    Property,
    RequiredProperty,
    ShortNameProperty,
)


@pytest.mark.parametrize("size", [0, 1, 5])
def test_exact_number_args(size):
    assert Exact(size).number_args() == size


@pytest.mark.parametrize("arity,expected", [(ONE, 1), (TWO, 2), (THREE, 3), (FOUR, 4)])
def test_named_arities(arity, expected):
    assert arity.number_args() == expected


def test_exact_rejects_negative():
    with pytest.raises(ValueError):
        Exact(-1)


def test_exact_rejects_non_integer():
    with pytest.raises(TypeError):
        Exact("2")


def test_arity_property_number_args():
    assert ArityProperty(Exact(3)).number_args() == 3


def test_arity_property_one_or_more_has_no_count():
    with pytest.raises(TypeError):
        ArityProperty(OneOrMore()).number_args()


def test_arity_property_rejects_non_arity():
    with pytest.raises(TypeError):
        ArityProperty(5)


def test_default_value_holds_value():
    assert DefaultValueProperty(13).value == 13


def test_argument_property_fields():
    prop = ArgumentProperty("Day", int)
    assert (prop.name, prop.value_type) == ("Day", int)


def test_argument_property_rejects_non_string_name():
    with pytest.raises(TypeError):
        ArgumentProperty(3, int)


def test_short_name_holds_name():
    assert ShortNameProperty("D").short_name == "D"


def test_properties_compare_by_value():
    assert RequiredProperty() == RequiredProperty()
    assert ArityProperty(Exact(2)) == ArityProperty(TWO)
    assert isinstance(RequiredProperty(), Property)