import pytest

from optica.utils import split_string


def test_splits_on_separator():
    assert split_string("a b c", " ") == ["a", "b", "c"]


def test_empty_input_yields_nothing():
    assert split_string("", " ") == []


def test_trailing_separator_keeps_empty_piece():
    assert split_string("a ", " ") == ["a", ""]


def test_leading_and_doubled_separators_keep_empty_pieces():
    assert split_string(" a  b", " ") == ["", "a", "", "b"]


def test_without_separator_returns_whole_string():
    assert split_string("--Day", " ") == ["--Day"]


@pytest.mark.parametrize("text", ["x", "--Day 5", " lead", "trail ", "a  b c"])
def test_join_round_trip(text):
    assert " ".join(split_string(text, " ")) == text