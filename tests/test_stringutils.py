import pytest

from aocutils.stringutils import atoi, is_digit, is_empty, is_integer, rune_to_int


@pytest.mark.parametrize("text, expected", [("1", 1), ("-1", -1), ("123456", 123456)])
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["a", "", " 1", "1_000"])
def test_atoi_invalid(text):
    with pytest.raises(ValueError):
        atoi(text)


def test_atoi_out_of_range():
    with pytest.raises(ValueError):
        atoi("9" * 30)


@pytest.mark.parametrize("char, expected", [("0", 0), ("1", 1), ("9", 9)])
def test_rune_to_int(char, expected):
    assert rune_to_int(char) == expected


def test_rune_to_int_invalid():
    with pytest.raises(ValueError):
        rune_to_int("a")


@pytest.mark.parametrize(
    "char, expected", [("0", True), ("1", True), ("9", True), ("a", False)]
)
def test_is_digit(char, expected):
    assert is_digit(char) is expected


@pytest.mark.parametrize("text, expected", [("", True), ("a", False)])
def test_is_empty(text, expected):
    assert is_empty(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("", False), ("1", True), ("-1", True), ("123456", True), ("a", False)],
)
def test_is_integer(text, expected):
    assert is_integer(text) is expected