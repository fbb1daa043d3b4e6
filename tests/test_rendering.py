"""Text forms of elements and matrices."""
import pytest

from errors import ParseError
from gf_element import GFElement
from gf_matrix import Matrix
from rendering import format_element, format_matrix, parse_element, parse_matrix, pretty_matrix


def test_format_element(gf7, gf8, gf9):
    assert format_element(GFElement(4, field=gf7)) == "4"
    assert format_element(GFElement(0, field=gf7)) == "0"
    assert format_element(GFElement(7, field=gf8)) == "x^2 + x + 1"
    assert format_element(GFElement(1, field=gf8)) == "1"
    assert format_element(GFElement(8, field=gf9)) == "2x + 2"


def test_parse_element(gf7, gf8, gf9):
    assert parse_element("3", gf7) == GFElement(3, field=gf7)
    assert parse_element("10", gf7).value == 3
    assert parse_element("x^2 + 1", gf8).value == 5
    assert parse_element("x", gf8).value == 2
    assert parse_element(" 2x + 1 ", gf9).value == 7
    assert parse_element("0", gf9).is_zero()


def test_parse_element_reduces(gf8, gf9):
    # 2x^2 = -2 = 1 modulo x^2 + 1
    assert parse_element("2*x^2 + 1", gf9).value == 2
    assert parse_element("x^3", gf8).value == 3
    assert parse_element("x + x", gf9).coeffs == (0, 2)


def test_element_text_round_trip(any_field):
    for a in any_field.elements():
        assert parse_element(format_element(a), any_field) == a


@pytest.mark.parametrize("text", ["", "   ", "y", "x^", "1 + + 2", "2x^-1", "3.5"])
def test_parse_element_rejects(gf9, text):
    with pytest.raises(ParseError):
        parse_element(text, gf9)


def test_format_matrix(gf2):
    a = Matrix.from_values([[1, 0, 1], [0, 1, 1]], field=gf2)
    assert format_matrix(a) == "[[1 0 1]\n[0 1 1]\n]"
    assert format_matrix(Matrix.zero(0, 0, field=gf2)) == "[]"


def test_parse_matrix(gf2, gf9):
    expected = Matrix.from_values([[1, 0, 1], [0, 1, 1]], field=gf2)
    assert parse_matrix("[[1 0 1]\n[0 1 1]\n]", gf2) == expected
    assert parse_matrix("[[1 0 1][0 1 1]]", gf2) == expected
    assert parse_matrix("[]", gf2).shape == (0, 0)

    b = Matrix.from_values([[8, 0], [3, 4]], field=gf9)
    assert parse_matrix(format_matrix(b), gf9) == b


@pytest.mark.parametrize(
    "text",
    ["[[1 a]]", "1 0 1", "[[1 0]\n0 1\n]", "[[1 0]]]", "[[1 0] x]", "", "[", "[[1 0]"],
)
def test_parse_matrix_rejects(gf2, text):
    with pytest.raises(ParseError):
        parse_matrix(text, gf2)


def test_matrix_without_columns_round_trips(gf3):
    a = Matrix.zero(2, 0, field=gf3)
    text = format_matrix(a)
    assert text == "[[]\n[]\n]"
    assert parse_matrix(text, gf3) == a
    assert parse_matrix("[[]]", gf3).shape == (1, 0)


def test_matrix_without_rows_keeps_width(gf3):
    a = Matrix.zero(0, 3, field=gf3)
    assert format_matrix(a) == "[]"
    assert parse_matrix(format_matrix(a), gf3, cols=3) == a
    assert parse_matrix("[]", gf3).shape == (0, 0)


def test_pretty_matrix(gf7, gf9):
    a = Matrix.from_values([[1, 2], [3, 4]], field=gf7)
    assert pretty_matrix(a) == "[   1    2 ]\n[   3    4 ]"
    assert str(a) == pretty_matrix(a)
    b = Matrix.from_values([[7]], field=gf9)
    assert pretty_matrix(b) == "[2x + 1 ]"
