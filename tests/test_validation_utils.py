from decimal import Decimal

import pytest

from utils.validation_utils import normalize_gstin, parse_decimal_text, sanitize_input


@pytest.mark.parametrize(
    "value, expected",
    [
        ("199.99", "199.99"),
        (" 499 ", "499"),
        ("0.10", "0.10"),
        (499, "499"),
        (19.9, "19.9"),
        (1e-07, "0.0000001"),
        (Decimal("12.50"), "12.50"),
        ("1e3", "1000"),
        ("+5", "5"),
        ("9" * 32, "9" * 32),
    ],
)
def test_parse_decimal_text(value, expected):
    assert parse_decimal_text(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "", "abc", "12.3.4", "NaN", "Infinity", "-1", "-0", ".5", "5.",
        "1_000", "١٢", "５", None, True, [1],
    ],
)
def test_parse_decimal_text_rejects(value):
    with pytest.raises(ValueError):
        parse_decimal_text(value, "price")


@pytest.mark.parametrize("value", ["9" * 33, "1e100000", "1e-40", "1e32", 10 ** 40])
def test_parse_decimal_text_rejects_values_wider_than_the_column(value):
    with pytest.raises(ValueError, match="too long"):
        parse_decimal_text(value, "price")


def test_normalize_gstin():
    assert normalize_gstin(" 27aabcu 9603r1zm ") == "27AABCU9603R1ZM"
    assert normalize_gstin("   ") is None
    assert normalize_gstin(None) is None


def test_sanitize_input():
    assert sanitize_input("  <b>bad</b>   data ") == "bbad/b data"
    assert sanitize_input("") is None
    assert sanitize_input("x" * 20, max_length=5) == "xxxxx"
