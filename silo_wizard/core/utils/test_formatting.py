from __future__ import annotations

import pytest

from silo_wizard.core.constants.base import ZERO_ADDRESS
from silo_wizard.core.utils.formatting import (
    format_address,
    format_bigint_to_e18,
    format_number_in_e,
    format_percentage,
    format_price_in_e18,
    format_quote_price_as_18_decimals,
    format_to_e18,
    format_wizard_bigint_to_e18,
    parse_numeric_input_to_int,
)


def test_format_bigint_to_e18_zero():
    assert format_bigint_to_e18(0) == "0"
    assert format_bigint_to_e18(0, full_precision=True) == "0"


def test_format_bigint_to_e18_compact():
    assert format_bigint_to_e18(10**18) == "1e18"
    assert format_bigint_to_e18(5 * 10**17) == "0.5e18"
    assert format_bigint_to_e18(1234500000000000000000) == "1234.5e18"
    assert format_bigint_to_e18(-5 * 10**17) == "-0.5e18"


def test_format_bigint_to_e18_full_precision():
    assert format_bigint_to_e18(5 * 10**17, full_precision=True) == (
        "0.500000000000000000e18"
    )
    assert format_bigint_to_e18(10**18, full_precision=True) == (
        "1.000000000000000000e18"
    )


@pytest.mark.parametrize(
    "value",
    [
        0,
        950000000000000000,
        50000000000000000,
        1,
        10**18,
        40010000000000000,
        123456789012345678901,
    ],
)
@pytest.mark.parametrize("full_precision", [False, True])
def test_wizard_formatter_matches_e18_formatter(value, full_precision):
    assert format_wizard_bigint_to_e18(value, full_precision) == format_bigint_to_e18(
        value, full_precision
    )


def test_format_to_e18_accepts_strings_and_floats():
    assert format_to_e18("1000000000000000000") == "1e18"
    assert format_to_e18(1.5e18) == "1.5e18"
    assert format_to_e18(25 * 10**16) == "0.25e18"


def test_format_percentage():
    assert format_percentage(40010000000000000) == "4.00%"
    assert format_percentage(40050000000000000) == "4.01%"
    assert format_percentage(750000000000000000) == "75.00%"
    assert format_percentage(0) == "0.00%"


def test_format_number_in_e():
    assert format_number_in_e(999) == "999"
    assert format_number_in_e(1000) == "1000"
    assert format_number_in_e(500000) == "500000 [6 digits]"
    assert format_number_in_e(1230000) == "123e4 [7 digits]"
    assert format_number_in_e(1000001) == "1000001 [7 digits]"
    assert format_number_in_e(1500000000) == "15e8 [10 digits]"


def test_format_price_in_e18():
    assert format_price_in_e18(9999) == "9999"
    assert format_price_in_e18(123456) == "123456 [6 digits]"
    assert format_price_in_e18(10**18) == "1e18"
    assert format_price_in_e18(10_000_000) == "0.00000000001e18"


def test_format_quote_price_as_18_decimals():
    assert format_quote_price_as_18_decimals("") == "—"
    assert format_quote_price_as_18_decimals(None) == "—"
    assert format_quote_price_as_18_decimals("2000000000000000000") == "2e18"
    assert format_quote_price_as_18_decimals("abc") == "abc"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1.5e18", 1500000000000000000),
        ("42", 42),
        ("+7", 7),
        ("1E3", 1000),
        (".5e1", 5),
        ("1.5", None),
        ("-1", None),
        ("", None),
        ("abc", None),
        ("1e77", 10**77),
        ("1e78", None),
        ("1e999999999", None),
        ("1e" + "9" * 5000, None),
    ],
)
def test_parse_numeric_input_to_int(text, expected):
    assert parse_numeric_input_to_int(text) == expected


def test_format_address():
    assert format_address(None) == "Zero Address"
    assert format_address(ZERO_ADDRESS) == "Zero Address"
    assert (
        format_address("0x1234567890abcdef1234567890abcdef12345678")
        == "0x1234...5678"
    )
