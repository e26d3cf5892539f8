from __future__ import annotations

import json
from decimal import Decimal

import pytest

from silo_wizard.core.utils.precise_json import (
    dumps_preserving_bigint,
    parse_json_preserving_bigint,
    quote_large_integers,
)


def test_large_integer_is_exact():
    parsed = parse_json_preserving_bigint('{"a": 920000000000000001}')
    assert isinstance(parsed["a"], int)
    assert parsed["a"] == 920000000000000001


def test_large_integers_as_strings():
    parsed = parse_json_preserving_bigint(
        '{"a":  920000000000000001, "b": 12}', large_integers_as_strings=True
    )
    assert parsed == {"a": "920000000000000001", "b": 12}


def test_quote_large_integers_preserves_whitespace():
    assert quote_large_integers('{"a":\n  -1234567890123456}') == (
        '{"a":\n  "-1234567890123456"}'
    )


def test_quote_large_integers_leaves_short_and_array_values():
    assert quote_large_integers('{"a": 123456789012345}') == '{"a": 123456789012345}'
    assert quote_large_integers("[1234567890123456789]") == "[1234567890123456789]"


def test_floats_decode_as_decimal():
    assert parse_json_preserving_bigint('{"x": 4.001}') == {"x": Decimal("4.001")}


def test_malformed_json_raises():
    with pytest.raises(json.JSONDecodeError):
        parse_json_preserving_bigint('{"a": ')


def test_dumps_writes_decimals_as_number_literals():
    text = dumps_preserving_bigint(
        {
            "a": Decimal("4.001"),
            "b": 920000000000000001,
            "c": Decimal("75"),
            "d": [Decimal("0.0000000000000001")],
        }
    )
    assert text == (
        '{"a": 4.001, "b": 920000000000000001, "c": 75, "d": [0.0000000000000001]}'
    )
    assert parse_json_preserving_bigint(text)["d"] == [Decimal("1E-16")]
