"""JSON decoding that never loses integer precision.

Deployment configs carry 18-decimal values (``920000000000000001``) that a
double-precision parser would silently round. The stdlib decoder already returns
exact ``int`` values; floats are decoded as ``Decimal`` so nothing goes through a
binary float either.

``quote_large_integers`` keeps the text-level rewrite used for interchange with
consumers that do round: every value of 16+ digits after a ``:`` becomes a string.
"""

from __future__ import annotations

import json
import re
from decimal import Decimal
from typing import Any

from silo_wizard.core.constants.base import LARGE_INTEGER_DIGITS

# Only literals that directly follow a key separator; array elements are left alone.
_LARGE_INTEGER_RE = re.compile(rf":(\s*)(-?\d{{{LARGE_INTEGER_DIGITS},}})")


def quote_large_integers(raw_text: str) -> str:
    """Wrap 16+ digit numeric literals following ``:`` in quotes.

    Whitespace between the colon and the literal is kept. Digit runs inside string
    values that follow ``": "`` are rewritten as well.
    """
    return _LARGE_INTEGER_RE.sub(r':\1"\2"', raw_text)


def parse_json_preserving_bigint(
    raw_text: str | bytes, *, large_integers_as_strings: bool = False
) -> Any:
    if isinstance(raw_text, bytes):
        raw_text = raw_text.decode("utf-8")
    if large_integers_as_strings:
        raw_text = quote_large_integers(raw_text)
    return json.loads(raw_text, parse_float=Decimal)


def dumps_preserving_bigint(value: Any, *, indent: int | None = None) -> str:
    """``json.dumps`` that writes ``Decimal`` values as exact number literals."""
    literals: dict[str, str] = {}

    def _swap(obj: Any) -> Any:
        if isinstance(obj, Decimal):
            token = f"__decimal_{len(literals)}__"
            literals[token] = _decimal_text(obj)
            return token
        if isinstance(obj, dict):
            return {k: _swap(v) for k, v in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [_swap(v) for v in obj]
        return obj

    text = json.dumps(_swap(value), indent=indent)
    for token, literal in literals.items():
        text = text.replace(f'"{token}"', literal, 1)
    return text


def _decimal_text(value: Decimal) -> str:
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")
