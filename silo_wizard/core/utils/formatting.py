"""Display helpers for fixed-point integers.

All arithmetic here is integer / decimal-string based; values routinely exceed the
53 bits a float can hold exactly.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from silo_wizard.core.constants.base import (
    E18_DECIMALS,
    MANTISSA,
    MAX_UINT256_DIGITS,
    ZERO_ADDRESS,
)
from silo_wizard.core.utils.units import format_units, scaled_to_display

_NUMERIC_INPUT_RE = re.compile(r"^([+]?\d*\.?\d+)(?:e([+-]?\d+))?$", re.IGNORECASE)


def _split_e18(value: int) -> tuple[str, int, int]:
    sign = "-" if value < 0 else ""
    whole, frac = divmod(abs(value), MANTISSA)
    return sign, whole, frac


def format_bigint_to_e18(value: int, full_precision: bool = False) -> str:
    """Render an 18-decimal integer as ``<int>.<fraction>e18``.

        >>> format_bigint_to_e18(5 * 10**17, full_precision=True)
        '0.500000000000000000e18'
        >>> format_bigint_to_e18(10**18)
        '1e18'
    """
    value = int(value)
    if value == 0:
        return "0"
    sign, whole, frac = _split_e18(value)
    frac_str = str(frac).rjust(E18_DECIMALS, "0")
    if full_precision:
        return f"{sign}{whole}.{frac_str}e18"
    frac_str = frac_str.rstrip("0")
    if not frac_str:
        return f"{sign}{whole}e18"
    return f"{sign}{whole}.{frac_str}e18"


def format_wizard_bigint_to_e18(value: int, full_precision: bool = False) -> str:
    """Render a wizard value (``percentage * 10**16``) as an e18 coefficient.

    The coefficient is ``percentage / 100``, computed by moving the decimal point of
    the percentage string two places left. Output matches ``format_bigint_to_e18``.
    """
    value = int(value)
    if value == 0:
        return "0"
    if full_precision:
        return format_bigint_to_e18(value, full_precision=True)

    percentage = format_units(value, 16)
    sign = ""
    if percentage.startswith("-"):
        sign, percentage = "-", percentage[1:]
    int_part, _, frac_part = percentage.partition(".")
    int_part = int_part.rjust(3, "0")
    coeff_int = str(int(int_part[:-2]))
    coeff_frac = (int_part[-2:] + frac_part).rstrip("0")
    if not coeff_frac:
        return f"{sign}{coeff_int}e18"
    return f"{sign}{coeff_int}.{coeff_frac}e18"


def format_to_e18(value: int | str | float, full_precision: bool = False) -> str:
    if isinstance(value, int):
        as_int = value
    elif isinstance(value, str):
        as_int = int(value.strip())
    else:
        as_int = int(Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP))
    return format_bigint_to_e18(as_int, full_precision)


def format_percentage(value: int) -> str:
    """``percentage * 10**16`` -> ``"4.00%"``."""
    with localcontext() as ctx:
        ctx.prec = 100
        percentage = scaled_to_display(value).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
    return f"{percentage}%"


def _digits_suffix(value: int) -> str:
    length = len(str(value))
    if length < 6:
        return ""
    return f" [{length} digits]"


def format_number_in_e(value: int) -> str:
    """Compact form for round numbers: ``1500000000`` -> ``15e8 [10 digits]``."""
    if value < 1000:
        return str(value)

    out = value
    exponent = 0
    while out != 0 and out % 10 == 0:
        exponent += 1
        out //= 10

    if exponent < 3 or value < 1_000_000:
        return f"{value}{_digits_suffix(value)}"

    return f"{out}e{exponent}{_digits_suffix(value)}"


def format_price_in_e18(value: int) -> str:
    if value < 10_000:
        return f"{value}{_digits_suffix(value)}"
    if value < 10_000_000:
        return format_number_in_e(value)
    return format_bigint_to_e18(value)


def format_quote_price_as_18_decimals(quote_price_raw: str | int | None) -> str:
    if quote_price_raw is None or quote_price_raw == "":
        return "—"
    try:
        return format_price_in_e18(int(str(quote_price_raw).strip()))
    except ValueError:
        return str(quote_price_raw)


def parse_numeric_input_to_int(text: str) -> int | None:
    """Parse ``"1.5e18"`` / ``"42"`` style input into an exact integer.

    Returns None for empty input, malformed input, or values with a fractional part.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        return None

    match = _NUMERIC_INPUT_RE.match(trimmed)
    if not match:
        return None

    mantissa = match.group(1).lstrip("+")
    try:
        exponent = int(match.group(2)) if match.group(2) else 0
    except ValueError:
        return None

    int_part, _, frac_part = mantissa.partition(".")
    digits = f"{int_part}{frac_part}".lstrip("0") or "0"
    shift = exponent - len(frac_part)
    if shift < 0 or len(digits) + shift > MAX_UINT256_DIGITS:
        return None
    return int(digits + "0" * shift)


def format_address(address: str | None) -> str:
    if not address or address.lower() == ZERO_ADDRESS:
        return "Zero Address"
    return f"{address[:6]}...{address[-4:]}"
