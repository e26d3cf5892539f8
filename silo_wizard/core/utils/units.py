"""Conversions between display percentages and on-chain fixed-point integers.

Two scales are in play and must not be mixed:

* percentage path: ``percentage * 10**16`` (truncated). Wizard storage uses this for
  every percentage field and it is also the on-chain format of LTV / LT values.
* basis-point path: ``round(percentage * 100) * 10**14``. Used for fee inputs that
  carry at most two decimal places.

Both produce the same integer for whole percentages only.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from silo_wizard.core.constants.base import (
    BP2DP_NORMALIZATION,
    MAX_UINT256,
    MAX_UINT256_DIGITS,
    PERCENT_DECIMALS,
)

Numeric = str | int | float | Decimal


def _to_decimal(value: Numeric) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Decimal(value)
    # str(float) is the shortest repr, so 4.001 stays "4.001"
    return Decimal(str(value).strip())


def parse_amount(value: Numeric | None, label: str = "amount") -> Decimal | None:
    """Decimal for a display amount; None when empty or non-finite.

    Text that is not a number raises ``ValueError``.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        amount = _to_decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid {label}: {value!r}") from exc
    if not amount.is_finite():
        return None
    return amount


def _check_on_chain_range(amount: Decimal, decimals: int, label: str) -> None:
    # adjusted() is the power of ten of the leading digit; bound it before 10**shift
    if amount and amount.adjusted() + decimals >= MAX_UINT256_DIGITS:
        raise ValueError(f"{label} out of uint256 range: {amount}")


def _scale_truncated(amount: Decimal, decimals: int) -> int:
    sign, digits, exponent = amount.as_tuple()
    magnitude = int("".join(str(d) for d in digits) or "0")
    if magnitude == 0:
        return 0
    shift = int(exponent) + decimals
    if shift >= 0:
        scaled = magnitude * 10**shift
    elif -shift >= len(digits):
        scaled = 0
    else:
        scaled = magnitude // 10 ** (-shift)
    return -scaled if sign else scaled


def format_units(value: int, decimals: int) -> str:
    """Exact decimal string of ``value / 10**decimals`` without trailing zeros."""
    value = int(value)
    sign = "-" if value < 0 else ""
    whole, frac = divmod(abs(value), 10**decimals)
    frac_str = str(frac).rjust(decimals, "0").rstrip("0") if decimals else ""
    return f"{sign}{whole}.{frac_str}" if frac_str else f"{sign}{whole}"


def display_to_scaled(percentage: Numeric | None) -> int:
    """Display percentage -> ``percentage * 10**16``, truncated toward zero.

    Empty input and non-finite values map to 0. Text that is not a number raises
    ``ValueError``.

        >>> display_to_scaled("4.001")
        40010000000000000
    """
    amount = parse_amount(percentage, "percentage")
    if amount is None:
        return 0
    _check_on_chain_range(amount, PERCENT_DECIMALS, "percentage")
    scaled = _scale_truncated(amount, PERCENT_DECIMALS)
    if abs(scaled) > MAX_UINT256:
        raise ValueError(f"percentage out of uint256 range: {percentage!r}")
    return scaled


def scaled_to_display(value: int) -> Decimal:
    """``value / 10**16`` as an exact Decimal (e.g. ``Decimal("4.001")``)."""
    return Decimal(format_units(int(value), PERCENT_DECIMALS))


def wizard_basis_points_to_scaled(bp: Numeric | None) -> int:
    """Fee display percentage -> ``round(bp * 100) * 10**14`` (half-up)."""
    amount = parse_amount(bp, "basis point value")
    if amount is None:
        return 0
    _check_on_chain_range(amount, PERCENT_DECIMALS, "basis point value")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount.as_tuple().digits) + 4)
        basis_points = (amount * 100).to_integral_value(rounding=ROUND_HALF_UP)
    scaled = int(basis_points) * BP2DP_NORMALIZATION
    if abs(scaled) > MAX_UINT256:
        raise ValueError(f"basis point value out of uint256 range: {bp!r}")
    return scaled


def convert_wizard_to_18_decimals(wizard_value: int) -> int:
    # Wizard storage already is the on-chain format.
    return int(wizard_value)


def convert_18_decimals_to_wizard(on_chain_value: int) -> int:
    return int(on_chain_value)
