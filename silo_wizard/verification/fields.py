"""Pure predicates comparing deployed values against wizard expectations.

Equality verifiers return False when the expectation is missing; an absent
expectation counts as a mismatch. Range checks take only the on-chain value and
answer "is this suspicious", so an unreadable value is not flagged.
"""

from __future__ import annotations

from silo_wizard.core.constants.base import MANTISSA, PERCENT_SCALE
from silo_wizard.core.utils.addresses import addresses_equal
from silo_wizard.core.utils.units import (
    Numeric,
    parse_amount,
    wizard_basis_points_to_scaled,
)

HIGH_PRICE_THRESHOLD = 1000 * MANTISSA
LOW_PRICE_THRESHOLD = 10**17
MIN_PRICE_STRING_LENGTH = 16
MAX_PRICE_STRING_LENGTH = 22
MIN_BASE_DISCOUNT = 10 * PERCENT_SCALE
MAX_BASE_DISCOUNT = 40 * PERCENT_SCALE
FIVE_PERCENT = 5 * PERCENT_SCALE
# 0.01% and 25%, exclusive
MIN_DAO_FEE = PERCENT_SCALE // 100
MAX_DAO_FEE = 25 * PERCENT_SCALE


def verify_address(on_chain_address: str, wizard_address: str | None) -> bool:
    return addresses_equal(on_chain_address, wizard_address)


def verify_token(on_chain_token: str, wizard_token: str | None) -> bool:
    return addresses_equal(on_chain_token, wizard_token)


def verify_hook_owner(on_chain_owner: str, wizard_owner: str | None) -> bool:
    return addresses_equal(on_chain_owner, wizard_owner)


def verify_irm_owner(on_chain_owner: str, wizard_owner: str | None) -> bool:
    return addresses_equal(on_chain_owner, wizard_owner)


def verify_silo_implementation(
    implementation_from_event: str, implementation_from_repo: str | None
) -> bool:
    return addresses_equal(implementation_from_event, implementation_from_repo)


def verify_numeric_value(on_chain_value: int | None, wizard_value: int | None) -> bool:
    """Exact equality of two already-normalized integers."""
    if on_chain_value is None or wizard_value is None:
        return False
    try:
        return int(on_chain_value) == int(wizard_value)
    except (TypeError, ValueError):
        return False


def verify_deployer_fee(on_chain_value: int | None, wizard_fee: Numeric | None) -> bool:
    """Compare against a display fee (``2.5`` = 2.5%) taken through the bp path.

    Empty or non-finite expectations count as missing.
    """
    if on_chain_value is None:
        return False
    try:
        if parse_amount(wizard_fee, "fee") is None:
            return False
        expected = wizard_basis_points_to_scaled(wizard_fee)
    except ValueError:
        return False
    return verify_numeric_value(on_chain_value, expected)


def verify_dao_fee(on_chain_value: int | None, wizard_fee: Numeric | None) -> bool:
    return verify_deployer_fee(on_chain_value, wizard_fee)


def _parse_raw_price(quote_price_raw: str | int | None) -> int | None:
    if quote_price_raw is None or quote_price_raw == "":
        return None
    try:
        return int(str(quote_price_raw).strip())
    except ValueError:
        return None


def is_price_unexpectedly_high(quote_price_raw: str | int | None) -> bool:
    price = _parse_raw_price(quote_price_raw)
    return price is not None and price > HIGH_PRICE_THRESHOLD


def is_price_unexpectedly_low(quote_price_raw: str | int | None) -> bool:
    price = _parse_raw_price(quote_price_raw)
    return price is not None and price < LOW_PRICE_THRESHOLD


def is_price_decimals_invalid(quote_price_raw: str | int | None) -> bool:
    """A quote for one whole token should have 16..22 digits at 18 decimals."""
    if quote_price_raw is None or quote_price_raw == "":
        return False
    length = len(str(quote_price_raw))
    return length < MIN_PRICE_STRING_LENGTH or length > MAX_PRICE_STRING_LENGTH


def is_base_discount_percent_out_of_range(on_chain_value: int) -> bool:
    value = int(on_chain_value)
    return value < MIN_BASE_DISCOUNT or value > MAX_BASE_DISCOUNT


def is_fee_unexpectedly_high(on_chain_value: int) -> bool:
    return int(on_chain_value) > wizard_basis_points_to_scaled(5)


def is_value_high_5(on_chain_value: int) -> bool:
    return int(on_chain_value) > FIVE_PERCENT


def is_dao_fee_in_range(on_chain_value: int) -> bool:
    return MIN_DAO_FEE < int(on_chain_value) < MAX_DAO_FEE


def ltv_lt_liquidation_fee_consistent(
    max_ltv: int, lt: int, liquidation_fee: int
) -> bool:
    """A silo is either borrowable (all three set) or not (all three zero)."""
    values = [int(max_ltv), int(lt), int(liquidation_fee)]
    return all(v == 0 for v in values) or all(v != 0 for v in values)
