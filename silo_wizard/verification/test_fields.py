from __future__ import annotations

import pytest

from silo_wizard.verification.fields import (
    is_base_discount_percent_out_of_range,
    is_dao_fee_in_range,
    is_fee_unexpectedly_high,
    is_price_decimals_invalid,
    is_price_unexpectedly_high,
    is_price_unexpectedly_low,
    is_value_high_5,
    ltv_lt_liquidation_fee_consistent,
    verify_address,
    verify_dao_fee,
    verify_deployer_fee,
    verify_hook_owner,
    verify_irm_owner,
    verify_numeric_value,
    verify_silo_implementation,
    verify_token,
)

OWNER = "0x6f9e3B5c5dA3d4D5e0f1A2b3C4d5E6f7a8B9c0D1"


@pytest.mark.parametrize(
    "verifier",
    [
        verify_address,
        verify_token,
        verify_hook_owner,
        verify_irm_owner,
        verify_silo_implementation,
    ],
)
def test_address_verifiers(verifier):
    assert verifier(OWNER, OWNER.lower())
    assert verifier(OWNER.lower(), OWNER.upper().replace("0X", "0x"))
    assert not verifier(OWNER, None)
    assert not verifier(OWNER, "")
    assert not verifier(OWNER, "0x" + "00" * 20)


def test_verify_numeric_value_is_exact():
    assert verify_numeric_value(750000000000000000, 750000000000000000)
    assert not verify_numeric_value(750000000000000000, 750000000000000001)
    assert not verify_numeric_value(750000000000000000, None)
    assert not verify_numeric_value(None, 750000000000000000)
    assert not verify_numeric_value(None, None)


def test_fee_verifiers_use_basis_point_path():
    assert verify_deployer_fee(25 * 10**15, 2.5)
    assert verify_dao_fee(25 * 10**15, "2.5")
    assert verify_dao_fee(251 * 10**14, "2.505")
    assert not verify_deployer_fee(25 * 10**15, None)
    assert not verify_deployer_fee(25 * 10**15, "abc")


@pytest.mark.parametrize("missing", [None, "", "   ", "NaN", float("nan"), "Infinity"])
def test_fee_verifiers_treat_missing_expectation_as_mismatch(missing):
    assert not verify_deployer_fee(0, missing)
    assert not verify_dao_fee(0, missing)


def test_fee_verifiers_zero_fee_matches_explicit_zero():
    assert verify_deployer_fee(0, 0)
    assert verify_dao_fee(0, "0")
    assert not verify_dao_fee(None, "0")


def test_price_high_boundary():
    threshold = 1000 * 10**18
    assert not is_price_unexpectedly_high(str(threshold))
    assert is_price_unexpectedly_high(str(threshold + 1))
    assert is_price_unexpectedly_high(threshold + 1)


def test_price_low_boundary():
    assert not is_price_unexpectedly_low(str(10**17))
    assert is_price_unexpectedly_low(str(10**17 - 1))


@pytest.mark.parametrize(
    "check",
    [is_price_unexpectedly_high, is_price_unexpectedly_low, is_price_decimals_invalid],
)
def test_price_checks_do_not_flag_missing_values(check):
    assert not check(None)
    assert not check("")


def test_unparsable_price_is_not_flagged_by_range_checks():
    assert not is_price_unexpectedly_high("0xdeadbeef")
    assert not is_price_unexpectedly_low("not a number")


def test_price_decimals():
    assert is_price_decimals_invalid("1" * 15)
    assert not is_price_decimals_invalid("1" * 16)
    assert not is_price_decimals_invalid("1" * 22)
    assert is_price_decimals_invalid("1" * 23)


def test_base_discount_range():
    assert not is_base_discount_percent_out_of_range(10 * 10**16)
    assert not is_base_discount_percent_out_of_range(40 * 10**16)
    assert is_base_discount_percent_out_of_range(10 * 10**16 - 1)
    assert is_base_discount_percent_out_of_range(40 * 10**16 + 1)


def test_fee_and_value_thresholds():
    assert not is_fee_unexpectedly_high(5 * 10**16)
    assert is_fee_unexpectedly_high(5 * 10**16 + 1)
    assert not is_value_high_5(5 * 10**16)
    assert is_value_high_5(5 * 10**16 + 1)


def test_dao_fee_range_is_exclusive():
    assert not is_dao_fee_in_range(10**14)
    assert is_dao_fee_in_range(10**14 + 1)
    assert is_dao_fee_in_range(10 * 10**16)
    assert not is_dao_fee_in_range(25 * 10**16)


def test_ltv_lt_liquidation_fee_consistency():
    assert ltv_lt_liquidation_fee_consistent(0, 0, 0)
    assert ltv_lt_liquidation_fee_consistent(75 * 10**16, 85 * 10**16, 5 * 10**16)
    assert not ltv_lt_liquidation_fee_consistent(0, 85 * 10**16, 5 * 10**16)
