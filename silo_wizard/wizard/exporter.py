from __future__ import annotations

from decimal import Decimal
from typing import Any

from silo_wizard.core.utils.precise_json import dumps_preserving_bigint
from silo_wizard.core.utils.units import scaled_to_display
from silo_wizard.wizard.snapshot import (
    CHAINLINK_ORACLE,
    CLONE_IMPLEMENTATION,
    CUSTOM_SCALER,
    DEFAULT_HOOK,
    IRM_V2_FACTORY,
    KINK_IRM_FACTORY,
    NO_ORACLE,
    PLACEHOLDER_ORACLE,
    BorrowConfiguration,
    FeesConfiguration,
    OracleConfiguration,
    TokenBorrowConfig,
    TokenFeesConfig,
    TokenOracleConfig,
    WizardSnapshot,
)


def _display(value: int | None) -> int | Decimal:
    if not value:
        return 0
    display = scaled_to_display(value)
    if display == display.to_integral_value():
        return int(display)
    return display


def _solvency_oracle(oracle: TokenOracleConfig | None) -> str:
    if oracle is not None and oracle.type == "chainlink":
        return CHAINLINK_ORACLE
    name = NO_ORACLE
    if oracle is not None and oracle.scaler_oracle and oracle.scaler_oracle.name:
        name = oracle.scaler_oracle.name
    return PLACEHOLDER_ORACLE if name == CUSTOM_SCALER else name


def _chainlink_block(oracle: TokenOracleConfig | None) -> dict[str, Any] | None:
    if oracle is None or oracle.type != "chainlink" or oracle.chainlink_oracle is None:
        return None
    chainlink = oracle.chainlink_oracle
    return {
        "baseToken": chainlink.base_token,
        "primaryAggregator": chainlink.primary_aggregator,
        "secondaryAggregator": chainlink.secondary_aggregator or "",
        "normalizationDivider": chainlink.normalization_divider,
        "normalizationMultiplier": chainlink.normalization_multiplier,
        "invertSecondPrice": chainlink.invert_second_price,
    }


def _token_block(snapshot: WizardSnapshot, index: int) -> dict[str, Any]:
    token = snapshot.token0 if index == 0 else snapshot.token1
    oracles = snapshot.oracle_configuration or OracleConfiguration(
        token0=TokenOracleConfig(type="none"), token1=TokenOracleConfig(type="none")
    )
    oracle = oracles.token0 if index == 0 else oracles.token1
    borrow = snapshot.borrow_configuration or BorrowConfiguration(
        token0=TokenBorrowConfig(non_borrowable=False),
        token1=TokenBorrowConfig(non_borrowable=False),
    )
    borrow_token = borrow.token0 if index == 0 else borrow.token1
    fees = snapshot.fees_configuration or FeesConfiguration()
    fees_token: TokenFeesConfig = fees.token0 if index == 0 else fees.token1
    irm = snapshot.selected_irm0 if index == 0 else snapshot.selected_irm1

    block: dict[str, Any] = {
        f"token{index}": token.symbol if token else "",
        f"solvencyOracle{index}": _solvency_oracle(oracle),
        f"maxLtvOracle{index}": NO_ORACLE,
        f"interestRateModel{index}": (
            KINK_IRM_FACTORY if snapshot.irm_model_type == "kink" else IRM_V2_FACTORY
        ),
        f"interestRateModelConfig{index}": irm.name if irm else "",
        f"maxLtv{index}": _display(borrow_token.max_ltv),
        f"lt{index}": _display(borrow_token.liquidation_threshold),
        f"liquidationTargetLtv{index}": _display(borrow_token.liquidation_target_ltv),
        f"liquidationFee{index}": _display(fees_token.liquidation_fee),
        f"flashloanFee{index}": _display(fees_token.flashloan_fee),
        f"callBeforeQuote{index}": False,
    }
    chainlink = _chainlink_block(oracle)
    if chainlink is not None:
        block[f"chainlinkOracle{index}"] = chainlink
    return block


def generate_json_config(snapshot: WizardSnapshot) -> dict[str, Any]:
    """Deployment config object; percentages are display values (``75`` = 75%)."""
    fees = snapshot.fees_configuration or FeesConfiguration()
    hook = snapshot.selected_hook or DEFAULT_HOOK
    return {
        "deployer": "",
        "hookReceiver": CLONE_IMPLEMENTATION,
        "hookReceiverImplementation": f"{hook}.sol",
        "daoFee": _display(fees.dao_fee),
        "deployerFee": _display(fees.deployer_fee),
        **_token_block(snapshot, 0),
        **_token_block(snapshot, 1),
    }


def dump_json_config(snapshot: WizardSnapshot) -> str:
    return dumps_preserving_bigint(generate_json_config(snapshot), indent=4)
