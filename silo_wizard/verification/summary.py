"""Flat list of pass/fail checks comparing a deployed market with wizard values."""

from __future__ import annotations

from dataclasses import dataclass, field

from silo_wizard.core.utils.formatting import (
    format_percentage,
    format_quote_price_as_18_decimals,
)
from silo_wizard.verification.fields import (
    is_base_discount_percent_out_of_range,
    is_price_decimals_invalid,
    is_price_unexpectedly_high,
    is_price_unexpectedly_low,
    verify_numeric_value,
)

NO_VALUE = "—"


@dataclass
class OracleInfo:
    address: str = ""
    # raw 18-decimal quote for one whole base token, as returned on-chain
    quote_price: str = ""


@dataclass
class SiloMarketConfig:
    silo: str
    token: str
    protected_share_token: str = ""
    collateral_share_token: str = ""
    debt_share_token: str = ""
    solvency_oracle: OracleInfo = field(default_factory=OracleInfo)
    max_ltv_oracle: OracleInfo = field(default_factory=OracleInfo)
    interest_rate_model: str = ""
    max_ltv: int = 0
    lt: int = 0
    liquidation_target_ltv: int = 0
    liquidation_fee: int = 0
    flashloan_fee: int = 0
    dao_fee: int = 0
    deployer_fee: int = 0
    hook_receiver: str = ""
    call_before_quote: bool = False


@dataclass
class MarketConfig:
    silo_config: str
    silo0: SiloMarketConfig
    silo1: SiloMarketConfig


@dataclass
class SiloExpectations:
    max_ltv: int | None = None
    lt: int | None = None
    liquidation_target_ltv: int | None = None
    liquidation_fee: int | None = None
    flashloan_fee: int | None = None


@dataclass
class BaseDiscount:
    on_chain: int
    wizard: int | None = None


@dataclass
class VerificationOptions:
    wizard_dao_fee: int | None = None
    wizard_deployer_fee: int | None = None
    silo0: SiloExpectations | None = None
    silo1: SiloExpectations | None = None
    base_discount0: BaseDiscount | None = None
    base_discount1: BaseDiscount | None = None


@dataclass
class VerificationCheckItem:
    label: str
    on_chain_display: str
    wizard_display: str
    passed: bool


_NUMERIC_CHECKS = (
    ("max_ltv", "Max LTV"),
    ("lt", "Liquidation Threshold (LT)"),
    ("liquidation_target_ltv", "Liquidation Target LTV"),
    ("liquidation_fee", "Liquidation Fee"),
    ("flashloan_fee", "Flashloan Fee"),
)


def _price_check(label: str, quote_price: str) -> VerificationCheckItem:
    suspicious = (
        is_price_unexpectedly_low(quote_price)
        or is_price_unexpectedly_high(quote_price)
        or is_price_decimals_invalid(quote_price)
    )
    return VerificationCheckItem(
        label=label,
        on_chain_display=format_quote_price_as_18_decimals(quote_price),
        wizard_display=NO_VALUE,
        passed=not suspicious,
    )


def _equality_check(
    label: str, on_chain: int, wizard: int
) -> VerificationCheckItem:
    return VerificationCheckItem(
        label=label,
        on_chain_display=format_percentage(on_chain),
        wizard_display=format_percentage(wizard),
        passed=verify_numeric_value(on_chain, wizard),
    )


def _silo_checks(
    index: int,
    silo: SiloMarketConfig,
    expectations: SiloExpectations | None,
    base_discount: BaseDiscount | None,
) -> list[VerificationCheckItem]:
    checks = [
        _price_check(
            f"Silo {index} Solvency Oracle – price", silo.solvency_oracle.quote_price
        )
    ]

    if (
        silo.max_ltv_oracle.address
        and silo.max_ltv_oracle.address != silo.solvency_oracle.address
    ):
        checks.append(
            _price_check(
                f"Silo {index} Max LTV Oracle – price",
                silo.max_ltv_oracle.quote_price,
            )
        )

    if base_discount is not None:
        matches = base_discount.wizard is not None and verify_numeric_value(
            base_discount.on_chain, base_discount.wizard
        )
        checks.append(
            VerificationCheckItem(
                label=f"Silo {index} Solvency Oracle – Base Discount Per Year",
                on_chain_display=format_percentage(base_discount.on_chain),
                wizard_display=(
                    format_percentage(base_discount.wizard)
                    if base_discount.wizard is not None
                    else NO_VALUE
                ),
                passed=matches
                and not is_base_discount_percent_out_of_range(
                    base_discount.on_chain
                ),
            )
        )

    if expectations is not None:
        for attr, label in _NUMERIC_CHECKS:
            expected = getattr(expectations, attr)
            if expected is None:
                continue
            checks.append(
                _equality_check(
                    f"Silo {index} – {label}", getattr(silo, attr), expected
                )
            )
    return checks


def build_verification_checks(
    market_config: MarketConfig, options: VerificationOptions
) -> list[VerificationCheckItem]:
    """Checks in display order: global fees, then silo 0, then silo 1.

    Fees are read from silo 0; both silos share them. Expectations left as None
    produce no check.
    """
    checks: list[VerificationCheckItem] = []
    silo0 = market_config.silo0

    if options.wizard_dao_fee is not None:
        checks.append(
            _equality_check("DAO Fee", silo0.dao_fee, options.wizard_dao_fee)
        )
    if options.wizard_deployer_fee is not None:
        checks.append(
            _equality_check(
                "Deployer Fee", silo0.deployer_fee, options.wizard_deployer_fee
            )
        )

    checks.extend(_silo_checks(0, silo0, options.silo0, options.base_discount0))
    checks.extend(
        _silo_checks(1, market_config.silo1, options.silo1, options.base_discount1)
    )
    return checks
