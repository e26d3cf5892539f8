"""Sanity checks on a silo oracle's ``quote(amount, token)``.

A reverting quote is treated as "no price", never as an error: ``quote(0)`` may
revert, and the linearity walk stops at the first revert. An empty or zero oracle
address cannot be checked, so every predicate returns False for it.
"""

from __future__ import annotations

import asyncio
from typing import Any

from eth_utils import to_checksum_address
from loguru import logger

from silo_wizard.core.constants.silo_abi import ERC20_DECIMALS_ABI, SILO_ORACLE_ABI
from silo_wizard.core.utils.addresses import addresses_equal, is_zero_address
from silo_wizard.core.utils.formatting import format_number_in_e
from silo_wizard.verification.summary import (
    NO_VALUE,
    MarketConfig,
    SiloMarketConfig,
    VerificationCheckItem,
)

LINEAR_CHECK_MAX_AMOUNT = 10**36
LINEAR_CHECK_MIN_AMOUNT = 100
# 10**36 wei plus 10**20 whole tokens in the token's own decimals
LARGE_AMOUNT_WEI = 10**36
LARGE_AMOUNT_TOKENS = 10**20


def _missing(oracle_address: str | None) -> bool:
    return not oracle_address or is_zero_address(oracle_address)


async def quote(
    web3: Any, oracle_address: str, token: str, amount: int
) -> int | None:
    """``oracle.quote(amount, token)``, or None when the call reverts or fails."""
    if _missing(oracle_address):
        return None
    try:
        oracle = web3.eth.contract(
            address=to_checksum_address(oracle_address), abi=SILO_ORACLE_ABI
        )
        price = await oracle.functions.quote(
            int(amount), to_checksum_address(token)
        ).call()
        return int(price)
    except Exception as exc:
        logger.debug(f"quote({amount}) failed on oracle {oracle_address}: {exc}")
        return None


async def price_does_not_return_zero(
    web3: Any, oracle_address: str, token: str
) -> bool:
    """``quote(0)`` must either revert or return a non-zero price."""
    if _missing(oracle_address):
        return False
    price = await quote(web3, oracle_address, token, 0)
    return price is None or price != 0


async def find_quote_linearity_break(
    web3: Any, oracle_address: str, token: str
) -> int | None:
    """First amount where ``quote(amount) != quote(10 * amount) // 10``.

    Walks down from 10**36 to 100. A revert on the first amount ends the walk
    with no break; a later revert counts as a zero quote.
    """
    previous: int | None = None
    amount = LINEAR_CHECK_MAX_AMOUNT
    while amount >= LINEAR_CHECK_MIN_AMOUNT:
        price = await quote(web3, oracle_address, token, amount)
        if previous is None:
            if price is None:
                return None
            previous = price
        else:
            current = price or 0
            if current != previous // 10:
                return amount
            previous = current
        amount //= 10
    return None


async def quote_is_linear_function(web3: Any, oracle_address: str, token: str) -> bool:
    if _missing(oracle_address):
        return False
    breaks_at = await find_quote_linearity_break(web3, oracle_address, token)
    if breaks_at is not None:
        logger.warning(
            f"Oracle {oracle_address} quote is not linear at amount "
            f"{format_number_in_e(breaks_at)}"
        )
    return breaks_at is None


async def quote_large_amounts_does_not_revert(
    web3: Any, oracle_address: str, token: str, decimals: int | None = None
) -> bool:
    if _missing(oracle_address):
        return False
    if decimals is None:
        try:
            erc20 = web3.eth.contract(
                address=to_checksum_address(token), abi=ERC20_DECIMALS_ABI
            )
            decimals = int(await erc20.functions.decimals().call())
        except Exception as exc:
            logger.warning(f"Failed to read decimals of {token}: {exc}")
            return False
    amount = LARGE_AMOUNT_WEI + LARGE_AMOUNT_TOKENS * 10**decimals
    return await quote(web3, oracle_address, token, amount) is not None


def _oracles(index: int, silo: SiloMarketConfig) -> list[tuple[str, str]]:
    oracles = []
    solvency = silo.solvency_oracle.address
    max_ltv = silo.max_ltv_oracle.address
    if not _missing(solvency):
        oracles.append((f"Silo {index} Solvency Oracle", solvency))
    if not _missing(max_ltv) and not addresses_equal(max_ltv, solvency):
        oracles.append((f"Silo {index} Max LTV Oracle", max_ltv))
    return oracles


async def _oracle_checks(
    web3: Any, label: str, oracle_address: str, token: str
) -> list[VerificationCheckItem]:
    zero_price = await quote(web3, oracle_address, token, 0)
    breaks_at = await find_quote_linearity_break(web3, oracle_address, token)
    large_ok = await quote_large_amounts_does_not_revert(web3, oracle_address, token)

    return [
        VerificationCheckItem(
            label=f"{label} – price > 0 when quote(0)",
            on_chain_display=(
                "quote(0) reverts" if zero_price is None else f"quote(0) = {zero_price}"
            ),
            wizard_display=NO_VALUE,
            passed=zero_price is None or zero_price != 0,
        ),
        VerificationCheckItem(
            label=f"{label} – quote is a linear function",
            on_chain_display=(
                "property holds"
                if breaks_at is None
                else f"breaks at amount {format_number_in_e(breaks_at)}"
            ),
            wizard_display=NO_VALUE,
            passed=breaks_at is None,
        ),
        VerificationCheckItem(
            label=f"{label} – quote does not revert for large amounts",
            on_chain_display="oracle does not revert" if large_ok else "oracle reverts",
            wizard_display=NO_VALUE,
            passed=large_ok,
        ),
    ]


async def build_oracle_quote_checks(
    web3: Any, market_config: MarketConfig
) -> list[VerificationCheckItem]:
    """Quote sanity checks for every distinct, non-zero oracle of both silos."""
    targets = [
        (label, oracle, silo.token)
        for index, silo in enumerate((market_config.silo0, market_config.silo1))
        for label, oracle in _oracles(index, silo)
    ]
    per_oracle = await asyncio.gather(
        *(
            _oracle_checks(web3, label, oracle, token)
            for label, oracle, token in targets
        )
    )
    return [check for checks in per_oracle for check in checks]
