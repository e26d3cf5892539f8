"""Rebuild a wizard snapshot from an exported deployment config."""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any

from loguru import logger

from silo_wizard.core.config import get_strict_sentinels
from silo_wizard.core.errors import ConfigImportError
from silo_wizard.core.utils.precise_json import parse_json_preserving_bigint
from silo_wizard.core.utils.units import display_to_scaled
from silo_wizard.wizard.snapshot import (
    CHAINLINK_ORACLE,
    DEFAULT_HOOK,
    IRM_V2_FACTORY,
    KINK_IRM_FACTORY,
    NO_ORACLE,
    BorrowConfiguration,
    ChainlinkOracleConfig,
    FeesConfiguration,
    IRMConfig,
    OracleConfiguration,
    ScalerOracle,
    TokenBorrowConfig,
    TokenData,
    TokenFeesConfig,
    TokenOracleConfig,
    WizardSnapshot,
)

_HOOK_RE = re.compile(r"^(SiloHookV[123])\.sol$")


def _sentinel_key(value: str) -> str:
    return re.sub(r"[^a-z0-9]", "", value.lower())


_KNOWN_ORACLE_KEYS = {_sentinel_key(NO_ORACLE), _sentinel_key(CHAINLINK_ORACLE)}


def _oracle_type(value: Any, field: str, strict: bool) -> str:
    if value == NO_ORACLE:
        return "none"
    if value == CHAINLINK_ORACLE:
        return "chainlink"
    if strict and (not isinstance(value, str) or not value.strip()):
        raise ConfigImportError(field, value)
    # a mis-spelled NO_ORACLE / Chainlink is not a scaler name
    if strict and _sentinel_key(value) in _KNOWN_ORACLE_KEYS:
        raise ConfigImportError(field, value)
    return "scaler"


def _chainlink_config(raw: Any) -> ChainlinkOracleConfig | None:
    if not isinstance(raw, dict):
        return None

    def _text(key: str, default: str) -> str:
        value = raw.get(key)
        return default if value is None else str(value)

    return ChainlinkOracleConfig(
        base_token="token1" if raw.get("baseToken") == "token1" else "token0",
        primary_aggregator=_text("primaryAggregator", ""),
        secondary_aggregator=_text("secondaryAggregator", ""),
        normalization_divider=_text("normalizationDivider", "0"),
        normalization_multiplier=_text("normalizationMultiplier", "0"),
        invert_second_price=bool(raw.get("invertSecondPrice")),
    )


def _token_oracle(
    config: dict[str, Any], index: int, strict: bool
) -> TokenOracleConfig:
    sentinel = config.get(f"solvencyOracle{index}")
    oracle_type = _oracle_type(sentinel, f"solvencyOracle{index}", strict)
    if oracle_type == "scaler":
        return TokenOracleConfig(
            type="scaler", scaler_oracle=ScalerOracle(name=str(sentinel or ""))
        )
    if oracle_type == "chainlink":
        return TokenOracleConfig(
            type="chainlink",
            chainlink_oracle=_chainlink_config(config.get(f"chainlinkOracle{index}")),
        )
    return TokenOracleConfig(type="none")


def _is_zero(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    return value == 0


def _scaled(config: dict[str, Any], key: str) -> int:
    value = config.get(key)
    if value is None or isinstance(value, bool):
        return 0
    try:
        return display_to_scaled(value)
    except ValueError as exc:
        raise ConfigImportError(key, value, str(exc)) from exc


def _borrow(config: dict[str, Any], index: int) -> TokenBorrowConfig:
    return TokenBorrowConfig(
        non_borrowable=_is_zero(config.get(f"maxLtv{index}"))
        and _is_zero(config.get(f"lt{index}")),
        liquidation_threshold=_scaled(config, f"lt{index}"),
        max_ltv=_scaled(config, f"maxLtv{index}"),
        liquidation_target_ltv=_scaled(config, f"liquidationTargetLtv{index}"),
    )


def _irm(config: dict[str, Any], index: int) -> IRMConfig:
    raw = config.get(f"irmConfig{index}")
    return IRMConfig(
        name=str(config.get(f"interestRateModelConfig{index}") or ""),
        config=dict(raw) if isinstance(raw, dict) else {},
    )


def _hook(config: dict[str, Any], strict: bool) -> str:
    raw = config.get("hookReceiverImplementation")
    match = _HOOK_RE.match(raw) if isinstance(raw, str) else None
    if match:
        return match.group(1)
    if strict:
        raise ConfigImportError("hookReceiverImplementation", raw)
    if raw:
        logger.debug(f"Unknown hook implementation {raw!r}, using {DEFAULT_HOOK}")
    return DEFAULT_HOOK


def _irm_model_type(config: dict[str, Any], strict: bool) -> str:
    factory = config.get("interestRateModel0")
    if factory == KINK_IRM_FACTORY:
        return "kink"
    if strict and factory != IRM_V2_FACTORY:
        raise ConfigImportError("interestRateModel0", factory)
    return "irm"


def snapshot_from_config(
    config: dict[str, Any], *, strict_sentinels: bool | None = None
) -> WizardSnapshot:
    """Map an exported config object onto a WizardSnapshot.

    Every percentage is stored as ``percentage * 10**16``; missing fields become 0.
    With ``strict_sentinels`` unknown oracle, IRM factory and hook values raise
    ``ConfigImportError`` instead of falling back to defaults.
    """
    if not isinstance(config, dict):
        raise ConfigImportError(
            "config", type(config).__name__, "Deployment config must be a JSON object"
        )
    strict = get_strict_sentinels() if strict_sentinels is None else strict_sentinels

    token0 = str(config.get("token0") or "")
    token1 = str(config.get("token1") or "")

    return WizardSnapshot(
        token0=TokenData(symbol=token0, name=token0),
        token1=TokenData(symbol=token1, name=token1),
        oracle_configuration=OracleConfiguration(
            token0=_token_oracle(config, 0, strict),
            token1=_token_oracle(config, 1, strict),
        ),
        irm_model_type=_irm_model_type(config, strict),
        selected_irm0=_irm(config, 0),
        selected_irm1=_irm(config, 1),
        borrow_configuration=BorrowConfiguration(
            token0=_borrow(config, 0), token1=_borrow(config, 1)
        ),
        fees_configuration=FeesConfiguration(
            dao_fee=_scaled(config, "daoFee"),
            deployer_fee=_scaled(config, "deployerFee"),
            token0=TokenFeesConfig(
                liquidation_fee=_scaled(config, "liquidationFee0"),
                flashloan_fee=_scaled(config, "flashloanFee0"),
            ),
            token1=TokenFeesConfig(
                liquidation_fee=_scaled(config, "liquidationFee1"),
                flashloan_fee=_scaled(config, "flashloanFee1"),
            ),
        ),
        selected_hook=_hook(config, strict),
    )


def parse_json_config(
    json_text: str | bytes, *, strict_sentinels: bool | None = None
) -> WizardSnapshot:
    """Parse exported JSON text. Malformed JSON raises ``json.JSONDecodeError``."""
    config = parse_json_preserving_bigint(json_text)
    snapshot = snapshot_from_config(config, strict_sentinels=strict_sentinels)
    logger.info(
        f"Imported config {snapshot.token0.symbol}/{snapshot.token1.symbol} "
        f"(irm={snapshot.irm_model_type}, hook={snapshot.selected_hook})"
    )
    return snapshot
