from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

OracleType = Literal["none", "scaler", "chainlink"]
IRMModelType = Literal["kink", "irm"]
HookType = Literal["SiloHookV1", "SiloHookV2", "SiloHookV3"]
BaseToken = Literal["token0", "token1"]

HOOK_TYPES: tuple[str, ...] = ("SiloHookV1", "SiloHookV2", "SiloHookV3")
DEFAULT_HOOK: HookType = "SiloHookV1"

# Sentinel values used in exported deployment configs
NO_ORACLE = "NO_ORACLE"
CHAINLINK_ORACLE = "Chainlink"
CUSTOM_SCALER = "Custom Scaler"
PLACEHOLDER_ORACLE = "PLACEHOLDER"
KINK_IRM_FACTORY = "DynamicKinkModelFactory.sol"
IRM_V2_FACTORY = "InterestRateModelV2Factory.sol"
CLONE_IMPLEMENTATION = "CLONE_IMPLEMENTATION"


@dataclass
class TokenData:
    symbol: str
    name: str
    address: str = ""
    decimals: int = 18


@dataclass
class NetworkInfo:
    chain_id: str
    network_name: str


@dataclass
class ScalerOracle:
    name: str
    address: str = ""
    scale_factor: str = "1"
    valid: bool = True
    result_decimals: int | None = 18


@dataclass
class ChainlinkOracleConfig:
    # one of normalization_divider / normalization_multiplier is non-zero
    base_token: BaseToken
    primary_aggregator: str
    secondary_aggregator: str = ""
    normalization_divider: str = "0"
    normalization_multiplier: str = "0"
    invert_second_price: bool = False


@dataclass
class TokenOracleConfig:
    type: OracleType
    scaler_oracle: ScalerOracle | None = None
    chainlink_oracle: ChainlinkOracleConfig | None = None


@dataclass
class OracleConfiguration:
    token0: TokenOracleConfig
    token1: TokenOracleConfig


@dataclass
class IRMConfig:
    name: str
    config: dict[str, Any] = field(default_factory=dict)


@dataclass
class TokenBorrowConfig:
    """LTV values as ``percentage * 10**16`` integers."""

    non_borrowable: bool
    liquidation_threshold: int = 0
    max_ltv: int = 0
    liquidation_target_ltv: int = 0


@dataclass
class BorrowConfiguration:
    token0: TokenBorrowConfig
    token1: TokenBorrowConfig


@dataclass
class TokenFeesConfig:
    liquidation_fee: int = 0
    flashloan_fee: int = 0


@dataclass
class FeesConfiguration:
    dao_fee: int = 0
    deployer_fee: int = 0
    token0: TokenFeesConfig = field(default_factory=TokenFeesConfig)
    token1: TokenFeesConfig = field(default_factory=TokenFeesConfig)


@dataclass
class WizardSnapshot:
    token0: TokenData | None = None
    token1: TokenData | None = None
    network_info: NetworkInfo | None = None
    oracle_configuration: OracleConfiguration | None = None
    irm_model_type: IRMModelType = "kink"
    selected_irm0: IRMConfig | None = None
    selected_irm1: IRMConfig | None = None
    borrow_configuration: BorrowConfiguration | None = None
    fees_configuration: FeesConfiguration | None = None
    selected_hook: HookType | None = None
    hook_owner_address: str | None = None
    last_deploy_tx_hash: str | None = None
    last_deploy_args_hash: str | None = None
