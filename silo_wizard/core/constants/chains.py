from dataclasses import dataclass

CHAIN_ID_ETHEREUM = 1
CHAIN_ID_OPTIMISM = 10
CHAIN_ID_POLYGON = 137
CHAIN_ID_SONIC = 146
CHAIN_ID_SONIC_TESTNET = 653
CHAIN_ID_INJECTIVE = 1776
CHAIN_ID_BASE = 8453
CHAIN_ID_ANVIL = 31337
CHAIN_ID_ARBITRUM = 42161
CHAIN_ID_AVALANCHE = 43114
CHAIN_ID_SEPOLIA = 11155111


@dataclass(frozen=True)
class NetworkConfig:
    chain_id: int
    display_name: str
    # Directory name used by the silo-contracts-v2 repository
    chain_name: str
    explorer_base_url: str
    native_token_symbol: str


NETWORK_CONFIGS: list[NetworkConfig] = [
    NetworkConfig(
        CHAIN_ID_ETHEREUM, "Ethereum Mainnet", "mainnet", "https://etherscan.io", "ETH"
    ),
    NetworkConfig(
        CHAIN_ID_OPTIMISM,
        "Optimism",
        "optimism",
        "https://optimistic.etherscan.io",
        "ETH",
    ),
    NetworkConfig(
        CHAIN_ID_ARBITRUM, "Arbitrum One", "arbitrum_one", "https://arbiscan.io", "ETH"
    ),
    NetworkConfig(
        CHAIN_ID_AVALANCHE,
        "Avalanche C-Chain",
        "avalanche",
        "https://snowtrace.io",
        "AVAX",
    ),
    NetworkConfig(CHAIN_ID_SONIC, "Sonic", "sonic", "https://sonicscan.org", "S"),
    NetworkConfig(
        CHAIN_ID_INJECTIVE,
        "Injective",
        "injective",
        "https://blockscout.injective.network",
        "INJ",
    ),
]

NETWORK_CONFIG_BY_ID: dict[int, NetworkConfig] = {
    c.chain_id: c for c in NETWORK_CONFIGS
}

DEFAULT_EXPLORER_BASE_URL = "https://etherscan.io"
DEFAULT_NATIVE_TOKEN_SYMBOL = "ETH"

# File names under common/addresses in the Silo repository
ADDRESS_BOOK_CHAIN_NAMES: dict[int, str] = {
    CHAIN_ID_ETHEREUM: "mainnet",
    CHAIN_ID_POLYGON: "polygon",
    CHAIN_ID_ARBITRUM: "arbitrum_one",
    CHAIN_ID_AVALANCHE: "avalanche",
    CHAIN_ID_BASE: "base",
    CHAIN_ID_SEPOLIA: "sepolia",
    CHAIN_ID_OPTIMISM: "optimism",
    CHAIN_ID_ANVIL: "anvil",
    CHAIN_ID_SONIC: "sonic",
    CHAIN_ID_SONIC_TESTNET: "sonic_testnet",
}

# Deployment directory aliases under silo-core/deployments
CHAIN_ALIASES: dict[int, str] = {
    1: "mainnet",
    5: "goerli",
    11155111: "sepolia",
    10: "optimism",
    420: "optimism_goerli",
    42161: "arbitrum_one",
    421613: "arbitrum_one_goerli",
    42170: "arbitrum_nova",
    137: "polygon",
    80001: "polygon_mumbai",
    43114: "avalanche",
    43113: "avalanche_fuji",
    56: "bnb_smart_chain",
    97: "bnb_smart_chain_testnet",
    100: "gnosis_chain",
    31337: "anvil",
    146: "sonic",
    57073: "ink",
    653: "sonic_testnet",
}

POA_MIDDLEWARE_CHAIN_IDS: set[int] = {
    CHAIN_ID_POLYGON,
    CHAIN_ID_AVALANCHE,
}
