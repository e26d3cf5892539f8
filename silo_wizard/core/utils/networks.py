from __future__ import annotations

from silo_wizard.core.constants.chains import (
    ADDRESS_BOOK_CHAIN_NAMES,
    CHAIN_ALIASES,
    DEFAULT_EXPLORER_BASE_URL,
    DEFAULT_NATIVE_TOKEN_SYMBOL,
    NETWORK_CONFIG_BY_ID,
    NETWORK_CONFIGS,
    NetworkConfig,
)


def _chain_id(chain_id: int | str) -> int:
    return int(str(chain_id).strip())


def get_network_config(chain_id: int | str) -> NetworkConfig | None:
    try:
        return NETWORK_CONFIG_BY_ID.get(_chain_id(chain_id))
    except ValueError:
        return None


def get_network_display_name(chain_id: int | str) -> str:
    config = get_network_config(chain_id)
    if config:
        return config.display_name
    return f"Network {chain_id}"


def get_chain_name(chain_id: int | str) -> str:
    config = get_network_config(chain_id)
    if config:
        return config.chain_name
    return f"chain_{chain_id}"


def get_chain_name_for_addresses(chain_id: int | str) -> str:
    try:
        name = ADDRESS_BOOK_CHAIN_NAMES.get(_chain_id(chain_id))
    except ValueError:
        name = None
    return name or f"chain_{chain_id}"


def get_chain_alias(chain_id: int | str) -> str:
    try:
        alias = CHAIN_ALIASES.get(_chain_id(chain_id))
    except ValueError:
        alias = None
    return alias or f"chain_{chain_id}"


def get_explorer_base_url(chain_id: int | str) -> str:
    config = get_network_config(chain_id)
    return config.explorer_base_url if config else DEFAULT_EXPLORER_BASE_URL


def get_explorer_address_url(chain_id: int | str, address: str) -> str:
    return f"{get_explorer_base_url(chain_id)}/address/{address}"


def get_explorer_tx_url(chain_id: int | str, tx_hash: str) -> str:
    return f"{get_explorer_base_url(chain_id)}/tx/{tx_hash}"


def get_native_token_symbol(chain_id: int | str) -> str:
    config = get_network_config(chain_id)
    return config.native_token_symbol if config else DEFAULT_NATIVE_TOKEN_SYMBOL


def get_supported_chain_ids() -> list[int]:
    return [c.chain_id for c in NETWORK_CONFIGS]


def is_chain_supported(chain_id: int | str) -> bool:
    return get_network_config(chain_id) is not None
