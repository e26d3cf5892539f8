from silo_wizard.core.utils.networks import (
    get_chain_alias,
    get_chain_name,
    get_chain_name_for_addresses,
    get_explorer_address_url,
    get_explorer_tx_url,
    get_native_token_symbol,
    get_network_display_name,
    is_chain_supported,
)


def test_known_network():
    assert get_network_display_name(1) == "Ethereum Mainnet"
    assert get_chain_name("42161") == "arbitrum_one"
    assert get_native_token_symbol(43114) == "AVAX"
    assert get_explorer_tx_url(146, "0xabc") == "https://sonicscan.org/tx/0xabc"
    assert is_chain_supported(10)


def test_unknown_network_fallbacks():
    assert get_network_display_name(999) == "Network 999"
    assert get_chain_name(999) == "chain_999"
    assert get_native_token_symbol(999) == "ETH"
    assert get_explorer_address_url(999, "0x1") == "https://etherscan.io/address/0x1"
    assert not is_chain_supported("not-a-chain")


def test_address_book_and_deployment_names():
    assert get_chain_name_for_addresses(8453) == "base"
    assert get_chain_name_for_addresses(12345) == "chain_12345"
    assert get_chain_alias(57073) == "ink"
