from __future__ import annotations

from typing import Any

from eth_utils import to_checksum_address
from loguru import logger

from silo_wizard.core.clients.AddressBookClient import AddressBookClient
from silo_wizard.core.constants.silo_abi import SILO_FACTORY_ABI


async def verify_silo_address(
    silo_address: str, factory_address: str, web3: Any
) -> bool:
    """``SiloFactory.isSilo(silo)``; False on any call failure."""
    if not silo_address or not factory_address:
        return False
    try:
        factory = web3.eth.contract(
            address=to_checksum_address(factory_address), abi=SILO_FACTORY_ABI
        )
        is_silo = await factory.functions.isSilo(
            to_checksum_address(silo_address)
        ).call()
        return bool(is_silo)
    except Exception as exc:
        logger.warning(f"Failed to verify silo address {silo_address}: {exc}")
        return False


async def verify_address_in_address_book(
    address: str,
    chain_id: int | str,
    client: AddressBookClient | None = None,
) -> bool:
    """True when the address appears as a value in the chain's address book."""
    try:
        client = client or AddressBookClient()
        name = await client.resolve_address_to_name(chain_id, address)
        return name is not None
    except Exception as exc:
        logger.warning(f"Failed to check {address} against address book: {exc}")
        return False
