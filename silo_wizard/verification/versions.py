"""Contract version lookup through the Silo lens, with a process-wide cache.

Deployed bytecode cannot change, so a version string never goes stale and the
cache has no eviction. An empty string is a real answer ("queried, no version")
and is cached like any other; failed calls never are.
"""

from __future__ import annotations

import asyncio
from typing import Any

from eth_utils import to_checksum_address
from loguru import logger

from silo_wizard.core.constants.silo_abi import SILO_LENS_VERSION_ABI
from silo_wizard.core.utils.addresses import is_zero_address, normalize_address

_VERSION_CACHE: dict[tuple[str, str], str] = {}


def _cache_key(chain_id: int | str, address: str) -> tuple[str, str]:
    return str(chain_id).strip(), str(address).strip().lower()


def get_cached_version(chain_id: int | str, address: str) -> str | None:
    if not chain_id or not address:
        return None
    return _VERSION_CACHE.get(_cache_key(chain_id, address))


def set_cached_version(chain_id: int | str, address: str, version: str) -> None:
    if not chain_id or not address:
        return
    _VERSION_CACHE[_cache_key(chain_id, address)] = version


def clear_version_cache() -> None:
    _VERSION_CACHE.clear()


async def _get_version(lens: Any, address: str) -> str:
    return str(await lens.functions.getVersion(address).call())


async def fetch_silo_lens_versions(
    web3: Any,
    lens_address: str,
    chain_id: int | str,
    addresses: list[str],
) -> dict[str, str]:
    """Version strings keyed by lowercased address.

    One bulk ``getVersions`` call covers every uncached address. Addresses that
    come back empty are retried one by one, concurrently. If the bulk call fails
    every uncached address is fetched one by one instead, and addresses whose
    single call also fails are left out of the result.
    """
    result: dict[str, str] = {}
    to_fetch: list[str] = []

    for raw in addresses:
        checksum = normalize_address(raw)
        if checksum is None or is_zero_address(checksum):
            continue
        key = checksum.lower()
        if key in result or checksum in to_fetch:
            continue
        cached = get_cached_version(chain_id, key)
        if cached is not None:
            result[key] = cached
            continue
        to_fetch.append(checksum)

    if not to_fetch:
        return result

    lens = web3.eth.contract(
        address=to_checksum_address(lens_address), abi=SILO_LENS_VERSION_ABI
    )

    try:
        versions = await lens.functions.getVersions(to_fetch).call()
    except Exception as exc:
        logger.debug(
            f"getVersions failed on lens {lens_address} (chain {chain_id}), "
            f"falling back to {len(to_fetch)} single call(s): {exc}"
        )
        await _fetch_each(lens, chain_id, to_fetch, result, empty_on_failure=False)
        return result

    empty: list[str] = []
    for i, address in enumerate(to_fetch):
        version = str(versions[i]) if i < len(versions) and versions[i] else ""
        if version == "":
            empty.append(address)
            continue
        set_cached_version(chain_id, address, version)
        result[address.lower()] = version

    if empty:
        await _fetch_each(lens, chain_id, empty, result, empty_on_failure=True)

    logger.info(f"Resolved {len(result)} contract version(s) on chain {chain_id}")
    return result


async def _fetch_each(
    lens: Any,
    chain_id: int | str,
    addresses: list[str],
    result: dict[str, str],
    *,
    empty_on_failure: bool,
) -> None:
    outcomes = await asyncio.gather(
        *(_get_version(lens, address) for address in addresses),
        return_exceptions=True,
    )
    for address, outcome in zip(addresses, outcomes, strict=True):
        key = address.lower()
        if isinstance(outcome, Exception):
            logger.warning(
                f"getVersion({address}) failed on chain {chain_id}: {outcome}"
            )
            if empty_on_failure:
                # reported as versionless for this call only
                result[key] = ""
            continue
        set_cached_version(chain_id, key, outcome)
        result[key] = outcome
