from __future__ import annotations

import time
from typing import Any

import httpx
from loguru import logger

from silo_wizard.core.config import get_addresses_json_base_url, get_http_timeout
from silo_wizard.core.utils.networks import get_chain_name_for_addresses


class AddressBookClient:
    """Per-chain ``name -> address`` JSON published in the Silo contracts repository.

    Successful fetches are cached for the lifetime of the process, keyed by base URL
    and chain. Failed fetches are never cached so a later call can retry.
    """

    _cache: dict[tuple[str, int], dict[str, str]] = {}

    def __init__(
        self,
        *,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = str(base_url or get_addresses_json_base_url()).rstrip("/")
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(get_http_timeout())
        )

    @classmethod
    def clear_cache(cls) -> None:
        cls._cache.clear()

    def get_addresses_json_url(self, chain_id: int | str) -> str:
        return f"{self.base_url}/{get_chain_name_for_addresses(chain_id)}.json"

    async def _fetch_addresses(self, chain_id: int) -> dict[str, str]:
        url = self.get_addresses_json_url(chain_id)
        start = time.time()
        resp = await self.client.get(url, headers={"cache-control": "no-cache"})
        resp.raise_for_status()
        data: Any = resp.json()
        logger.debug(f"Fetched address book {url} in {time.time() - start:.2f}s")
        if not isinstance(data, dict):
            raise ValueError(f"Address book at {url} is not a JSON object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    async def get_addresses(self, chain_id: int | str) -> dict[str, str]:
        """Full address book for the chain. Raises on HTTP or decode failure."""
        chain_id = int(chain_id)
        key = (self.base_url, chain_id)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        addresses = await self._fetch_addresses(chain_id)
        self._cache[key] = addresses
        return addresses

    async def resolve_symbol_to_address(
        self, chain_id: int | str, symbol: str
    ) -> tuple[str, str] | None:
        """``(address, exact_key)`` for a case-insensitive key match, else None."""
        key = (symbol or "").strip().lower()
        if not key:
            return None
        try:
            addresses = await self.get_addresses(chain_id)
        except Exception as exc:
            logger.warning(f"Address book lookup failed for chain {chain_id}: {exc}")
            return None
        for name, address in addresses.items():
            if name.lower() != key:
                continue
            if not address.startswith("0x"):
                return None
            return address, name
        return None

    async def resolve_address_to_name(
        self, chain_id: int | str, address: str
    ) -> str | None:
        target = (address or "").strip().lower()
        if not target:
            return None
        try:
            addresses = await self.get_addresses(chain_id)
        except Exception as exc:
            logger.warning(f"Address book lookup failed for chain {chain_id}: {exc}")
            return None
        for name, value in addresses.items():
            if value.strip().lower() == target:
                return name
        return None
