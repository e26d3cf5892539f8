from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from silo_wizard.core.config import get_http_timeout, get_repo_base_url

SILO_IMPLEMENTATIONS_PATH = "silo-core/deploy/silo/_siloImplementations.json"
KINK_IRM_CONFIGS_PATH = "silo-core/deploy/input/irmConfigs/kink/DKinkIRMConfigs.json"
KINK_IRM_IMMUTABLE_PATH = (
    "silo-core/deploy/input/irmConfigs/kink/DKinkIRMImmutable.json"
)
IRM_V2_CONFIGS_PATH = "silo-core/deploy/input/irmConfigs/InterestRateModelConfigs.json"


class SiloRepoClient:
    """Raw JSON files from the silo-contracts-v2 repository.

    Nothing is cached; every call hits the network and HTTP errors propagate.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = str(base_url or get_repo_base_url()).rstrip("/")
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(get_http_timeout())
        )

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        resp = await self.client.get(
            url, headers={"cache-control": "no-cache", "pragma": "no-cache"}
        )
        resp.raise_for_status()
        return resp.json()

    async def fetch_silo_core_deployment_address(
        self, chain_alias: str, contract_name: str
    ) -> str | None:
        data = await self._get_json(
            f"silo-core/deployments/{chain_alias}/{contract_name}.json"
        )
        if not isinstance(data, dict):
            return None
        address = data.get("address")
        return str(address) if address else None

    async def fetch_silo_implementations(self, chain_alias: str) -> list[str]:
        data = await self._get_json(SILO_IMPLEMENTATIONS_PATH)
        entries = data.get(chain_alias) if isinstance(data, dict) else None
        implementations = [
            str(entry["implementation"])
            for entry in entries or []
            if isinstance(entry, dict) and entry.get("implementation")
        ]
        logger.debug(
            f"{len(implementations)} silo implementation(s) listed for {chain_alias}"
        )
        return implementations

    async def fetch_kink_irm_configs(self) -> list[dict[str, Any]]:
        data = await self._get_json(KINK_IRM_CONFIGS_PATH)
        return [d for d in data or [] if isinstance(d, dict)]

    async def fetch_kink_irm_immutables(self) -> list[dict[str, Any]]:
        data = await self._get_json(KINK_IRM_IMMUTABLE_PATH)
        return [d for d in data or [] if isinstance(d, dict)]

    async def fetch_irm_v2_configs(self) -> list[dict[str, Any]]:
        data = await self._get_json(IRM_V2_CONFIGS_PATH)
        return [d for d in data or [] if isinstance(d, dict)]
