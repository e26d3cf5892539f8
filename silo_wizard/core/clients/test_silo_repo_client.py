from __future__ import annotations

import httpx
import pytest

from silo_wizard.core.clients.SiloRepoClient import SiloRepoClient

BASE_URL = "https://repo.test/silo-contracts-v2/master"
FACTORY = "0x" + "fa" * 20


def _client(routes: dict[str, httpx.Response]) -> SiloRepoClient:
    def handler(request: httpx.Request) -> httpx.Response:
        path = str(request.url).removeprefix(BASE_URL + "/")
        return routes.get(path, httpx.Response(404))

    return SiloRepoClient(
        base_url=BASE_URL,
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_fetch_deployment_address():
    client = _client(
        {
            "silo-core/deployments/sonic/SiloFactory.sol.json": httpx.Response(
                200, json={"address": FACTORY, "abi": []}
            )
        }
    )
    address = await client.fetch_silo_core_deployment_address(
        "sonic", "SiloFactory.sol"
    )
    assert address == FACTORY


@pytest.mark.asyncio
async def test_fetch_deployment_address_raises_on_404():
    client = _client({})
    with pytest.raises(httpx.HTTPStatusError):
        await client.fetch_silo_core_deployment_address("sonic", "Missing.sol")


@pytest.mark.asyncio
async def test_fetch_silo_implementations():
    client = _client(
        {
            "silo-core/deploy/silo/_siloImplementations.json": httpx.Response(
                200,
                json={
                    "sonic": [
                        {"implementation": "0x" + "01" * 20},
                        {"implementation": "0x" + "02" * 20},
                        {"other": "x"},
                    ],
                    "mainnet": [{"implementation": "0x" + "03" * 20}],
                },
            )
        }
    )

    assert await client.fetch_silo_implementations("sonic") == [
        "0x" + "01" * 20,
        "0x" + "02" * 20,
    ]
    assert await client.fetch_silo_implementations("ink") == []


@pytest.mark.asyncio
async def test_fetch_irm_configs():
    client = _client(
        {
            "silo-core/deploy/input/irmConfigs/kink/DKinkIRMConfigs.json": (
                httpx.Response(200, json=[{"name": "static_0_40_10", "config": {}}, 1])
            ),
            "silo-core/deploy/input/irmConfigs/InterestRateModelConfigs.json": (
                httpx.Response(200, json=[{"name": "irm_a", "config": {"uopt": 1}}])
            ),
        }
    )

    assert await client.fetch_kink_irm_configs() == [
        {"name": "static_0_40_10", "config": {}}
    ]
    assert (await client.fetch_irm_v2_configs())[0]["name"] == "irm_a"
