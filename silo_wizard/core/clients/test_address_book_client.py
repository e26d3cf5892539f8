from __future__ import annotations

import httpx
import pytest

from silo_wizard.core.clients.AddressBookClient import AddressBookClient

BASE_URL = "https://addresses.test/common/addresses"
WS = "0x039e2fB66102314Ce7b64Ce5Ce3E5183bc94aD38"
DAO = "0x" + "de" * 20

SONIC_BOOK = {
    "wS": WS,
    "DAO": DAO,
    "broken": "not-an-address",
    "nested": {"ignored": True},
}


def _client(handler) -> AddressBookClient:
    return AddressBookClient(
        base_url=BASE_URL,
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def _serving(book: dict, calls: list[str]):
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(200, json=book)

    return handler


@pytest.mark.asyncio
async def test_fetches_chain_file_once():
    calls: list[str] = []
    client = _client(_serving(SONIC_BOOK, calls))

    first = await client.get_addresses(146)
    second = await client.get_addresses("146")

    assert first == {"wS": WS, "DAO": DAO, "broken": "not-an-address"}
    assert second is first
    assert calls == [f"{BASE_URL}/sonic.json"]


@pytest.mark.asyncio
async def test_resolve_symbol_is_case_insensitive():
    client = _client(_serving(SONIC_BOOK, []))

    assert await client.resolve_symbol_to_address(146, " ws ") == (WS, "wS")
    assert await client.resolve_symbol_to_address(146, "missing") is None
    assert await client.resolve_symbol_to_address(146, "broken") is None
    assert await client.resolve_symbol_to_address(146, "") is None


@pytest.mark.asyncio
async def test_resolve_address_to_name():
    client = _client(_serving(SONIC_BOOK, []))

    assert await client.resolve_address_to_name(146, WS.lower()) == "wS"
    assert await client.resolve_address_to_name(146, "0x" + "00" * 20) is None


@pytest.mark.asyncio
async def test_failures_are_not_cached():
    calls: list[str] = []
    responses = [httpx.Response(500), httpx.Response(200, json=SONIC_BOOK)]

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return responses.pop(0)

    client = _client(handler)

    assert await client.resolve_symbol_to_address(146, "wS") is None
    assert await client.resolve_symbol_to_address(146, "wS") == (WS, "wS")
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_get_addresses_raises_on_non_object():
    client = _client(lambda request: httpx.Response(200, json=["x"]))
    with pytest.raises(ValueError):
        await client.get_addresses(1)


def test_unknown_chain_url():
    client = AddressBookClient(base_url=BASE_URL + "/")
    assert client.get_addresses_json_url(999) == f"{BASE_URL}/chain_999.json"
