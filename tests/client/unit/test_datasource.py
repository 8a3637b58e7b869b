import asyncio

import httpx
import pytest

from charview.client.datasource import HttpCharacterSource
from charview.client.errors import FetchFailure

BASE_URL = "https://api.test/api/character"


def _character_payload(character_id: int, name: str, status: str) -> dict:
    return {
        "id": character_id,
        "name": name,
        "status": status,
        "species": "Human",
        "type": "",
        "gender": "Male",
        "origin": {"name": "Earth (C-137)", "url": ""},
        "location": {"name": "Citadel of Ricks", "url": ""},
        "image": f"https://rickandmortyapi.com/api/character/avatar/{character_id}.jpeg",
        "episode": [],
        "url": "",
        "created": "2017-11-04T18:48:46.250Z",
    }


def _fetch(handler, page_number: int):
    async def scenario():
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        async with HttpCharacterSource(BASE_URL, client=client) as source:
            try:
                return await source.fetch_page(page_number)
            finally:
                await client.aclose()

    return asyncio.run(scenario())


def test_fetch_page_requests_page_and_maps_records() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "info": {"count": 826, "pages": 42, "next": None, "prev": None},
                "results": [
                    _character_payload(1, "Rick Sanchez", "Alive"),
                    _character_payload(2, "Morty Smith", "Alive"),
                ],
            },
        )

    result = _fetch(handler, 3)

    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.params["page"] == "3"
    assert seen[0].url.path == "/api/character"
    assert result.total_pages == 42
    assert [item.name for item in result.items] == ["Rick Sanchez", "Morty Smith"]
    first = result.items[0]
    assert first.id == 1
    assert first.status == "Alive"
    assert first.location_name == "Citadel of Ricks"
    assert first.image_url.endswith("/1.jpeg")


def test_fetch_page_raises_fetch_failure_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "There is nothing here"})

    with pytest.raises(FetchFailure) as excinfo:
        _fetch(handler, 99)

    assert excinfo.value.message == "Erro na API: 404 Not Found"
    assert excinfo.value.status_code == 404


def test_fetch_page_raises_fetch_failure_on_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchFailure) as excinfo:
        _fetch(handler, 1)

    assert excinfo.value.message == "connection refused"
    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_fetch_page_raises_fetch_failure_on_malformed_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>not json</html>")

    with pytest.raises(FetchFailure) as excinfo:
        _fetch(handler, 1)

    assert excinfo.value.message.startswith("Resposta inválida da API")


def test_fetch_page_raises_fetch_failure_on_missing_fields() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"results": []})

    with pytest.raises(FetchFailure):
        _fetch(handler, 1)


@pytest.mark.parametrize("page_number", [0, -1, True, 1.5])
def test_fetch_page_rejects_invalid_page_number(page_number) -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"info": {"pages": 1}, "results": []})

    with pytest.raises(ValueError):
        _fetch(handler, page_number)

    assert calls == []


def test_source_does_not_close_injected_client() -> None:
    async def scenario() -> bool:
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
        source = HttpCharacterSource(BASE_URL, client=client)
        await source.aclose()
        closed = client.is_closed
        await client.aclose()
        return closed

    assert asyncio.run(scenario()) is False
