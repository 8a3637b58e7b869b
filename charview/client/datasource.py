"""Paginated character source backed by the Rick and Morty HTTP API."""

from __future__ import annotations

from typing import Protocol

import httpx
from pydantic import BaseModel, Field, ValidationError

from charview.client.errors import FetchFailure
from charview.client.logging import get_logger
from charview.client.models import CharacterRecord, PageResult

logger = get_logger(__name__)


class LocationPayload(BaseModel):
    name: str


class CharacterPayload(BaseModel):
    id: int
    name: str
    status: str
    species: str
    gender: str
    location: LocationPayload
    image: str

    def to_record(self) -> CharacterRecord:
        return CharacterRecord(
            id=self.id,
            name=self.name,
            status=self.status,
            species=self.species,
            gender=self.gender,
            location_name=self.location.name,
            image_url=self.image,
        )


class PageInfoPayload(BaseModel):
    pages: int = Field(ge=1)


class CharacterPagePayload(BaseModel):
    info: PageInfoPayload
    results: list[CharacterPayload]

    def to_page_result(self) -> PageResult:
        return PageResult(
            items=tuple(character.to_record() for character in self.results),
            total_pages=self.info.pages,
        )


class CharacterSource(Protocol):
    async def fetch_page(self, page_number: int) -> PageResult:
        """Return the characters of one page or raise FetchFailure."""


def validate_page_number(page_number: int) -> None:
    if isinstance(page_number, bool) or not isinstance(page_number, int) or page_number < 1:
        raise ValueError(f"page_number must be a positive integer, got {page_number!r}")


class HttpCharacterSource:
    """Fetch character pages with ``GET {base_url}?page={n}``.

    The source never retries. Every failure, whether a transport error, a
    non-2xx status or a body that does not match the expected payload,
    surfaces as :class:`FetchFailure`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> HttpCharacterSource:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_page(self, page_number: int) -> PageResult:
        validate_page_number(page_number)
        logger.info("fetching_characters", url=self.base_url, page=page_number)

        try:
            response = await self._client.get(self.base_url, params={"page": page_number})
        except httpx.HTTPError as exc:
            raise FetchFailure(str(exc) or exc.__class__.__name__, url=self.base_url) from exc

        if not response.is_success:
            raise FetchFailure(
                f"Erro na API: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                url=str(response.url),
            )

        try:
            payload = CharacterPagePayload.model_validate_json(response.content)
        except ValidationError as exc:
            raise FetchFailure(
                f"Resposta inválida da API: {exc.error_count()} erro(s) de validação",
                status_code=response.status_code,
                url=str(response.url),
            ) from exc

        result = payload.to_page_result()
        logger.debug(
            "characters_received",
            page=page_number,
            count=len(result.items),
            total_pages=result.total_pages,
        )
        return result
