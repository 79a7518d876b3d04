"""Fetcher genérico (abierto/cerrado).

Antes:
- `UserFetcher` y `AlienFetcher` repetían el mismo código de obtención y
  decodificación; cada tipo de registro nuevo exigía otra copia.

Después:
- `Fetcher(record_type)` es un único componente parametrizado por el tipo de
  registro. Un tipo nuevo es solo un argumento nuevo: `Fetcher(Alien)`.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx

from adapters.decoding import decode_records
from adapters.http_client import get_bytes, parse_endpoint
from core.config import AppSettings
from core.domain.models import Alien, User
from core.interfaces.fetcher import RecordFetcher

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class Fetcher(RecordFetcher[RecordT]):
    """Obtiene `{url}` y lo decodifica como `list[record_type]`.

    Si no se indica `url`, se usa `{api_base_url}/{record_type.__name__.lower()}s`.
    """

    def __init__(
        self,
        record_type: type[RecordT],
        *,
        url: str | None = None,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._record_type = record_type
        self._settings = settings or AppSettings()
        self._transport = transport
        self._url = url or self._default_url()

    @property
    def record_type(self) -> type[RecordT]:
        return self._record_type

    @property
    def url(self) -> str:
        return self._url

    def _default_url(self) -> str:
        base = self._settings.api_base_url.rstrip("/")
        return f"{base}/{self._record_type.__name__.lower()}s"

    async def fetch(self) -> list[RecordT]:
        url = parse_endpoint(self._url)
        if url is None:
            logger.debug("Malformed endpoint %r for %s", self._url, self._record_type.__name__)
            return []

        data = await get_bytes(url, settings=self._settings, transport=self._transport)
        return decode_records(
            data,
            self._record_type,
            lenient=self._settings.decode_failure_as_empty,
        )


class UserFetcher:
    """Versión antes: fetcher atado a `User`.

    Para soportar `Alien` hubo que copiar la clase entera (`AlienFetcher`).
    """

    def __init__(
        self,
        *,
        url: str | None = None,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._url = url or f"{self._settings.api_base_url.rstrip('/')}/users"

    async def fetch_users(self) -> list[User]:
        url = parse_endpoint(self._url)
        if url is None:
            return []
        data = await get_bytes(url, settings=self._settings, transport=self._transport)
        return decode_records(data, User, lenient=self._settings.decode_failure_as_empty)


class AlienFetcher:
    """Versión antes: copia de `UserFetcher` cambiando solo el tipo."""

    def __init__(
        self,
        *,
        url: str | None = None,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport
        self._url = url or f"{self._settings.api_base_url.rstrip('/')}/aliens"

    async def fetch_aliens(self) -> list[Alien]:
        url = parse_endpoint(self._url)
        if url is None:
            return []
        data = await get_bytes(url, settings=self._settings, transport=self._transport)
        return decode_records(data, Alien, lenient=self._settings.decode_failure_as_empty)
