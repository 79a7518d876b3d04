"""Sincronización de feed (responsabilidad única).

Antes:
- `MonolithicFeedManager` pedía los datos, los convertía y los guardaba. Tres
  razones para cambiar en una sola clase.

Después:
- `FeedSyncManager` solo coordina: recibe los tres pasos ya construidos y los
  ejecuta en orden estricto. Si un paso falla, la excepción sube tal cual y los
  pasos siguientes no se ejecutan (nunca hay persistencia parcial).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import httpx

from adapters.decoding import decode_records
from adapters.http_client import get_bytes, parse_endpoint
from core.config import AppSettings
from core.domain.models import Post
from core.errors import TransportFailure
from core.interfaces.workflow import FeedParser, FeedRequester, FeedStore

logger = logging.getLogger(__name__)


class FeedSyncManager:
    def __init__(self, request: FeedRequester, parse: FeedParser, store: FeedStore) -> None:
        self._request = request
        self._parse = parse
        self._store = store

    async def create(self) -> list[Post]:
        """Ejecuta request -> parse -> save y devuelve los posts guardados."""

        data = await self._request.request()
        posts = self._parse.parse(data)
        self._store.save(posts)
        logger.info("Feed sync stored %d posts", len(posts))
        return posts


class MonolithicFeedManager:
    """Versión antes: una clase que obtiene, convierte y persiste.

    Hace lo mismo que `FeedSyncManager` con `HttpFeedRequester`,
    `JsonFeedParser` y `JsonFilePostStore`, pero cualquier cambio en el
    transporte, el formato o el destino obliga a tocar esta clase.
    """

    def __init__(
        self,
        output: Path,
        url: str | None = None,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._url = url or self._settings.feed_url
        self._output = output
        self._transport = transport

    async def _request(self) -> bytes:
        url = parse_endpoint(self._url)
        if url is None:
            raise TransportFailure(f"Malformed feed endpoint: {self._url!r}", url=self._url)
        return await get_bytes(url, settings=self._settings, transport=self._transport)

    def _convert_json_to_model(self, data: bytes) -> list[Post]:
        return decode_records(data, Post)

    def _save(self, posts: list[Post]) -> None:
        self._output.parent.mkdir(parents=True, exist_ok=True)
        payload = [post.model_dump(mode="json") for post in posts]
        self._output.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )

    async def create(self) -> list[Post]:
        data = await self._request()
        posts = self._convert_json_to_model(data)
        self._save(posts)
        return posts
