"""Pasos concretos del flujo de feed: request, parse y save.

Cada clase hace una sola cosa; `core.services.feed_sync.FeedSyncManager` las
encadena. Se inyectan desde fuera, así cualquiera puede sustituirse.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

import httpx

from adapters.decoding import decode_records
from adapters.http_client import get_bytes, parse_endpoint
from core.config import AppSettings
from core.domain.models import Post
from core.errors import TransportFailure
from core.interfaces.workflow import FeedParser, FeedRequester, FeedStore

logger = logging.getLogger(__name__)


class HttpFeedRequester(FeedRequester):
    def __init__(
        self,
        url: str | None = None,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._url = url or self._settings.feed_url
        self._transport = transport

    async def request(self) -> bytes:
        url = parse_endpoint(self._url)
        if url is None:
            # A diferencia de los fetchers, el flujo no tiene un "vacío" que
            # devolver: sin fuente no hay nada que persistir.
            raise TransportFailure(f"Malformed feed endpoint: {self._url!r}", url=self._url)
        return await get_bytes(url, settings=self._settings, transport=self._transport)


class JsonFeedParser(FeedParser):
    def parse(self, data: bytes) -> list[Post]:
        return decode_records(data, Post)


class MemoryPostStore(FeedStore):
    def __init__(self) -> None:
        self.saved: list[Post] = []

    def save(self, posts: Sequence[Post]) -> None:
        self.saved.extend(posts)


class JsonFilePostStore(FeedStore):
    """Exporta los posts a JSON UTF-8 con formato estable."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def save(self, posts: Sequence[Post]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = [post.model_dump(mode="json") for post in posts]
        self._path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        logger.debug("Saved %d posts to %s", len(payload), self._path)
