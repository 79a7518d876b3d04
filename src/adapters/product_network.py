"""Capa de red del catálogo de productos.

`ProductNetwork` cumple `core.interfaces.catalog.ProductCatalog` de forma
estructural: la pantalla nueva solo conoce el contrato, la antigua la
construía directamente.

Endpoint: `{api_base_url}/products/user/{user_id}`.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from adapters.decoding import decode_records
from adapters.http_client import get_bytes, parse_endpoint
from core.config import AppSettings
from core.domain.models import Product
from core.interfaces.catalog import ProductCatalog, ProductRecord

logger = logging.getLogger(__name__)


class ProductNetwork(ProductCatalog):
    """Obtiene productos por HTTP y los decodifica como `Product`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def endpoint_for(self, user_id: str) -> str:
        base = self._settings.api_base_url.rstrip("/")
        return f"{base}/products/user/{quote(user_id, safe='')}"

    async def get_products(self, user_id: str) -> list[ProductRecord]:
        url = parse_endpoint(self.endpoint_for(user_id))
        if url is None:
            # Endpoint inconstruible: resultado vacío, no error.
            logger.debug("Malformed products endpoint for user %r", user_id)
            return []

        data = await get_bytes(url, settings=self._settings, transport=self._transport)
        return list(
            decode_records(
                data,
                Product,
                lenient=self._settings.decode_failure_as_empty,
            )
        )
