"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la traducción de errores de transporte.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.errors import TransportFailure

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los fetchers se comporten igual.
    - `transport` permite sustituir la red por un stub en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def parse_endpoint(raw: str) -> httpx.URL | None:
    """Devuelve la URL si es utilizable, o `None` si está mal formada.

    Utilizable = esquema http(s) y host no vacío.
    """

    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, TypeError, ValueError):
        return None
    if url.scheme not in ("http", "https") or not url.host:
        return None
    return url


async def get_bytes(
    url: httpx.URL,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bytes:
    """GET de un solo disparo: devuelve el body o lanza `TransportFailure`.

    Solo se mira éxito/fracaso (2xx o no); headers y demás detalles no salen
    de aquí.
    """

    logger.debug("GET %s", url)
    try:
        async with build_async_client(settings, transport=transport) as client:
            resp = await client.get(url)
    except httpx.HTTPError as exc:
        raise TransportFailure(f"Request to {url} failed: {exc}", url=str(url)) from exc

    if not resp.is_success:
        raise TransportFailure(
            f"Request to {url} returned HTTP {resp.status_code}",
            url=str(url),
            status_code=resp.status_code,
        )
    return resp.content
