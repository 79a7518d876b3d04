"""Contratos del flujo de sincronización de feed (responsabilidad única).

Cada contrato tiene una sola operación y una sola razón para cambiar:
- `FeedRequester`: obtener bytes de una fuente externa.
- `FeedParser`: convertir bytes en registros del dominio.
- `FeedStore`: persistir registros.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import Post


@runtime_checkable
class FeedRequester(Protocol):
    async def request(self) -> bytes:
        """Devuelve el payload en bruto o lanza `TransportFailure`."""

        ...


@runtime_checkable
class FeedParser(Protocol):
    def parse(self, data: bytes) -> list[Post]:
        """Devuelve los registros o lanza `DecodeFailure`."""

        ...


@runtime_checkable
class FeedStore(Protocol):
    def save(self, posts: Sequence[Post]) -> None:
        ...
