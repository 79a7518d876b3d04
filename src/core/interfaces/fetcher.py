"""Contrato genérico de obtención + decodificación (abierto/cerrado)."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

RecordT_co = TypeVar("RecordT_co", covariant=True)


@runtime_checkable
class RecordFetcher(Protocol[RecordT_co]):
    """Obtiene una colección de registros de un único tipo.

    Añadir un tipo de registro nuevo no requiere un contrato nuevo: basta con
    otro argumento de tipo (`RecordFetcher[User]`, `RecordFetcher[Alien]`).
    """

    async def fetch(self) -> list[RecordT_co]:
        ...
