"""Contratos de almacenamiento (segregación de interfaces).

Antes:
- `Cache` obligaba a cada backend a implementar las tres operaciones, aunque
  solo una lectura perteneciera a su dominio (la otra devolvía `None`).

Después:
- `ValueSaver` es el mínimo común (guardar el valor en bruto).
- `UserIdCacheable` y `AccessTokenCacheable` añaden cada uno su propia lectura.
  Un backend declara solo los roles que cumple.

Los métodos son abstractos: una clase que hereda un rol sin implementarlo
falla al construirse (`TypeError`), no devuelve `None` en tiempo de ejecución.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from core.domain.models import Token


@runtime_checkable
class ValueStore(Protocol):
    """Colaborador clave-valor (seguro o simple) sobre el que se montan las caches."""

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        ...

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        """Devuelve el valor guardado o `None` si no existe."""

        ...


class Cache(Protocol):
    """Contrato "gordo" de la versión antes. No usar en código nuevo."""

    @abstractmethod
    def retrieve_access_token(self) -> Token | None:
        ...

    @abstractmethod
    def retrieve_user_id(self) -> str | None:
        ...

    @abstractmethod
    def save(self, value: bytes) -> None:
        ...


@runtime_checkable
class ValueSaver(Protocol):
    @abstractmethod
    def save(self, value: bytes) -> None:
        ...


@runtime_checkable
class UserIdCacheable(ValueSaver, Protocol):
    @abstractmethod
    def retrieve_user_id(self) -> str | None:
        ...


@runtime_checkable
class AccessTokenCacheable(ValueSaver, Protocol):
    @abstractmethod
    def retrieve_access_token(self) -> Token | None:
        ...
