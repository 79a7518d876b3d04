"""Contratos de la pantalla de productos (inversión de dependencias).

Por qué Protocol:
- La pantalla (alto nivel) y la capa de red (bajo nivel) dependen de estos
  contratos, nunca una de la otra.
- Cualquier objeto con la forma adecuada sirve: un stub en tests, el cliente
  HTTP real, o un catálogo en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProductRecord(Protocol):
    """Lo mínimo que la pantalla necesita saber de un producto."""

    @property
    def name(self) -> str: ...

    @property
    def cost(self) -> int: ...

    @property
    def image(self) -> bytes: ...


@runtime_checkable
class ProductCatalog(Protocol):
    """Contrato mínimo para obtener productos de un usuario.

    Reglas de diseño:
    - `get_products` es asíncrono y entrega un único resultado terminal: la
      lista (posiblemente vacía) o una excepción.
    - No nombra transporte ni tipo concreto de registro.
    """

    async def get_products(self, user_id: str) -> list[ProductRecord]:
        """Devuelve los productos asociados a `user_id`."""

        ...
