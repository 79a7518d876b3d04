"""Pantalla de productos (inversión de dependencias).

`CoupledProductScreen` es la versión antes: construye su propia
`ProductNetwork`, así que cualquier cambio en la capa de red la afecta y no
se puede probar sin red.

`ProductScreen` recibe un `ProductCatalog` en el constructor y solo guarda la
referencia; no sabe qué implementación concreta hay detrás.
"""

from __future__ import annotations

import logging
from typing import Sequence

from adapters.product_network import ProductNetwork
from core.config import AppSettings
from core.interfaces.catalog import ProductCatalog, ProductRecord

logger = logging.getLogger(__name__)


class ProductScreen:
    def __init__(
        self,
        catalog: ProductCatalog,
        products: Sequence[ProductRecord] = (),
        *,
        user_id: str | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._catalog = catalog
        self._products: list[ProductRecord] = list(products)
        self._user_id = user_id or (settings or AppSettings()).default_user_id

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def products(self) -> list[ProductRecord]:
        return list(self._products)

    async def load(self) -> list[ProductRecord]:
        """Pide los productos y los sustituye; si falla, no toca los actuales."""

        products = await self._catalog.get_products(self._user_id)
        self._products = list(products)
        logger.debug("Loaded %d products for %s", len(self._products), self._user_id)
        return self.products


class CoupledProductScreen:
    """Versión antes: depende de la clase concreta `ProductNetwork`."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        settings = settings or AppSettings()
        self._network = ProductNetwork(settings)
        self._user_id = settings.default_user_id
        self.products: list[ProductRecord] = []

    async def load(self) -> None:
        self.products = await self._network.get_products(self._user_id)
