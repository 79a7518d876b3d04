"""Contrato de figuras geométricas (sustitución de Liskov)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Geometric(Protocol):
    """Cualquier figura capaz de calcular su área.

    `area` es pura y total sobre las dimensiones guardadas: sin precondiciones
    extra, siempre un entero no negativo, mismo resultado en cada llamada.
    """

    def area(self) -> int:
        ...
