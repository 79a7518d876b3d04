"""Figuras geométricas (sustitución de Liskov).

Por qué dos familias:
- `Rectangle` y `Square` son hermanos: ambos cumplen `Geometric` sin que uno
  herede del otro. Cualquier consumidor puede recibir uno u otro.
- `InheritedRectangle` y sus dos subclases se conservan como contraejemplo:
  `UnconstrainedSquare` hereda sin cambios y admite lados distintos;
  `InheritedSquare` cambia el constructor para forzar width == height,
  endureciendo la precondición de la clase base.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.interfaces.geometry import Geometric


class Rectangle(BaseModel):
    """Cuadrilátero con ancho y alto independientes."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    def area(self) -> int:
        return self.width * self.height


class Square(BaseModel):
    """Cuadrilátero de lados iguales, descrito por una sola arista."""

    model_config = ConfigDict(frozen=True)

    edge: int = Field(..., ge=0)

    def area(self) -> int:
        return self.edge * self.edge


def total_area(shapes: Iterable[Geometric]) -> int:
    """Suma las áreas sin saber qué variante hay detrás de cada referencia."""

    return sum(shape.area() for shape in shapes)


class InheritedRectangle:
    """Rectángulo mutable de la versión "antes" (no usar como base)."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def area(self) -> int:
        return self.width * self.height


class UnconstrainedSquare(InheritedRectangle):
    """Primer intento rechazado: cuadrado que hereda sin cambiar nada.

    Acepta `UnconstrainedSquare(width=5, height=10)`, un "cuadrado" con lados
    distintos: el tipo no expresa ningún invariante propio.
    """


class InheritedSquare(InheritedRectangle):
    """Cuadrado derivado del rectángulo: diseño rechazado.

    El constructor solo acepta un lado, así que ya no admite todo lo que admite
    `InheritedRectangle`, y tras construirlo nada impide `square.width = 10`,
    que rompe el invariante del cuadrado.
    """

    def __init__(self, width: int) -> None:
        super().__init__(width=width, height=width)
