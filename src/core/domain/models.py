"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El mismo modelo sirve de "forma destino" al decodificar payloads JSON.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Todos son inmutables: se crean al decodificar y nunca se modifican.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Product(BaseModel):
    """Producto mostrado por la pantalla de productos."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    name: str = Field(
        ...,
        min_length=1,
        description="Nombre visible del producto.",
    )
    cost: int = Field(
        ...,
        ge=0,
        description="Coste en unidades enteras (céntimos, créditos...).",
    )
    image: bytes = Field(
        default=b"",
        description="Imagen en bruto; viaja en base64 dentro del JSON.",
    )


class User(BaseModel):
    """Jugador humano del juego."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = None
    character: str | None = None
    score: float | None = None


class Alien(BaseModel):
    """Jugador alienígena (expansión del juego).

    Misma forma que `User`, pero es otro tipo de registro: el fetcher genérico
    los trata como argumentos de tipo distintos.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str | None = None
    character: str | None = None
    score: float | None = None


class Token(BaseModel):
    """Credencial de acceso guardada en el store seguro."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str = Field(
        ...,
        min_length=1,
        description="Valor opaco del token.",
    )
    token_type: str = Field(
        default="Bearer",
        min_length=1,
    )
    expires_in: int | None = Field(
        default=None,
        ge=0,
        description="Segundos de validez, si el emisor los informa.",
    )


class Post(BaseModel):
    """Publicación de un feed social (flujo request -> parse -> save)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    text: str = Field(default="", max_length=10_000)
