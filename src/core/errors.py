"""Taxonomía de errores del Core.

Por qué un módulo propio:
- Los adaptadores traducen excepciones de librerías (httpx, pydantic) a estos
  tipos, así el Core y la CLI no dependen de detalles de transporte.
- "No encontrado" no es un error: los valores ausentes se devuelven como `None`.
"""

from __future__ import annotations


class SolidD2Error(Exception):
    """Base de todos los errores propios de la aplicación."""


class TransportFailure(SolidD2Error):
    """El colaborador de transporte no respondió o respondió con error."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class DecodeFailure(SolidD2Error):
    """El payload no tiene la forma esperada para el tipo de registro."""

    def __init__(self, message: str, *, record_type: str | None = None) -> None:
        super().__init__(message)
        self.record_type = record_type
