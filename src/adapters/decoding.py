"""Decodificación JSON -> lista de registros.

Un único sitio para la política de decodificación:
- body vacío => no hay datos => lista vacía.
- payload que no encaja con el tipo => `DecodeFailure`.
- `lenient=True` recupera la política antigua (fallo => lista vacía), dejando
  un warning en el log para que no pase desapercibido.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from core.errors import DecodeFailure

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


@lru_cache(maxsize=None)
def _list_adapter(record_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(list[record_type])


def decode_records(data: bytes, record_type: type[RecordT], *, lenient: bool = False) -> list[RecordT]:
    if not data.strip():
        return []

    try:
        return _list_adapter(record_type).validate_json(data)
    except ValidationError as exc:
        if lenient:
            logger.warning(
                "Ignoring undecodable %s payload (%d errors)",
                record_type.__name__,
                exc.error_count(),
            )
            return []
        raise DecodeFailure(
            f"Payload is not a list of {record_type.__name__}: {exc.error_count()} errors",
            record_type=record_type.__name__,
        ) from exc
