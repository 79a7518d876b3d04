"""Caches de identificador de usuario y token de acceso.

Antes (`FatUserCache`, `FatAccessTokenCache`):
- Ambas implementan el contrato gordo `Cache` y rellenan la lectura ajena con
  un stub que devuelve `None`.

Después (`UserIdCache`, `AccessTokenCache`):
- Cada una declara solo su rol. `UserIdCache` no tiene
  `retrieve_access_token` y viceversa.
- Cada una escribe en su propio store bajo una clave fija; no hay
  acoplamiento entre backends.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from core.domain.models import Token
from core.errors import DecodeFailure
from core.interfaces.storage import AccessTokenCacheable, Cache, UserIdCacheable, ValueStore

logger = logging.getLogger(__name__)

USER_ID_KEY = "UserId"
ACCESS_TOKEN_KEY = "AccessToken"


def _decode_user_id(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeFailure("Stored user id is not valid UTF-8", record_type="UserId") from exc


def _decode_token(raw: bytes) -> Token:
    try:
        return Token.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeFailure("Stored access token is not a valid Token", record_type="Token") from exc


class UserIdCache(UserIdCacheable):
    """Identificador de usuario sobre el store simple."""

    def __init__(self, store: ValueStore) -> None:
        self._store = store

    def save(self, value: bytes) -> None:
        self._store.set(USER_ID_KEY, value)

    def retrieve_user_id(self) -> str | None:
        raw = self._store.get(USER_ID_KEY)
        if raw is None:
            return None
        return _decode_user_id(raw)


class AccessTokenCache(AccessTokenCacheable):
    """Token de acceso sobre el store seguro.

    Guarda y lee con la misma clave (`AccessToken`).
    """

    def __init__(self, store: ValueStore) -> None:
        self._store = store

    def save(self, value: bytes) -> None:
        self._store.set(ACCESS_TOKEN_KEY, value)
        logger.debug("Access token saved (%d bytes)", len(value))

    def save_token(self, token: Token) -> None:
        self.save(token.model_dump_json().encode("utf-8"))

    def retrieve_access_token(self) -> Token | None:
        raw = self._store.get(ACCESS_TOKEN_KEY)
        if raw is None:
            return None
        return _decode_token(raw)


class FatUserCache(Cache):
    """Versión antes: obligada a "implementar" la lectura del token."""

    def __init__(self, store: ValueStore) -> None:
        self._store = store

    def retrieve_user_id(self) -> str | None:
        raw = self._store.get(USER_ID_KEY)
        return None if raw is None else _decode_user_id(raw)

    def save(self, value: bytes) -> None:
        self._store.set(USER_ID_KEY, value)

    def retrieve_access_token(self) -> Token | None:
        return None


class FatAccessTokenCache(Cache):
    """Versión antes: obligada a "implementar" la lectura del user id."""

    def __init__(self, store: ValueStore) -> None:
        self._store = store

    def retrieve_access_token(self) -> Token | None:
        raw = self._store.get(ACCESS_TOKEN_KEY)
        return None if raw is None else _decode_token(raw)

    def save(self, value: bytes) -> None:
        self._store.set(ACCESS_TOKEN_KEY, value)

    def retrieve_user_id(self) -> str | None:
        return None
