"""Backends clave-valor para las caches.

- `MemoryValueStore`: vive solo en el proceso; hace de store "seguro"
  (no escribe nada a disco).
- `JsonFileValueStore`: store simple persistente en un JSON UTF-8; los bytes se
  guardan en base64 para que el fichero siga siendo texto.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from pathlib import Path

from core.errors import DecodeFailure
from core.interfaces.storage import ValueStore

logger = logging.getLogger(__name__)


class MemoryValueStore(ValueStore):
    def __init__(self) -> None:
        self._values: dict[str, bytes] = {}

    def set(self, key: str, value: bytes) -> None:
        self._values[key] = bytes(value)

    def get(self, key: str) -> bytes | None:
        return self._values.get(key)


class JsonFileValueStore(ValueStore):
    """Persistencia simple en `{path}` con formato estable (keys ordenadas)."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeFailure(f"Store file {self._path} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise DecodeFailure(f"Store file {self._path} must contain a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def set(self, key: str, value: bytes) -> None:
        existing = self._read_all()
        existing[key] = base64.b64encode(value).decode("ascii")

        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(existing, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
        logger.debug("Stored %d bytes under %r in %s", len(value), key, self._path)

    def get(self, key: str) -> bytes | None:
        raw = self._read_all().get(key)
        if raw is None:
            return None
        try:
            return base64.b64decode(raw, validate=True)
        except binascii.Error as exc:
            raise DecodeFailure(f"Value for {key!r} in {self._path} is not base64") from exc
