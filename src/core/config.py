"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/caches/feed) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_DIR_NAME = "solid-d2"


def get_user_config_dir() -> Path:
    """Directorio por usuario donde viven el `.env` global y el store simple.

    `XDG_CONFIG_HOME` solo se respeta fuera de Windows y macOS.
    """

    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home()))) / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config") / APP_DIR_NAME


def get_user_env_file() -> Path:
    """`.env` global: se lee después del `.env` del proyecto."""

    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_D2_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.example.com",
        min_length=1,
        description="Base URL del catálogo de productos y de los fetchers.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="solid-d2/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones HTTP.",
    )
    default_user_id: str = Field(
        default="user-id",
        min_length=1,
        description="Usuario usado por la pantalla de productos si no se indica otro.",
    )
    feed_url: str = Field(
        default="https://api.example.com/feed",
        min_length=1,
        description="Endpoint del feed que sincroniza el flujo request -> parse -> save.",
    )
    defaults_path: Path | None = Field(
        default=None,
        description="Ruta del store simple (JSON). Por defecto, en el directorio de usuario.",
    )
    decode_failure_as_empty: bool = Field(
        default=False,
        description=(
            "Política heredada: tratar un payload indecodificable como lista vacía "
            "en lugar de DecodeFailure."
        ),
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING...).",
    )

    def resolved_defaults_path(self) -> Path:
        return self.defaults_path or get_user_config_dir() / "defaults.json"
