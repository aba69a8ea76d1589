"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/codec) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from dotenv import dotenv_values, set_key
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language

APP_DIR_NAME = "gistlink"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_user_config_dir() -> Path:
    """Carpeta de config por usuario: APPDATA, Application Support o XDG."""

    home = Path.home()
    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or home)
    elif sys.platform == "darwin":
        root = home / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or home / ".config")
    return root / APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def read_user_env_vars() -> dict[str, str]:
    """Variables ya guardadas en el .env del usuario (vacío si no existe)."""

    env_path = get_user_env_file()
    if not env_path.is_file():
        return {}
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Actualiza claves del .env del usuario; `None` deja la clave como está.

    python-dotenv reescribe solo las líneas afectadas, así que comentarios y
    claves ajenas a gistlink se conservan.
    """

    env_path = get_user_env_file()
    if not env_path.exists():
        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.write_text("# gistlink user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GISTLINK_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL de la API de GitHub (sin barra final).",
    )
    user_agent: str = Field(
        default="gistlink/0.1",
        min_length=1,
        description="User-Agent para peticiones a la API (GitHub lo exige).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None => default de httpx.",
    )
    share_base_url: str = Field(
        default="https://gistlink.local/",
        min_length=1,
        description="URL base para los enlaces compartidos (`#<token>`).",
    )
    language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma de los mensajes de error (en/zh-TW).",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG/INFO/WARNING/ERROR/CRITICAL).",
    )

    @field_validator("language", mode="before")
    @classmethod
    def _parse_language(cls, value: object) -> object:
        return Language.from_tag(value) if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
