"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El transporte y el cliente de consola leen timeouts, URL y sesión de forma
  consistente.

Orden de carga: variables de entorno `HAC_CONSOLE_*`, `.env` del proyecto y
`.env` del directorio de configuración del usuario.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import RemoteConnection

APP_DIR_NAME = "hac-console"
ENV_PREFIX = "HAC_CONSOLE_"


def user_env_file() -> Path:
    """`.env` del usuario: APPDATA en Windows, Application Support en macOS, XDG en el resto."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / APP_DIR_NAME / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Actualiza claves en el `.env` del usuario con python-dotenv.

    Valores `None` se omiten; el resto de líneas del archivo se conserva.
    """

    env_path = env_path or user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)

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
        env_prefix=ENV_PREFIX,
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(user_env_file())),
        env_file_encoding="utf-8",
    )

    host: str = Field(
        default="localhost",
        min_length=1,
        description="Host o IP de la consola.",
    )
    port: str | None = Field(
        default="9002",
        description="Puerto de la consola; vacío para el puerto por defecto del esquema.",
    )
    webroot: str = Field(
        default="",
        description="Contexto web de la consola (p.ej. 'hac'); vacío si está en la raíz.",
    )
    ssl: bool = Field(default=True, description="Usar https.")
    verify_ssl: bool = Field(
        default=False,
        description="Verificar el certificado TLS (los entornos locales suelen usar autofirmados).",
    )

    session_id: str | None = Field(
        default=None,
        description="Cookie JSESSIONID de una sesión ya autenticada.",
    )
    csrf_token: str | None = Field(
        default=None,
        description="Token CSRF asociado a la sesión (cabecera X-CSRF-TOKEN).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout para llamadas rápidas (validación ImpEx, import).",
    )
    execution_timeout_seconds: float = Field(
        default=600.0,
        gt=0,
        description="Timeout de lectura para consultas y scripts que esperan la ejecución completa.",
    )
    user_agent: str = Field(
        default="hac-console/0.1",
        min_length=1,
    )

    default_max_rows: int = Field(
        default=200,
        ge=1,
        le=100_000,
        description="Máximo de filas por defecto para FlexibleSearch/SQL.",
    )

    def connection(self) -> RemoteConnection:
        return RemoteConnection(
            host=self.host,
            port=self.port,
            webroot=self.webroot,
            ssl=self.ssl,
        )

    @property
    def base_url(self) -> str:
        return self.connection().generated_url
