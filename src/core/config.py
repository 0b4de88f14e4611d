"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import ConfigurationError


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "beblocky-client"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "beblocky-client"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "beblocky-client"
    return Path.home() / ".config" / "beblocky-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# beblocky-client user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central del cliente.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.

    `api_url` es la única variable obligatoria (`BEBLOCKY_API_URL`). No se
    valida aquí: su ausencia se reporta como `ConfigurationError` en el momento
    de construir una URL, antes de cualquier llamada de red.
    """

    model_config = SettingsConfigDict(
        env_prefix="BEBLOCKY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_url: str | None = Field(
        default=None,
        description="Base URL del backend REST (p.ej. https://api.example.com/api).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    user_agent: str = Field(
        default="beblocky-client/0.1",
        min_length=1,
        description="User-Agent para peticiones al backend.",
    )
    session_cookie_name: str = Field(
        default="better-auth.session_token",
        min_length=1,
        description="Nombre de la cookie de sesión reenviada al backend.",
    )
    session_cookie: str | None = Field(
        default=None,
        description="Valor de la cookie de sesión (equivalente a `credentials: include`).",
    )
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging para la CLI.",
    )

    def require_api_url(self) -> str:
        """Devuelve la base URL sin `/` final o lanza `ConfigurationError`."""

        if not self.api_url or not self.api_url.strip():
            raise ConfigurationError("API URL is not configured (set BEBLOCKY_API_URL)")
        return self.api_url.strip().rstrip("/")

    def session_cookies(self) -> dict[str, str]:
        if not self.session_cookie:
            return {}
        return {self.session_cookie_name: self.session_cookie}


def resource_url(settings: AppSettings, path: str) -> str:
    """Concatena base URL + path. Falla rápido si la base no está configurada."""

    base = settings.require_api_url()
    if not path.startswith("/"):
        path = "/" + path
    return f"{base}{path}"
