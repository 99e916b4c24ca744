"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/API) lean config de forma consistente.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """`$XDG_CONFIG_HOME/forge-client`, o `~/.config/forge-client` si no está definido."""

    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "forge-client"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """`KEY=value` por línea; ignora comentarios, líneas sin `=` y comillas externas."""

    data: dict[str, str] = {}
    for line in map(str.strip, text.splitlines()):
        key, sep, value = line.partition("=")
        key = key.strip()
        if line.startswith("#") or not sep or not key:
            continue
        data[key] = value.strip().strip("\"'")
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Fusiona `values` en el .env global del usuario y devuelve su ruta.

    Las claves existentes se conservan; las nuevas pisan a las anteriores y los
    valores `None` se descartan. El archivo queda ordenado por clave.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    merged = _parse_env_lines(env_path.read_text(encoding="utf-8")) if env_path.exists() else {}
    merged.update({key: value for key, value in values.items() if value is not None})

    body = "".join(f"{key}={merged[key]}\n" for key in sorted(merged))
    env_path.write_text("# forge-client user config (.env)\n" + body, encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="FORGE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_token: str | None = Field(
        default=None,
        description="Token personal de la API (Bearer).",
    )
    base_url: str = Field(
        default="https://forge.laravel.com/api/v1/",
        min_length=8,
        description="URL base de la API; las rutas de recursos son relativas a ella.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="forge-client/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING...).",
    )
