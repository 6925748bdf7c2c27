"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar los adaptadores.
- El modo de build (debug/release) vive en un único sitio auditable: decide si
  `MapError` expone el payload y si el operador de debug imprime algo.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central del mapper.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars).
    - Un único contrato de configuración para mapper/adapters/logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="MODEL_MAPPER_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # `__debug__` es False con `python -O`: el equivalente a un build de release.
    debug: bool = Field(
        default=__debug__,
        description="Modo debug: payload en MapError y salida de debug_json.",
    )
    decode_workers: int = Field(
        default=1,
        ge=1,
        le=64,
        description="Hilos del executor de fondo donde se decodifica (1 = cola serie).",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR).",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Formato de logs: consola legible o JSON.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="httpx-model-mapper/0.1",
        min_length=1,
        description="User-Agent para el cliente HTTP.",
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Settings leídos una sola vez (al inicializar), como un flag de build."""

    return AppSettings()


def reset_settings_cache() -> None:
    """Olvida los settings cacheados (útil en tests con `monkeypatch.setenv`)."""

    get_settings.cache_clear()
