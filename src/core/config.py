"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/plantillas) lean config de forma consistente.

La cookie de sesión NO es configuración: solo llega por stdin.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "aoc-tools"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "aoc-tools"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "aoc-tools"
    return Path.home() / ".config" / "aoc-tools"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="AOC_TOOLS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="https://adventofcode.com",
        min_length=8,
        description="Base URL de Advent of Code (sin barra final).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout, como curl.",
    )
    user_agent: str | None = Field(
        default=None,
        min_length=1,
        description="User-Agent opcional; si no se define se usa el de httpx.",
    )

    template_dir: Path | None = Field(
        default=None,
        description="Plantilla de crate alternativa. None = plantilla incluida en el paquete.",
    )
    legacy_manifest_name: bool = Field(
        default=False,
        description="Reproduce el nombre histórico `aoc_<day>` (sin año) en Cargo.toml.",
    )

    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    )
    log_file: Path | None = Field(
        default=None,
        description="Fichero de log opcional además de stderr.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings() -> AppSettings:
    """Carga la configuración resolviendo el `.env` de usuario en este momento.

    `model_config.env_file` se evalúa al importar el módulo; aquí se recalcula
    para respetar cambios posteriores de `XDG_CONFIG_HOME`/`APPDATA`.
    """

    return AppSettings(_env_file=(".env", str(get_user_env_file())))
