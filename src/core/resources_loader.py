"""Localización de la plantilla de crate.

Este módulo vive en `core/` porque:
- centraliza *qué* plantilla se usa sin acoplarse a la CLI
- desacopla el scaffolding de la ubicación del ejecutable: la plantilla es
  un recurso del paquete o una ruta configurada, nunca `dirname($0)`.
"""

from __future__ import annotations

from pathlib import Path

from core.config import AppSettings

TEMPLATE_DIRNAME = "day_crate_template"


def bundled_template_dir() -> Path:
    # core/resources_loader.py -> core/templates/day_crate_template
    return Path(__file__).resolve().parent / "templates" / TEMPLATE_DIRNAME


def get_template_dir(settings: AppSettings | None = None) -> Path:
    """Plantilla a copiar.

    Orden:
    1) `AOC_TOOLS_TEMPLATE_DIR` / `settings.template_dir` si está definido.
    2) La plantilla incluida en el paquete.
    """

    settings = settings or AppSettings()
    if settings.template_dir is not None:
        return settings.template_dir.expanduser()
    return bundled_template_dir()
