"""Orquestación de `init_day`.

La CLI delega aquí todo el flujo (comprobación de existencia, copia de la
plantilla, reescritura del manifest, descarga del input), de modo que la
lógica es reutilizable desde tests u otros entry-points y los efectos de
presentación (mensajes, exit codes) se quedan en la capa CLI.

Los pasos son estrictamente secuenciales. No hay rollback: si la descarga
falla, el directorio creado se queda tal cual con un `input` posiblemente
vacío, y el fallo se refleja en `ScaffoldResult`.
"""

from __future__ import annotations

import logging

import httpx

from adapters.crate_template import MANIFEST_FILENAME, copy_template, rewrite_manifest_name
from core.config import AppSettings
from core.domain.models import ScaffoldRequest, ScaffoldResult
from core.interfaces.fetcher import InputFetcher
from core.resources_loader import get_template_dir

logger = logging.getLogger(__name__)

INPUT_FILENAME = "input"


def scaffold_day(
    request: ScaffoldRequest,
    *,
    fetcher: InputFetcher,
    settings: AppSettings | None = None,
) -> ScaffoldResult:
    """Crea el crate del día en `request.output_path`.

    Raises:
        FileExistsError: `output_path` ya existe; no se toca nada.
        FileNotFoundError: la plantilla no existe.
    """

    settings = settings or AppSettings()
    output_path = request.output_path

    # `is_symlink` cubre symlinks rotos.
    if output_path.exists() or output_path.is_symlink():
        raise FileExistsError(f"{output_path} exists already")

    copy_template(get_template_dir(settings), output_path)

    crate_name = request.coordinate.crate_name(legacy=settings.legacy_manifest_name)
    manifest_path = output_path / MANIFEST_FILENAME
    if manifest_path.is_file():
        rewrite_manifest_name(manifest_path, crate_name)
    else:
        logger.warning("template has no %s; name not rewritten", MANIFEST_FILENAME)

    input_path = output_path / INPUT_FILENAME
    fetch_error: str | None = None
    with input_path.open("wb") as out:
        try:
            fetcher.fetch(request.coordinate, request.credential, out)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            fetch_error = str(exc) or exc.__class__.__name__
            logger.error("fetching input failed: %s", fetch_error)

    return ScaffoldResult(
        output_path=output_path,
        manifest_path=manifest_path,
        input_path=input_path,
        crate_name=crate_name,
        fetch_ok=fetch_error is None,
        fetch_error=fetch_error,
    )
