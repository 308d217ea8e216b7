"""Operaciones de sistema de ficheros sobre la plantilla de crate.

Por qué aquí y no en el Core:
- Copiar árboles y reescribir ficheros es I/O puro; el servicio de
  scaffolding solo orquesta el orden de los pasos.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "Cargo.toml"
TEMPLATE_NAME_LINE = 'name = "aoc_day_template"'


def copy_template(template_dir: Path, output_path: Path) -> Path:
    """Copia recursivamente la plantilla a `output_path` (que no debe existir)."""

    if not template_dir.is_dir():
        raise FileNotFoundError(f"Template directory not found: {template_dir}")
    # Como `cp -r`: el directorio padre debe existir.
    if not output_path.parent.is_dir():
        raise FileNotFoundError(f"Parent directory not found: {output_path.parent}")
    logger.info("copying template %s -> %s", template_dir, output_path)
    shutil.copytree(template_dir, output_path)
    return output_path


def rewrite_manifest_name(manifest_path: Path, new_name: str) -> int:
    """Reescribe la línea `name = "aoc_day_template"` del manifest.

    Solo cuenta una coincidencia de línea completa; el resto del fichero,
    finales de línea incluidos, queda intacto. Devuelve cuántas líneas cambiaron.
    """

    raw = manifest_path.read_bytes().decode("utf-8")
    replacement = f'name = "{new_name}"'

    rewritten = 0
    lines: list[str] = []
    for line in raw.splitlines(keepends=True):
        body = line.rstrip("\r\n")
        ending = line[len(body):]
        if body == TEMPLATE_NAME_LINE:
            lines.append(replacement + ending)
            rewritten += 1
        else:
            lines.append(line)

    if rewritten:
        manifest_path.write_bytes("".join(lines).encode("utf-8"))
    logger.info("rewrote %d name line(s) in %s", rewritten, manifest_path)
    return rewritten
