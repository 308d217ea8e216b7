"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar el Core
  a librerías de I/O.
- `SecretBytes` evita que la cookie de sesión aparezca en logs o reprs.

Nota:
- Año y día son strings opacos: solo se interpolan en URLs y nombres.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from pydantic import BaseModel, Field, SecretBytes
from pydantic.config import ConfigDict


class Coordinate(BaseModel):
    """Identifica un puzzle concreto: (año, día)."""

    model_config = ConfigDict(frozen=True)

    year: str = Field(
        ...,
        description="Año del evento, tal cual se recibe en la línea de comandos.",
    )
    day: str = Field(
        ...,
        description="Día del puzzle, tal cual se recibe en la línea de comandos.",
    )

    def input_url(self, base_url: str) -> str:
        """URL del input personal del puzzle."""

        return f"{base_url.rstrip('/')}/{self.year}/day/{self.day}/input"

    def crate_name(self, *, legacy: bool = False) -> str:
        """Nombre del crate generado.

        `legacy=True` reproduce el resultado histórico del script de shell,
        donde `$YEAR_` se expandía como una variable vacía y el año se perdía.
        """

        if legacy:
            return f"aoc_{self.day}"
        return f"aoc_{self.year}_{self.day}"


def read_credential(stream: BinaryIO) -> SecretBytes:
    """Lee la cookie de sesión de un stream binario completo.

    Solo se eliminan los `\\n` finales (semántica de `$(cat -)`); `\\r` y
    cualquier otro byte se conservan tal cual, sin decodificar.
    """

    raw = stream.read()
    return SecretBytes(raw.rstrip(b"\n"))


class ScaffoldRequest(BaseModel):
    """Parámetros de una ejecución de `init_day`."""

    output_path: Path = Field(
        ...,
        description="Directorio a crear; no debe existir.",
    )
    coordinate: Coordinate
    credential: SecretBytes = Field(
        ...,
        description="Cookie de sesión de Advent of Code.",
    )


class ScaffoldResult(BaseModel):
    """Resultado de `init_day`.

    Por qué `fetch_ok`/`fetch_error`:
    - No hay rollback: el directorio queda creado aunque la descarga falle,
      y la CLI necesita distinguir ambos casos para el exit code.
    """

    output_path: Path
    manifest_path: Path
    input_path: Path
    crate_name: str = Field(..., min_length=1)
    fetch_ok: bool = Field(
        default=True,
        description="True si la descarga obtuvo una respuesta HTTP (cualquier status).",
    )
    fetch_error: str | None = Field(
        default=None,
        description="Mensaje del error de transporte, si lo hubo.",
    )
