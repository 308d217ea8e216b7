"""Contrato del Fetcher.

Por qué Protocol:
- El scaffolder solo necesita "algo que escriba el input en un stream".
- Permite sustituir el adaptador HTTP por un stub en tests sin herencia.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from pydantic import SecretBytes

from core.domain.models import Coordinate


@runtime_checkable
class InputFetcher(Protocol):
    """Contrato mínimo para descargar el input de un puzzle.

    Reglas de diseño:
    - `fetch` es síncrono: una sola petición, sin concurrencia.
    - Escribe el cuerpo tal cual en `out` y devuelve los bytes escritos.
    - Los errores de transporte se propagan; los status HTTP no se inspeccionan.
    """

    def fetch(self, coordinate: Coordinate, credential: SecretBytes, out: BinaryIO) -> int:
        """Descarga el input de `coordinate` y lo vuelca en `out`."""

        ...
