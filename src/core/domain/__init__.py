"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni sistema de ficheros: solo conceptos del problema.
"""

from core.domain.models import (
    Coordinate,
    ScaffoldRequest,
    ScaffoldResult,
    read_credential,
)

__all__ = [
    "Coordinate",
    "ScaffoldRequest",
    "ScaffoldResult",
    "read_credential",
]
