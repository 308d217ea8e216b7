"""Adaptadores de I/O.

Por qué un paquete:
- Agrupa los detalles concretos (HTTP con httpx, sistema de ficheros).
- El Core solo depende de `core.interfaces`.
"""
