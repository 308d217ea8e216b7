"""Fetcher: input personal de Advent of Code.

Una sola petición GET con la cookie de sesión; el cuerpo se vuelca tal cual.
No se inspecciona el status (una página de error 400 también es "output"),
no hay reintentos y los errores de transporte se propagan.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

import httpx
from pydantic import SecretBytes

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import Coordinate
from core.interfaces.fetcher import InputFetcher

logger = logging.getLogger(__name__)


class AdventOfCodeInputFetcher(InputFetcher):
    """Descarga `<base_url>/<year>/day/<day>/input`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    def fetch(self, coordinate: Coordinate, credential: SecretBytes, out: BinaryIO) -> int:
        url = coordinate.input_url(self._settings.base_url)
        headers = {b"Cookie": b"session=" + credential.get_secret_value()}
        logger.info("GET %s", url)

        if self._client is not None:
            return self._stream(self._client, url, headers, out)
        with build_client(self._settings) as client:
            return self._stream(client, url, headers, out)

    @staticmethod
    def _stream(client: httpx.Client, url: str, headers: dict[bytes, bytes], out: BinaryIO) -> int:
        written = 0
        with client.stream("GET", url, headers=headers) as response:
            if response.is_error:
                # Se vuelca igualmente, como curl sin `-f`.
                logger.warning("HTTP %s from %s", response.status_code, url)
            for chunk in response.iter_bytes():
                out.write(chunk)
                written += len(chunk)
        out.flush()
        logger.info("wrote %d bytes", written)
        return written
