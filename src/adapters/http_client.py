"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects en un único sitio.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con los defaults de curl.

    Por qué estos defaults:
    - Sin timeout salvo que se configure (curl espera indefinidamente).
    - Sin seguir redirects: la respuesta que llega es la que se vuelca.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {}
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )
