"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers de todas las peticiones al daemon.
- Facilita testeo: se puede sustituir por un `httpx.Client` con
  `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from particlrpc.core.config import HttpSettings


def build_client(
    settings: HttpSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con los defaults del paquete.

    Por qué un builder:
    - Centraliza timeout/User-Agent para que el cliente ad hoc (uno por
      llamada) y el inyectado por el caller se comporten igual.
    - `transport` permite enchufar un `httpx.MockTransport` en tests.
    """

    settings = settings or HttpSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )
