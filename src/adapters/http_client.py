"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza headers (User-Agent, Accept de la API de GitHub) y timeouts.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

GITHUB_JSON_ACCEPT = "application/vnd.github.v3+json"


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults de la aplicación.

    Sin `http_timeout_seconds` configurado se respeta el timeout por
    defecto de httpx; no se añade header de autenticación.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": GITHUB_JSON_ACCEPT,
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, object] = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.AsyncClient(
        follow_redirects=True,
        headers=headers,
        **kwargs,
    )
