"""Resolver de Gists públicos.

Flujo:
- `extract_gist_id` normaliza lo que escribe el usuario (ID o URL).
- `fetch_public_gist` hace un único GET a la API, mapea el status a un
  `GistErrorKind` y elige un archivo.

Notas:
- Sin autenticación: un Gist privado y uno inexistente dan ambos 404.
- Sin reintentos ni caché; el llamador decide si reintenta.
- Los fallos se devuelven como `GistFetchFailure`, nunca se lanzan.
"""

from __future__ import annotations

import asyncio
import logging
from urllib.parse import urlsplit

import httpx

from adapters.http_client import GITHUB_JSON_ACCEPT, build_async_client
from core.config import AppSettings
from core.domain.errors import GistErrorKind, failure_message
from core.domain.language import Language
from core.domain.models import (
    GIST_ID_PATTERN,
    GistFetchFailure,
    GistFetchResult,
    GistFetchSuccess,
    GistFile,
    GistResponse,
)

logger = logging.getLogger(__name__)

GIST_HOST = "gist.github.com"
PREFERRED_EXTENSIONS = (".md", ".txt")

# Status HTTP con significado propio; el resto de no-2xx es HTTP_ERROR.
_STATUS_FAILURES: dict[int, GistErrorKind] = {
    404: GistErrorKind.NOT_FOUND_OR_PRIVATE,
    403: GistErrorKind.RATE_LIMITED,
}


def is_valid_gist_id(gist_id: str) -> bool:
    """True si `gist_id` son exactamente 32 caracteres hex en minúscula."""

    return GIST_ID_PATTERN.fullmatch(gist_id) is not None


def extract_gist_id(value: str) -> str | None:
    """Extrae el ID de un Gist a partir de un ID suelto o una URL.

    Formatos aceptados:
    - `<id>`
    - `https://gist.github.com/<user>/<id>`
    - `https://gist.github.com/<id>`

    Cualquier otra cosa devuelve `None` (no es un error: simplemente no es
    una referencia reconocible).
    """

    trimmed = value.strip()
    if is_valid_gist_id(trimmed):
        return trimmed

    try:
        parts = urlsplit(trimmed)
        hostname = parts.hostname
    except ValueError:
        return None

    if not parts.scheme or not hostname:
        return None
    if hostname != GIST_HOST:
        return None

    segments = [segment for segment in parts.path.split("/") if segment]
    if segments and is_valid_gist_id(segments[-1]):
        return segments[-1]
    return None


def select_file(files: list[GistFile], target_filename: str | None = None) -> GistFile | None:
    """Aplica la política de selección sobre los archivos (en orden de la API).

    - Con `target_filename`: coincidencia exacta o `None`.
    - Sin él: primer `.md`/`.txt`, si no el primer archivo.
    """

    if not files:
        return None
    if target_filename:
        return next((f for f in files if f.filename == target_filename), None)
    preferred = next((f for f in files if f.filename.endswith(PREFERRED_EXTENSIONS)), None)
    return preferred or files[0]


def _failure(kind: GistErrorKind, language: Language, **params: object) -> GistFetchFailure:
    return GistFetchFailure(error_kind=kind, message=failure_message(kind, language, **params))


def _failure_for_status(status_code: int, language: Language) -> GistFetchFailure | None:
    if 200 <= status_code < 300:
        return None
    kind = _STATUS_FAILURES.get(status_code, GistErrorKind.HTTP_ERROR)
    return _failure(kind, language, status_code=status_code)


async def _get(url: str, settings: AppSettings, client: httpx.AsyncClient | None) -> httpx.Response:
    if client is not None:
        return await client.get(url, headers={"Accept": GITHUB_JSON_ACCEPT})
    async with build_async_client(settings) as own_client:
        return await own_client.get(url)


async def fetch_public_gist(
    gist_id: str,
    target_filename: str | None = None,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> GistFetchResult:
    """Descarga un Gist público y devuelve el contenido del archivo elegido.

    Un solo round trip. Si se pasa `client`, no se cierra al terminar.
    """

    settings = settings or AppSettings()
    language = settings.language
    url = f"{settings.api_base_url.rstrip('/')}/gists/{gist_id}"

    try:
        response = await _get(url, settings, client)

        failure = _failure_for_status(response.status_code, language)
        if failure is not None:
            return failure

        # ValidationError (JSON inválido o forma inesperada) es un ValueError.
        gist = GistResponse.model_validate_json(response.content)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        logger.warning("Gist fetch error for %s: %r", gist_id, exc, exc_info=True)
        return _failure(GistErrorKind.NETWORK_ERROR, language)

    files = list(gist.files.values())
    if not files:
        return _failure(GistErrorKind.EMPTY_GIST, language)

    selected = select_file(files, target_filename)
    if selected is None:
        return _failure(GistErrorKind.FILE_NOT_FOUND, language, filename=target_filename)

    return GistFetchSuccess(content=selected.content, filename=selected.filename, gist_id=gist.id)


async def resolve_gist(
    reference: str,
    target_filename: str | None = None,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> GistFetchResult:
    """`extract_gist_id` + `fetch_public_gist`; una referencia inválida no toca la red."""

    settings = settings or AppSettings()
    gist_id = extract_gist_id(reference)
    if gist_id is None:
        return _failure(GistErrorKind.INVALID_REFERENCE, settings.language, reference=reference.strip())
    return await fetch_public_gist(gist_id, target_filename, settings=settings, client=client)


def fetch_public_gist_sync(
    gist_id: str,
    target_filename: str | None = None,
    *,
    settings: AppSettings | None = None,
) -> GistFetchResult:
    """Versión síncrona para llamadores sin event loop (CLI, scripts)."""

    return asyncio.run(fetch_public_gist(gist_id, target_filename, settings=settings))


class GistResolver:
    """Implementa `GistSource` sobre la API pública de GitHub.

    Sin estado más allá de la configuración: se puede compartir entre tareas.
    """

    def __init__(self, settings: AppSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def resolve(self, reference: str, target_filename: str | None = None) -> GistFetchResult:
        return await resolve_gist(reference, target_filename, settings=self._settings, client=self._client)
