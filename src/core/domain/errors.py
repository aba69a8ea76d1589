"""Taxonomía de fallos al resolver un Gist.

Por qué un enum + catálogo:
- El resultado de `fetch_public_gist` es un valor, no una excepción; el
  `GistErrorKind` permite al llamador decidir sin parsear mensajes.
- Los textos viven en un único catálogo por idioma; el inglés es el
  contrato estable que ven los tests y la CLI por defecto.
"""

from __future__ import annotations

from enum import Enum

from core.domain.language import Language


class GistErrorKind(str, Enum):
    """Motivo por el que no se pudo obtener el contenido de un Gist."""

    NOT_FOUND_OR_PRIVATE = "not_found_or_private"
    RATE_LIMITED = "rate_limited"
    HTTP_ERROR = "http_error"
    EMPTY_GIST = "empty_gist"
    FILE_NOT_FOUND = "file_not_found"
    NETWORK_ERROR = "network_error"
    INVALID_REFERENCE = "invalid_reference"


_MESSAGES: dict[Language, dict[GistErrorKind, str]] = {
    Language.ENGLISH: {
        GistErrorKind.NOT_FOUND_OR_PRIVATE: "Gist does not exist or is private",
        GistErrorKind.RATE_LIMITED: "API rate limit exceeded, retry later",
        GistErrorKind.HTTP_ERROR: "Load failed ({status_code})",
        GistErrorKind.EMPTY_GIST: "Gist has no files",
        GistErrorKind.FILE_NOT_FOUND: "File not found: {filename}",
        GistErrorKind.NETWORK_ERROR: "Network error, check your connection",
        GistErrorKind.INVALID_REFERENCE: "Not a valid Gist ID or URL: {reference}",
    },
    Language.TRADITIONAL_CHINESE: {
        GistErrorKind.NOT_FOUND_OR_PRIVATE: "Gist 不存在或為私人 Gist",
        GistErrorKind.RATE_LIMITED: "API 請求次數超過限制，請稍後再試",
        GistErrorKind.HTTP_ERROR: "載入失敗 ({status_code})",
        GistErrorKind.EMPTY_GIST: "Gist 沒有任何檔案",
        GistErrorKind.FILE_NOT_FOUND: "找不到檔案: {filename}",
        GistErrorKind.NETWORK_ERROR: "網路錯誤，請檢查連線狀態",
        GistErrorKind.INVALID_REFERENCE: "不是有效的 Gist ID 或網址: {reference}",
    },
}


def failure_message(kind: GistErrorKind, language: Language | None = None, **params: object) -> str:
    """Renderiza el mensaje legible para `kind` en el idioma pedido.

    Los placeholders (`status_code`, `filename`, `reference`) se completan
    con `params`; si falta alguno se propaga `KeyError`.
    """

    catalog = _MESSAGES[language or Language.default()]
    return catalog[kind].format(**params)
