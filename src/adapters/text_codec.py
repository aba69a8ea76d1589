"""Codec de texto para transportar contenido en una URL.

Formato del token:
- UTF-8 (`surrogatepass`) -> deflate crudo (zlib, wbits=-15, nivel 9) ->
  base64 URL-safe (`A-Z a-z 0-9 - _`) sin padding `=`.
- No lleva versión ni cabecera: quien lo recibe no puede saber qué algoritmo
  lo produjo.

Notas:
- `encode_data`/`decode_data` devuelven `""` tanto para el texto vacío como
  ante un fallo (que se loguea). Para distinguirlos usar `try_decode`.
- Los surrogates sueltos viajan tal cual, así que todo `str` hace round-trip.
- La salida descomprimida se limita a `MAX_DECODED_BYTES`; un token que la
  supera cuenta como inválido.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
import zlib

from core.domain.models import DecodeResult

logger = logging.getLogger(__name__)

MAX_DECODED_BYTES = 16 * 1024 * 1024

_RAW_DEFLATE_WBITS = -15
_COMPRESSION_LEVEL = 9
_TEXT_ERRORS = "surrogatepass"
_TOKEN_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def _compress(text: str) -> str:
    compressor = zlib.compressobj(_COMPRESSION_LEVEL, zlib.DEFLATED, _RAW_DEFLATE_WBITS)
    raw = compressor.compress(text.encode("utf-8", _TEXT_ERRORS)) + compressor.flush()
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def _decompress(token: str, max_bytes: int) -> str:
    if not _TOKEN_ALPHABET.fullmatch(token):
        raise ValueError("token contains characters outside the URL-safe base64 alphabet")

    padded = token + "=" * (-len(token) % 4)
    raw = base64.urlsafe_b64decode(padded)

    decompressor = zlib.decompressobj(_RAW_DEFLATE_WBITS)
    data = decompressor.decompress(raw, max_bytes + 1)
    if len(data) > max_bytes:
        raise ValueError(f"decoded text exceeds {max_bytes} bytes")
    if not decompressor.eof or decompressor.unused_data:
        raise ValueError("truncated or trailing deflate data")
    return data.decode("utf-8", _TEXT_ERRORS)


def encode_data(text: str) -> str:
    """Comprime `text` a un token URL-safe; `""` si falla."""

    if text == "":
        return ""
    try:
        return _compress(text)
    except (UnicodeError, AttributeError, TypeError, zlib.error) as exc:
        logger.error("Encoding failed: %r", exc)
        return ""


def try_decode(encoded: str, *, max_bytes: int = MAX_DECODED_BYTES) -> DecodeResult:
    """Decodifica `encoded` distinguiendo texto vacío de token inválido."""

    try:
        token = encoded.strip()
        if token == "":
            return DecodeResult(ok=True, text="")
        return DecodeResult(ok=True, text=_decompress(token, max_bytes))
    except (ValueError, binascii.Error, AttributeError, zlib.error) as exc:
        # UnicodeDecodeError es un ValueError.
        logger.error("Decoding failed: %r", exc)
        return DecodeResult(ok=False)


def decode_data(encoded: str) -> str:
    """Inversa de `encode_data`; `""` ante un token mal formado."""

    return try_decode(encoded).text
