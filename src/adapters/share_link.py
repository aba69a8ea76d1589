"""Enlaces compartibles con el contenido en el fragmento (`#<token>`).

El fragmento nunca se envía al servidor, así que el texto viaja solo en
la URL que el usuario comparte.
"""

from __future__ import annotations

from urllib.parse import urldefrag

from adapters.text_codec import encode_data, try_decode
from core.domain.models import DecodeResult


def build_share_url(base_url: str, text: str) -> str | None:
    """Devuelve `base_url#<token>` o `None` si no se pudo codificar.

    Un fragmento previo en `base_url` se reemplaza.
    """

    token = encode_data(text)
    if not token and text != "":
        return None
    base, _fragment = urldefrag(base_url)
    return f"{base}#{token}"


def read_share_url(url: str) -> DecodeResult:
    """Decodifica el fragmento de `url`; sin `#` es un fallo.

    `base#` (fragmento vacío) es el enlace de un texto vacío.
    """

    url = url.strip()
    if "#" not in url:
        return DecodeResult(ok=False)
    _base, fragment = urldefrag(url)
    return try_decode(fragment)
