"""Idiomas de los mensajes de cara al usuario.

Vive en el dominio para que el catálogo de errores, la config y la CLI
compartan una única definición sin imports circulares.
"""

from __future__ import annotations

from enum import Enum

# Alias habituales que la gente escribe en un .env o en un prompt.
_TAG_ALIASES = {
    "en-us": "en",
    "en-gb": "en",
    "zh-hant": "zh-TW",
    "zh-tw": "zh-TW",
}


class Language(str, Enum):
    """Idioma de los mensajes; el valor es la etiqueta BCP 47."""

    ENGLISH = "en"
    TRADITIONAL_CHINESE = "zh-TW"

    @classmethod
    def default(cls) -> "Language":
        return cls.ENGLISH

    @classmethod
    def from_tag(cls, tag: str) -> "Language":
        """Interpreta `en`, `zh-TW`, `zh_tw`, `zh-Hant`... sin importar mayúsculas.

        Lanza `ValueError` si la etiqueta no corresponde a ningún idioma.
        """

        normalized = tag.strip().replace("_", "-").lower()
        return cls(_TAG_ALIASES.get(normalized, normalized))

    def label(self) -> str:
        return "Traditional Chinese" if self is Language.TRADITIONAL_CHINESE else "English"
