"""Contrato de fuentes de Gists.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La CLI depende de esta abstracción; los tests pueden pasar un doble
  sin red en lugar del resolver HTTP.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import GistFetchResult


@runtime_checkable
class GistSource(Protocol):
    """Contrato mínimo para resolver una referencia a contenido.

    Reglas de diseño:
    - `resolve` es asíncrono porque típicamente hará I/O (HTTP).
    - Nunca lanza por fallos esperables: devuelve `GistFetchFailure`.
    """

    async def resolve(self, reference: str, target_filename: str | None = None) -> GistFetchResult:
        """Resuelve un ID o URL de Gist y devuelve el archivo elegido."""

        ...
