"""Exportación JSON del resultado de un fetch.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Permite guardar el contenido obtenido sin depender de la salida de la CLI.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter

from core.domain.models import GistFetchResult

_RESULT_ADAPTER: TypeAdapter[GistFetchResult] = TypeAdapter(GistFetchResult)


def export_fetch_result_json(*, result: GistFetchResult, output_path: Path) -> Path:
    """Exporta el resultado (éxito o fallo) a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _RESULT_ADAPTER.dump_python(result, mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
