"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida la respuesta de la API de Gists en el borde, sin que el resolver
  tenga que revisar `isinstance` campo por campo.
- Da un resultado serializable (`model_dump(mode="json")`) para exportar.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Nada de esto se persiste: son valores transitorios de una sola llamada.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.errors import GistErrorKind

GIST_ID_PATTERN = re.compile(r"[a-f0-9]{32}")


class GistFile(BaseModel):
    """Un archivo dentro de un Gist, tal como lo devuelve la API."""

    model_config = ConfigDict(extra="ignore")

    filename: str = Field(
        ...,
        description="Nombre del archivo dentro del Gist.",
    )
    content: str = Field(
        default="",
        description="Contenido de texto (la API lo trunca en archivos grandes).",
    )
    language: str | None = Field(
        default=None,
        description="Lenguaje detectado por GitHub, si lo hay.",
    )
    raw_url: str = Field(
        default="",
        description="URL del contenido crudo.",
    )
    size: int = Field(
        default=0,
        ge=0,
        description="Tamaño en bytes reportado por la API.",
    )


class GistResponse(BaseModel):
    """Representación JSON de `GET /gists/{id}` (solo los campos usados).

    `files` conserva el orden de iteración de la API; la política de
    selección depende de ese orden.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    description: str | None = None
    files: dict[str, GistFile] = Field(default_factory=dict)
    created_at: str | None = None
    updated_at: str | None = None
    html_url: str | None = None


class GistFetchSuccess(BaseModel):
    """Contenido del archivo elegido y el ID canónico devuelto por la API."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    content: str
    filename: str
    gist_id: str


class GistFetchFailure(BaseModel):
    """Fallo tipado; `message` es apto para mostrarse al usuario."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    error_kind: GistErrorKind
    message: str


GistFetchResult = Annotated[
    Union[GistFetchSuccess, GistFetchFailure],
    Field(discriminator="status"),
]


@dataclass(frozen=True)
class DecodeResult:
    """Resultado explícito de decodificar un token.

    Distingue "el texto original era vacío" (`ok=True, text=""`) de
    "el token no se pudo decodificar" (`ok=False`).

    Dataclass y no modelo: `text` puede llevar surrogates sueltos, que la
    validación de str de pydantic rechaza.
    """

    ok: bool
    text: str = ""
