"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import GistFetchFailure, GistFetchSuccess


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (JSON/pipes).
    """

    title = Text("gistlink", style="bold cyan")
    subtitle = Text("Public Gists • URL-safe text tokens", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_success_panel(result: GistFetchSuccess) -> Panel:
    """Panel con el archivo elegido; el contenido se muestra tal cual."""

    title = Text(result.filename, style="bold green")
    subtitle = Text(f"gist {result.gist_id}", style="dim")
    return Panel(Text(result.content), title=title, subtitle=subtitle, border_style="green")


def print_failure(console: Console, failure: GistFetchFailure) -> None:
    # El mensaje repite input del usuario (referencia, --file): nunca como markup.
    line = Text.assemble(
        ("Error:", "red"),
        " ",
        failure.message,
        " ",
        (f"({failure.error_kind.value})", "dim"),
    )
    console.print(line)
