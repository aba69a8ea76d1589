"""CLI principal (Typer).

Por qué Typer + Rich:
- Typer da parsing/ayuda a partir de type hints.
- Rich formatea paneles y errores sin ensuciar los adaptadores.

La CLI solo orquesta: toda la lógica vive en `adapters/` y `core/`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from adapters.gist_resolver import GistResolver
from adapters.json_exporter import export_fetch_result_json
from adapters.share_link import build_share_url, read_share_url
from adapters.text_codec import encode_data, try_decode
from cli import doctor
from cli.ui_components import build_success_panel, print_banner, print_failure
from core.config import AppSettings
from core.domain.models import GistFetchFailure, GistFetchResult
from core.interfaces.gist_source import GistSource

app = typer.Typer(
    no_args_is_help=True,
    help="Read public GitHub Gists and pack text into URL-safe tokens.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(settings: AppSettings) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s | %(levelname)s | %(message)s",
        )


def _resolve(source: GistSource, reference: str, filename: str | None) -> GistFetchResult:
    return asyncio.run(source.resolve(reference, filename))


def _read_input(text: str | None, input_path: Path | None) -> str:
    if text is not None and input_path is not None:
        raise typer.BadParameter("pass either TEXT or --input, not both")
    if input_path is not None:
        return input_path.read_text(encoding="utf-8")
    if text is not None:
        return text
    return typer.get_text_stream("stdin").read()


@app.callback()
def main() -> None:
    """gistlink: public Gist reader and URL text codec."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(Text.assemble(("Invalid configuration:", "red"), "\n", str(exc)))
        raise typer.Exit(code=2) from None
    _configure_logging(settings)


@app.command()
def fetch(
    reference: str = typer.Argument(..., help="Gist ID or https://gist.github.com/... URL."),
    filename: Optional[str] = typer.Option(None, "--file", "-f", help="Exact filename to read."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    export_json: Optional[Path] = typer.Option(None, "--export-json", help="Also write the result to this path."),
) -> None:
    """Fetch a public Gist and print the selected file."""

    settings = AppSettings()
    result = _resolve(GistResolver(settings), reference, filename)

    if export_json is not None:
        export_fetch_result_json(result=result, output_path=export_json)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))
    elif isinstance(result, GistFetchFailure):
        print_failure(_err_console, result)
    else:
        if _console.is_terminal:
            print_banner(_console)
        _console.print(build_success_panel(result))

    if isinstance(result, GistFetchFailure):
        raise typer.Exit(code=1)


@app.command()
def encode(
    text: Optional[str] = typer.Argument(None, help="Text to encode (stdin when omitted)."),
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", exists=True, dir_okay=False),
) -> None:
    """Compress text into a URL-safe token."""

    value = _read_input(text, input_path)
    token = encode_data(value)
    if not token and value:
        _err_console.print("[red]Error:[/red] encoding failed")
        raise typer.Exit(code=1)
    typer.echo(token)


@app.command()
def decode(token: str = typer.Argument(..., help="Token produced by `encode` (prefix with `--` if it starts with `-`).")) -> None:
    """Decode a token back to the original text."""

    decoded = try_decode(token)
    if not decoded.ok:
        _err_console.print("[red]Error:[/red] not a valid token")
        raise typer.Exit(code=1)
    typer.echo(decoded.text, nl=False)


@app.command()
def share(
    reference: str = typer.Argument(..., help="Gist ID or https://gist.github.com/... URL."),
    filename: Optional[str] = typer.Option(None, "--file", "-f", help="Exact filename to read."),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Base URL for the link."),
) -> None:
    """Fetch a Gist and print a share link carrying its content."""

    settings = AppSettings()
    result = _resolve(GistResolver(settings), reference, filename)
    if isinstance(result, GistFetchFailure):
        print_failure(_err_console, result)
        raise typer.Exit(code=1)

    url = build_share_url(base_url or settings.share_base_url, result.content)
    if url is None:
        _err_console.print("[red]Error:[/red] encoding failed")
        raise typer.Exit(code=1)
    typer.echo(url)


@app.command(name="open")
def open_link(url: str = typer.Argument(..., help="Share link with a #token fragment.")) -> None:
    """Decode the text carried in a share link."""

    decoded = read_share_url(url)
    if not decoded.ok:
        _err_console.print("[red]Error:[/red] the link does not carry a valid token")
        raise typer.Exit(code=1)
    typer.echo(decoded.text, nl=False)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
