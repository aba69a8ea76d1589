"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from adapters.text_codec import decode_data, encode_data
from core.config import AppSettings, get_user_env_file, read_user_env_vars, write_user_env_vars
from core.domain.language import Language

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_CODEC_SAMPLE = "gistlink doctor ✓ 測試"


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
    except Exception as exc:
        return False, str(exc)

    remaining = response.headers.get("x-ratelimit-remaining")
    detail = f"HTTP {response.status_code}"
    if remaining is not None:
        detail += f", rate limit remaining: {remaining}"
    return response.is_success, detail


def _check_codec() -> tuple[bool, str]:
    """Round-trip a small non-ASCII sample through the codec."""

    token = encode_data(_CODEC_SAMPLE)
    if not token:
        return False, "encoding returned an empty token"
    if decode_data(token) != _CODEC_SAMPLE:
        return False, "round-trip mismatch"
    return True, f"OK ({len(token)} chars)"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="gistlink Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("Share base_url", "OK", settings.share_base_url)
    table.add_row("Language", "OK", settings.language.label())
    timeout = "httpx default" if settings.http_timeout_seconds is None else f"{settings.http_timeout_seconds}s"
    table.add_row("HTTP timeout", "OK", timeout)
    saved = read_user_env_vars()
    table.add_row("User config", "OK" if saved else "NONE", f"{get_user_env_file()} ({len(saved)} keys)")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(f"{settings.api_base_url.rstrip('/')}/rate_limit", settings))
    table.add_row("GitHub API", "OK" if ok_http else "FAIL", detail_http)

    ok_codec, detail_codec = _check_codec()
    table.add_row("Text codec", "OK" if ok_codec else "FAIL", detail_codec)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Gist fetches will report a network or rate-limit error until the API is reachable."
        )


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    defaults = AppSettings()

    language = typer.prompt(
        "Message language (en/zh-TW)",
        default=defaults.language.value,
        show_default=True,
    ).strip()
    try:
        language = Language.from_tag(language).value
    except ValueError:
        raise typer.BadParameter(f"unsupported language: {language}") from None

    share_base_url = typer.prompt("Share base URL", default=defaults.share_base_url, show_default=True).strip()
    if not share_base_url:
        raise typer.BadParameter("share base URL is required")

    env_path = write_user_env_vars(
        {
            "GISTLINK_LANGUAGE": language,
            "GISTLINK_SHARE_BASE_URL": share_base_url,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
