"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars
from core.errors import ConfigurationError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="beblocky-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        base_url = settings.require_api_url()
    except ConfigurationError as exc:
        base_url = None
        table.add_row("API URL", "FAIL", str(exc))
    else:
        table.add_row("API URL", "OK", base_url)

    if settings.session_cookie:
        table.add_row("Session cookie", "OK", f"Forwarded as {settings.session_cookie_name}")
    else:
        table.add_row("Session cookie", "OPTIONAL", "No cookie set -> requests rely on x-user-* headers only")

    table.add_row(
        "Timeout",
        "OK",
        f"{settings.http_timeout_seconds}s" if settings.http_timeout_seconds else "none (single attempt, no timeout)",
    )

    # Any HTTP status means the backend answered.
    if base_url:
        ok_http, detail_http = asyncio.run(_check_http(base_url, settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if base_url is None:
        _console.print("\n[yellow]Note:[/yellow] run `beblocky doctor setup` or export BEBLOCKY_API_URL.")
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()
    base_url = typer.prompt("API base URL", default=settings.api_url or "", show_default=True).strip()
    if not base_url:
        raise typer.BadParameter("API base URL is required")
    cookie = typer.prompt(
        "Session cookie value (empty to skip)",
        default="",
        show_default=False,
        hide_input=True,
    ).strip()

    env_path = write_user_env_vars(
        {
            "BEBLOCKY_API_URL": base_url,
            "BEBLOCKY_SESSION_COOKIE": cookie or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
