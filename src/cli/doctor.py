"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import ForgeApi
from core.config import AppSettings, write_user_env_vars
from core.errors import TransportError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_api(settings: AppSettings) -> tuple[bool, str]:
    """Authenticated `GET servers` against the configured base URL."""

    try:
        with ForgeApi(settings=settings) as api:
            response = api.request("GET", "servers")
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPStatusError as exc:
        return False, f"HTTP {exc.response.status_code}"
    except TransportError as exc:
        return False, str(exc) or exc.__class__.__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="forge-client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    has_token = bool(settings.api_token)
    table.add_row("API token", "OK" if has_token else "MISSING", "set" if has_token else "run `forge doctor setup-token`")
    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    if has_token:
        ok_api, detail_api = _check_api(settings)
        table.add_row("API access", "OK" if ok_api else "FAIL", detail_api)
    else:
        table.add_row("API access", "SKIPPED", "no token")

    _console.print(table)


@app.command(name="setup-token")
def setup_token() -> None:
    """Interactive token setup (stores config in the user config .env)."""

    token = typer.prompt("API token", hide_input=True, confirmation_prompt=False).strip()
    base_url = typer.prompt("API base URL", default=AppSettings().base_url, show_default=True).strip()

    if not token:
        raise typer.BadParameter("token is required")

    env_path = write_user_env_vars(
        {
            "FORGE_API_TOKEN": token,
            "FORGE_BASE_URL": base_url,
        }
    )

    _console.print(f"[green]Saved API config to:[/green] {env_path}")
