"""CLI `forge` (Typer + Rich).

Por qué una capa fina:
- Toda la lógica vive en `core.services.forge` y en los builders de proveedor.
- Aquí solo se parsean opciones, se renderiza y se traducen errores a exit codes.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Iterator, List, Optional

import httpx
import typer
from rich.console import Console

from adapters.http_client import ForgeApi
from adapters.server_providers import PROVIDERS, get_provider
from cli import doctor
from cli.ui_components import (
    build_catalog_table,
    build_daemons_table,
    build_server_panel,
    build_servers_table,
    build_sites_table,
    print_error,
)
from core.config import AppSettings
from core.errors import InvalidArgumentError, TransportError
from core.log import configure_logging
from core.services.forge import Forge

app = typer.Typer(no_args_is_help=True, help="Client for the server-provisioning API.")
servers_app = typer.Typer(no_args_is_help=True, help="Create, list and manage servers.")
daemons_app = typer.Typer(no_args_is_help=True, help="Manage server daemons.")
sites_app = typer.Typer(no_args_is_help=True, help="Manage server sites.")
deploy_app = typer.Typer(no_args_is_help=True, help="Site deployments.")
providers_app = typer.Typer(no_args_is_help=True, help="Inspect provider catalogs.")

app.add_typer(servers_app, name="servers")
app.add_typer(daemons_app, name="daemons")
app.add_typer(sites_app, name="sites")
app.add_typer(deploy_app, name="deploy")
app.add_typer(providers_app, name="providers")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def open_api() -> ForgeApi:
    """Transporte configurado desde `AppSettings` (sustituible en tests)."""

    return ForgeApi(settings=AppSettings())


@contextmanager
def _forge() -> Iterator[Forge]:
    """Abre la fachada y traduce errores conocidos a exit code 1."""

    try:
        with open_api() as api:
            yield Forge(api)
    except InvalidArgumentError as exc:
        print_error(_console, str(exc))
        raise typer.Exit(code=1) from exc
    except httpx.HTTPStatusError as exc:
        print_error(_console, f"HTTP {exc.response.status_code} for {exc.request.method} {exc.request.url}")
        raise typer.Exit(code=1) from exc
    except TransportError as exc:
        print_error(_console, str(exc) or exc.__class__.__name__)
        raise typer.Exit(code=1) from exc


def _print_json(data: object) -> None:
    _console.print_json(json.dumps(data))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP traffic (DEBUG)."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


# Servers


@servers_app.command("list")
def servers_list(as_json: bool = typer.Option(False, "--json", help="Print raw JSON.")) -> None:
    """List every server."""

    with _forge() as forge:
        servers = forge.servers()
    if as_json:
        _print_json([s.model_dump(mode="json") for s in servers])
        return
    _console.print(build_servers_table(servers))


@servers_app.command("show")
def servers_show(server_id: int = typer.Argument(..., help="Server ID.")) -> None:
    """Show one server."""

    with _forge() as forge:
        server = forge.server(server_id)
    _console.print(build_server_panel(server))


@servers_app.command("create")
def servers_create(
    provider: str = typer.Option(..., "--provider", "-p", help=f"One of: {', '.join(sorted(PROVIDERS))}."),
    name: str = typer.Option(..., "--name", "-n", help="Server name."),
    region: Optional[str] = typer.Option(None, "--region", "-r"),
    size: Optional[str] = typer.Option(None, "--size", "-s", help="Memory tier, e.g. 1GB."),
    credential: Optional[int] = typer.Option(None, "--credential", "-c", help="Provider credential ID."),
    php: Optional[str] = typer.Option(None, "--php", help="PHP version, e.g. 7.1."),
    database: Optional[str] = typer.Option(None, "--database", help="Initial database name (default: forge)."),
    maria: Optional[bool] = typer.Option(None, "--maria/--mysql", help="Database engine; omitted from the request unless given."),
    node_balancer: bool = typer.Option(False, "--node-balancer", help="Provision as node balancer."),
    recipe: Optional[int] = typer.Option(None, "--recipe", help="Recipe ID to run after provisioning."),
    network: Optional[List[int]] = typer.Option(None, "--network", help="Server IDs to connect to (repeatable)."),
    ip: Optional[str] = typer.Option(None, "--ip", help="Public IP (custom provider)."),
    private_ip: Optional[str] = typer.Option(None, "--private-ip", help="Private IP (custom provider)."),
) -> None:
    """Create a server through the chosen provider."""

    with _forge() as forge:
        builder = get_provider(provider)(forge.api).identified_as(name)
        if region is not None:
            builder.at(region)
        if size is not None:
            builder.with_memory_of(size)
        if credential is not None:
            builder.using_credential(credential)
        if php is not None:
            builder.running_php(php)
        if maria:
            builder.with_maria_db(database or "forge")
        elif maria is not None or database is not None:
            builder.with_mysql(database or "forge")
        if node_balancer:
            builder.as_node_balancer()
        if recipe is not None:
            builder.run_recipe(recipe)
        if network:
            builder.connected_to(network)
        if ip is not None:
            builder.using_public_ip(ip)
        if private_ip is not None:
            builder.using_private_ip(private_ip)

        server = builder.save()

    _console.print(f"[green]Server created:[/green] #{server.id} {server.name}")


@servers_app.command("reboot")
def servers_reboot(server_id: int = typer.Argument(...)) -> None:
    """Reboot a server."""

    with _forge() as forge:
        forge.reboot_server(server_id)
    _console.print(f"[green]Reboot requested for server #{server_id}.[/green]")


@servers_app.command("delete")
def servers_delete(
    server_id: int = typer.Argument(...),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
) -> None:
    """Delete a server."""

    if not yes:
        typer.confirm(f"Delete server #{server_id}?", abort=True)
    with _forge() as forge:
        forge.delete_server(server_id)
    _console.print(f"[green]Server #{server_id} deleted.[/green]")


# Daemons


@daemons_app.command("list")
def daemons_list(server_id: int = typer.Argument(...)) -> None:
    """List daemons of a server."""

    with _forge() as forge:
        daemons = forge.daemons(server_id)
    _console.print(build_daemons_table(daemons))


@daemons_app.command("create")
def daemons_create(
    server_id: int = typer.Argument(...),
    command: str = typer.Argument(..., help="Command to supervise."),
    user: str = typer.Option("forge", "--user", "-u"),
) -> None:
    """Create a daemon."""

    with _forge() as forge:
        daemon = forge.create_daemon(server_id, command, user)
    _console.print(f"[green]Daemon created:[/green] #{daemon.id} {daemon.command}")


@daemons_app.command("restart")
def daemons_restart(server_id: int = typer.Argument(...), daemon_id: int = typer.Argument(...)) -> None:
    """Restart a daemon."""

    with _forge() as forge:
        forge.restart_daemon(server_id, daemon_id)
    _console.print(f"[green]Daemon #{daemon_id} restarted.[/green]")


@daemons_app.command("delete")
def daemons_delete(server_id: int = typer.Argument(...), daemon_id: int = typer.Argument(...)) -> None:
    """Delete a daemon."""

    with _forge() as forge:
        forge.delete_daemon(server_id, daemon_id)
    _console.print(f"[green]Daemon #{daemon_id} deleted.[/green]")


# Sites


@sites_app.command("list")
def sites_list(server_id: int = typer.Argument(...)) -> None:
    """List sites of a server."""

    with _forge() as forge:
        sites = forge.sites(server_id)
    _console.print(build_sites_table(sites))


@sites_app.command("create")
def sites_create(
    server_id: int = typer.Argument(...),
    domain: str = typer.Argument(...),
    project_type: str = typer.Option("php", "--project-type"),
    directory: str = typer.Option("/public", "--directory"),
) -> None:
    """Create a site."""

    with _forge() as forge:
        site = forge.create_site(server_id, domain, project_type=project_type, directory=directory)
    _console.print(f"[green]Site created:[/green] #{site.id} {site.name}")


@sites_app.command("delete")
def sites_delete(server_id: int = typer.Argument(...), site_id: int = typer.Argument(...)) -> None:
    """Delete a site."""

    with _forge() as forge:
        forge.delete_site(server_id, site_id)
    _console.print(f"[green]Site #{site_id} deleted.[/green]")


# Deployment


@deploy_app.command("run")
def deploy_run(server_id: int = typer.Argument(...), site_id: int = typer.Argument(...)) -> None:
    """Trigger a deployment."""

    with _forge() as forge:
        site = forge.deploy_site(server_id, site_id)
    _console.print(f"[green]Deployment started:[/green] {site.name} ({site.deployment_status or 'queued'})")


@deploy_app.command("log")
def deploy_log(server_id: int = typer.Argument(...), site_id: int = typer.Argument(...)) -> None:
    """Print the latest deployment log."""

    with _forge() as forge:
        log = forge.deployment_log(server_id, site_id)
    _console.print(log, markup=False, highlight=False)


@deploy_app.command("script")
def deploy_script(server_id: int = typer.Argument(...), site_id: int = typer.Argument(...)) -> None:
    """Print the deployment script."""

    with _forge() as forge:
        script = forge.deployment_script(server_id, site_id)
    _console.print(script, markup=False, highlight=False)


@deploy_app.command("enable")
def deploy_enable(server_id: int = typer.Argument(...), site_id: int = typer.Argument(...)) -> None:
    """Enable quick deploy."""

    with _forge() as forge:
        forge.enable_quick_deploy(server_id, site_id)
    _console.print("[green]Quick deploy enabled.[/green]")


@deploy_app.command("disable")
def deploy_disable(server_id: int = typer.Argument(...), site_id: int = typer.Argument(...)) -> None:
    """Disable quick deploy."""

    with _forge() as forge:
        forge.disable_quick_deploy(server_id, site_id)
    _console.print("[green]Quick deploy disabled.[/green]")


# Providers


@providers_app.command("list")
def providers_list() -> None:
    """List supported providers."""

    for name in sorted(PROVIDERS):
        _console.print(name)


@providers_app.command("show")
def providers_show(name: str = typer.Argument(..., help="Provider name, e.g. ocean2.")) -> None:
    """Show regions, sizes and PHP versions of a provider."""

    try:
        provider = get_provider(name)
    except InvalidArgumentError as exc:
        print_error(_console, str(exc))
        raise typer.Exit(code=1) from exc

    _console.print(build_catalog_table(f"{provider.name} regions", provider.REGIONS, key_label="Region"))
    _console.print(build_catalog_table(f"{provider.name} sizes", provider.SIZES, key_label="Size"))
    _console.print("PHP: " + ", ".join(f"php{v}" for v in provider.PHP_VERSIONS))


def run() -> None:
    app()
