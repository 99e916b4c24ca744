"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Daemon, Server, Site


def _yes_no(value: bool | None) -> str:
    if value is None:
        return "-"
    return "yes" if value else "no"


def print_error(console: Console, message: str) -> None:
    console.print(Text.assemble(("Error: ", "bold red"), message))


def build_servers_table(servers: Iterable[Server]) -> Table:
    table = Table(title="Servers")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Region", style="magenta")
    table.add_column("Size")
    table.add_column("PHP")
    table.add_column("IP", style="green")
    table.add_column("Ready")
    for server in servers:
        table.add_row(
            str(server.id),
            server.name,
            server.region or "-",
            server.size or "-",
            server.php_version or "-",
            server.ip_address or "-",
            _yes_no(server.is_ready),
        )
    return table


def build_server_panel(server: Server) -> Panel:
    """Panel con el detalle de un servidor."""

    body = Text()
    for label, value in (
        ("ID", server.id),
        ("Region", server.region),
        ("Size", server.size),
        ("PHP", server.php_version),
        ("Public IP", server.ip_address),
        ("Private IP", server.private_ip_address),
        ("Network", ", ".join(str(s) for s in server.network) or None),
        ("Ready", _yes_no(server.is_ready)),
        ("Created", server.created_at),
    ):
        body.append(f"{label}: ", style="bold")
        body.append(f"{value if value is not None else '-'}\n")
    return Panel(body, title=Text(server.name, style="bold cyan"), border_style="cyan")


def build_daemons_table(daemons: Iterable[Daemon]) -> Table:
    table = Table(title="Daemons")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Command", style="white")
    table.add_column("User")
    table.add_column("Status", style="green")
    for daemon in daemons:
        table.add_row(str(daemon.id), daemon.command, daemon.user, daemon.status or "-")
    return table


def build_sites_table(sites: Iterable[Site]) -> Table:
    table = Table(title="Sites")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Domain", style="white")
    table.add_column("Type")
    table.add_column("Directory")
    table.add_column("Status", style="green")
    table.add_column("Quick deploy")
    for site in sites:
        table.add_row(
            str(site.id),
            site.name,
            site.project_type or "-",
            site.directory or "-",
            site.status or "-",
            _yes_no(site.quick_deploy),
        )
    return table


def build_catalog_table(title: str, catalog: Mapping[str, str], *, key_label: str = "Key") -> Table:
    """Tabla de un catálogo de proveedor (regiones o tamaños)."""

    table = Table(title=title)
    table.add_column(key_label, style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in catalog.items():
        table.add_row(key, value)
    return table
