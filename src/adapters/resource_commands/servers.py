"""Operaciones sobre servidores (`servers`, `servers/{serverId}`).

No son sub-recursos, así que no pasan por `ResourceCommand`: la ruta es fija.
"""

from __future__ import annotations

from core.domain.models import Server
from core.interfaces.api import ForgeTransport


def list_servers(api: ForgeTransport) -> list[Server]:
    response = api.request("GET", "servers")
    return Server.collection_from_payload(response.json(), api)


def get_server(api: ForgeTransport, server_id: int | str) -> Server:
    response = api.request("GET", f"servers/{server_id}")
    return Server.from_payload(response.json(), api)


def reboot_server(api: ForgeTransport, server_id: int | str) -> None:
    api.request("POST", f"servers/{server_id}/reboot")


def delete_server(api: ForgeTransport, server_id: int | str) -> None:
    api.request("DELETE", f"servers/{server_id}")
