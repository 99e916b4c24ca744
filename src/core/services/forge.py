"""Fachada de alto nivel sobre la API.

Por qué una fachada:
- Agrupa los puntos de entrada habituales (builders de creación, listado de
  servidores, helpers de daemons/sitios/despliegues).
- La CLI y los scripts no necesitan conocer descriptores de comandos ni rutas.
"""

from __future__ import annotations

from typing import Any

from adapters.resource_commands import daemons, deployment, run_command, servers, sites
from adapters.server_providers import (
    AwsProvider,
    CustomProvider,
    DigitalOceanProvider,
    LinodeProvider,
    ServerProvider,
    VultrProvider,
    get_provider,
)
from core.domain.models import Daemon, Server, Site
from core.interfaces.api import ForgeTransport


class ServerFactory:
    """Elige el builder de proveedor con el que se crea un servidor nuevo.

    Por qué: cada llamada devuelve un builder nuevo, así un builder a medio
    armar nunca se comparte entre dos creaciones.
    """

    def __init__(self, api: ForgeTransport) -> None:
        self._api = api

    def droplet(self) -> DigitalOceanProvider:
        return DigitalOceanProvider(self._api)

    def linode(self) -> LinodeProvider:
        return LinodeProvider(self._api)

    def vultr(self) -> VultrProvider:
        return VultrProvider(self._api)

    def aws(self) -> AwsProvider:
        return AwsProvider(self._api)

    def custom(self) -> CustomProvider:
        return CustomProvider(self._api)

    def provider(self, name: str) -> ServerProvider:
        return get_provider(name)(self._api)


class Forge:
    """Punto de entrada único ligado a un transporte.

    Por qué:
    - Cada método es una única petición HTTP sobre un comando declarativo.
    - Los errores de transporte (`httpx.HTTPError`) se propagan sin envolver;
      quien llama decide cómo presentarlos.
    """

    def __init__(self, api: ForgeTransport) -> None:
        self.api = api

    def create(self) -> ServerFactory:
        return ServerFactory(self.api)

    # Servers

    def servers(self) -> list[Server]:
        return servers.list_servers(self.api)

    def server(self, server_id: int | str) -> Server:
        return servers.get_server(self.api, server_id)

    def reboot_server(self, server_id: int | str) -> None:
        servers.reboot_server(self.api, server_id)

    def delete_server(self, server_id: int | str) -> None:
        servers.delete_server(self.api, server_id)

    # Daemons

    def daemons(self, server_id: int | str) -> list[Daemon]:
        return run_command(self.api, daemons.LIST_DAEMONS, server_id)

    def daemon(self, server_id: int | str, daemon_id: int | str) -> Daemon:
        return run_command(self.api, daemons.GET_DAEMON, server_id, item_id=daemon_id)

    def create_daemon(self, server_id: int | str, command: str, user: str = "forge") -> Daemon:
        return run_command(
            self.api,
            daemons.CREATE_DAEMON,
            server_id,
            payload={"command": command, "user": user},
        )

    def restart_daemon(self, server_id: int | str, daemon_id: int | str) -> None:
        run_command(self.api, daemons.RESTART_DAEMON, server_id, item_id=daemon_id)

    def delete_daemon(self, server_id: int | str, daemon_id: int | str) -> None:
        run_command(self.api, daemons.DELETE_DAEMON, server_id, item_id=daemon_id)

    # Sites

    def sites(self, server_id: int | str) -> list[Site]:
        return run_command(self.api, sites.LIST_SITES, server_id)

    def site(self, server_id: int | str, site_id: int | str) -> Site:
        return run_command(self.api, sites.GET_SITE, server_id, item_id=site_id)

    def create_site(
        self,
        server_id: int | str,
        domain: str,
        *,
        project_type: str = "php",
        directory: str = "/public",
    ) -> Site:
        return run_command(
            self.api,
            sites.CREATE_SITE,
            server_id,
            payload={"domain": domain, "project_type": project_type, "directory": directory},
        )

    def update_site(self, server_id: int | str, site_id: int | str, **changes: Any) -> Site:
        return run_command(self.api, sites.UPDATE_SITE, server_id, item_id=site_id, payload=changes)

    def delete_site(self, server_id: int | str, site_id: int | str) -> None:
        run_command(self.api, sites.DELETE_SITE, server_id, item_id=site_id)

    # Deployment

    def enable_quick_deploy(self, server_id: int | str, site_id: int | str) -> None:
        run_command(self.api, deployment.ENABLE_DEPLOYMENT, server_id, site_id=site_id)

    def disable_quick_deploy(self, server_id: int | str, site_id: int | str) -> None:
        run_command(self.api, deployment.DISABLE_DEPLOYMENT, server_id, site_id=site_id)

    def deploy_site(self, server_id: int | str, site_id: int | str) -> Site:
        return run_command(self.api, deployment.DEPLOY_SITE, server_id, site_id=site_id)

    def reset_deployment_state(self, server_id: int | str, site_id: int | str) -> None:
        run_command(self.api, deployment.RESET_DEPLOYMENT_STATE, server_id, site_id=site_id)

    def deployment_script(self, server_id: int | str, site_id: int | str) -> str:
        return run_command(self.api, deployment.GET_DEPLOYMENT_SCRIPT, server_id, site_id=site_id)

    def update_deployment_script(self, server_id: int | str, site_id: int | str, content: str) -> None:
        run_command(
            self.api,
            deployment.UPDATE_DEPLOYMENT_SCRIPT,
            server_id,
            site_id=site_id,
            payload={"content": content},
        )

    def deployment_log(self, server_id: int | str, site_id: int | str) -> str:
        return run_command(self.api, deployment.GET_DEPLOYMENT_LOG, server_id, site_id=site_id)
