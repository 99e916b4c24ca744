"""Comandos: despliegue de un sitio.

Todos viven bajo `servers/{serverId}/sites/{siteId}/deployment`; "enable" y
"disable" activan o desactivan el quick deploy (push-to-deploy).
"""

from __future__ import annotations

from core.domain.commands import ResourceCommand, ResponseShape
from core.domain.models import Site

ENABLE_DEPLOYMENT = ResourceCommand("POST", "deployment", site_scoped=True)
DISABLE_DEPLOYMENT = ResourceCommand("DELETE", "deployment", site_scoped=True)
DEPLOY_SITE = ResourceCommand("POST", "deployment/deploy", Site, shape=ResponseShape.ITEM, site_scoped=True)
RESET_DEPLOYMENT_STATE = ResourceCommand("POST", "deployment/reset", site_scoped=True)
GET_DEPLOYMENT_SCRIPT = ResourceCommand("GET", "deployment/script", shape=ResponseShape.TEXT, site_scoped=True)
UPDATE_DEPLOYMENT_SCRIPT = ResourceCommand("PUT", "deployment/script", site_scoped=True)
GET_DEPLOYMENT_LOG = ResourceCommand("GET", "deployment/log", shape=ResponseShape.TEXT, site_scoped=True)
