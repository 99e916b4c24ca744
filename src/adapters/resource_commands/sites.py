"""Comandos: sitios (`servers/{serverId}/sites`)."""

from __future__ import annotations

from core.domain.commands import ResourceCommand, ResponseShape, Target
from core.domain.models import Site

_PATH = "sites"

LIST_SITES = ResourceCommand("GET", _PATH, Site, shape=ResponseShape.COLLECTION)
GET_SITE = ResourceCommand("GET", _PATH, Site, target=Target.ITEM, shape=ResponseShape.ITEM)
CREATE_SITE = ResourceCommand("POST", _PATH, Site, shape=ResponseShape.ITEM)
UPDATE_SITE = ResourceCommand("PUT", _PATH, Site, target=Target.ITEM, shape=ResponseShape.ITEM)
DELETE_SITE = ResourceCommand("DELETE", _PATH, Site, target=Target.ITEM)
