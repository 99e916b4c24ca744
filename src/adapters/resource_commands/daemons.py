"""Comandos: daemons (`servers/{serverId}/daemons`)."""

from __future__ import annotations

from core.domain.commands import ResourceCommand, ResponseShape, Target
from core.domain.models import Daemon

_PATH = "daemons"

LIST_DAEMONS = ResourceCommand("GET", _PATH, Daemon, shape=ResponseShape.COLLECTION)
GET_DAEMON = ResourceCommand("GET", _PATH, Daemon, target=Target.ITEM, shape=ResponseShape.ITEM)
CREATE_DAEMON = ResourceCommand("POST", _PATH, Daemon, shape=ResponseShape.ITEM)
RESTART_DAEMON = ResourceCommand("POST", _PATH, Daemon, target=Target.ITEM, action="restart")
DELETE_DAEMON = ResourceCommand("DELETE", _PATH, Daemon, target=Target.ITEM)
