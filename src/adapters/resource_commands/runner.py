"""Ejecutor genérico de `ResourceCommand`.

Una invocación = una petición HTTP. Sin reintentos ni backoff: cualquier
error de transporte se propaga al llamador sin modificar.
"""

from __future__ import annotations

from typing import Any

from core.domain.commands import ResourceCommand, ResponseShape
from core.interfaces.api import ForgeTransport
from core.log import get_logger

logger = get_logger("resource_commands")


def run_command(
    api: ForgeTransport,
    command: ResourceCommand,
    server_id: int | str,
    *,
    item_id: int | str | None = None,
    site_id: int | str | None = None,
    payload: dict[str, Any] | None = None,
) -> Any:
    """Ejecuta `command` contra `servers/{server_id}/...`.

    Devuelve, según `command.shape`:
    - ITEM: instancia del modelo.
    - COLLECTION: lista del modelo, en el orden de la respuesta.
    - TEXT: cuerpo de la respuesta como texto.
    - EMPTY: `None`.
    """

    # Resolver la ruta primero: los IDs faltantes fallan antes de cualquier I/O.
    path = command.path(server_id, item_id=item_id, site_id=site_id)
    logger.debug("Running %s %s", command.method, path)

    response = api.request(command.method, path, json=payload)

    if command.shape is ResponseShape.ITEM:
        return command.model.from_payload(response.json(), api)  # type: ignore[union-attr]
    if command.shape is ResponseShape.COLLECTION:
        return command.model.collection_from_payload(response.json(), api)  # type: ignore[union-attr]
    if command.shape is ResponseShape.TEXT:
        return response.text
    return None
