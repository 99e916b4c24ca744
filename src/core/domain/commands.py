"""Descriptores de comandos sobre sub-recursos de un servidor.

Idea:
- En vez de una clase por comando, cada operación es un descriptor inmutable
  (verbo, segmento de ruta, modelo, forma de la respuesta) que un único
  ejecutor interpreta (`adapters.resource_commands.runner`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.domain.models import Resource
from core.errors import InvalidArgumentError


class Target(str, Enum):
    """A qué apunta el comando dentro del sub-recurso."""

    COLLECTION = "collection"
    ITEM = "item"


class ResponseShape(str, Enum):
    """Cómo se interpreta el cuerpo de la respuesta."""

    ITEM = "item"
    COLLECTION = "collection"
    TEXT = "text"
    EMPTY = "empty"


@dataclass(frozen=True)
class ResourceCommand:
    """Una operación CRUD sobre un sub-recurso de `servers/{serverId}`."""

    method: str
    resource_path: str
    model: type[Resource] | None = None
    target: Target = Target.COLLECTION
    shape: ResponseShape = ResponseShape.EMPTY
    site_scoped: bool = False
    action: str | None = None

    def __post_init__(self) -> None:
        if self.shape in (ResponseShape.ITEM, ResponseShape.COLLECTION) and self.model is None:
            raise ValueError(f"{self.method} {self.resource_path}: a model is required for {self.shape.value} responses.")

    def collection_path(self, server_id: int | str, *, site_id: int | str | None = None) -> str:
        parts = ["servers", str(server_id)]
        if self.site_scoped:
            if site_id is None:
                raise InvalidArgumentError(f"Site ID is required for '{self.resource_path}' commands.")
            parts += ["sites", str(site_id)]
        parts.append(self.resource_path)
        return "/".join(parts)

    def path(
        self,
        server_id: int | str,
        *,
        item_id: int | str | None = None,
        site_id: int | str | None = None,
    ) -> str:
        """Ruta relativa final del comando.

        - Colección: `servers/{serverId}/{resourcePath}`.
        - Ítem: se añade `/{itemId}`.
        - Anidado en sitio: `servers/{serverId}/sites/{siteId}/{resourcePath}`.
        - La acción (p.ej. `restart`) va siempre al final.
        """

        path = self.collection_path(server_id, site_id=site_id)
        if self.target is Target.ITEM:
            if item_id is None:
                raise InvalidArgumentError(f"Item ID is required for {self.method} '{self.resource_path}' command.")
            path = f"{path}/{item_id}"
        if self.action:
            path = f"{path}/{self.action}"
        return path
