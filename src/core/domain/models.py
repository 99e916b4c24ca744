"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Las respuestas de la API llegan envueltas (`{"server": {...}}`,
  `{"servers": [...]}`); cada modelo declara sus claves de sobre.

Nota:
- Los modelos reciben el cuerpo ya decodificado y el contexto de API que los
  creó; no saben nada de respuestas HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from pydantic import BaseModel, Field, PrivateAttr
from pydantic.config import ConfigDict

if TYPE_CHECKING:
    from core.interfaces.api import ForgeTransport

R = TypeVar("R", bound="Resource")


class Resource(BaseModel):
    """Base de todos los recursos devueltos por la API."""

    # Linode/Vultr devuelven regiones y tamaños numéricos.
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    resource_key: ClassVar[str] = ""
    collection_key: ClassVar[str] = ""

    _api: Any = PrivateAttr(default=None)

    id: int = Field(..., description="Identificador del recurso en la API.")

    @property
    def api(self) -> ForgeTransport | None:
        """Contexto de API con el que se creó el recurso."""

        return self._api

    @classmethod
    def from_data(cls: type[R], data: dict[str, Any], api: ForgeTransport | None = None) -> R:
        resource = cls.model_validate(data)
        resource._api = api
        return resource

    @classmethod
    def from_payload(cls: type[R], body: Any, api: ForgeTransport | None = None) -> R:
        """Construye un recurso a partir de un cuerpo JSON decodificado.

        Acepta tanto el objeto envuelto (`{"daemon": {...}}`) como el objeto
        plano.
        """

        if not isinstance(body, dict):
            raise ValueError(f"Expected a JSON object for {cls.__name__}, got {type(body).__name__}.")
        data = body.get(cls.resource_key, body) if cls.resource_key else body
        return cls.from_data(data, api)

    @classmethod
    def collection_from_payload(cls: type[R], body: Any, api: ForgeTransport | None = None) -> list[R]:
        """Construye la lista de recursos respetando el orden de la respuesta."""

        items = body.get(cls.collection_key, []) if isinstance(body, dict) else body
        if not isinstance(items, list):
            raise ValueError(f"Expected a JSON array of {cls.__name__} items.")
        return [cls.from_data(item, api) for item in items]


class Server(Resource):
    """Servidor aprovisionado."""

    resource_key: ClassVar[str] = "server"
    collection_key: ClassVar[str] = "servers"

    name: str = Field(..., min_length=1, description="Nombre del servidor.")
    credential_id: int | None = None
    size: str | None = Field(default=None, description="Tamaño/tier de memoria.")
    region: str | None = None
    php_version: str | None = Field(default=None, description="Versión PHP (p.ej. 'php71').")
    ip_address: str | None = None
    private_ip_address: str | None = None
    network: list[int] = Field(default_factory=list, description="Servidores conectados en red privada.")
    is_ready: bool = False
    revoked: bool = False
    created_at: str | None = None


class Site(Resource):
    """Sitio alojado en un servidor."""

    resource_key: ClassVar[str] = "site"
    collection_key: ClassVar[str] = "sites"

    name: str = Field(..., min_length=1, description="Dominio del sitio.")
    directory: str | None = None
    wildcards: bool = False
    status: str | None = None
    repository: str | None = None
    repository_provider: str | None = None
    repository_branch: str | None = None
    repository_status: str | None = None
    quick_deploy: bool | None = None
    project_type: str | None = None
    deployment_status: str | None = None
    created_at: str | None = None


class Daemon(Resource):
    """Proceso supervisado (daemon) en un servidor."""

    resource_key: ClassVar[str] = "daemon"
    collection_key: ClassVar[str] = "daemons"

    command: str = Field(..., min_length=1, description="Comando ejecutado por el supervisor.")
    user: str = Field(default="forge", description="Usuario del sistema que lo ejecuta.")
    status: str | None = None
    created_at: str | None = None
