"""Contrato del transporte HTTP hacia la API.

Por qué Protocol:
- Los builders de servidores y el ejecutor de comandos solo necesitan
  `request(method, path, json=...)`; en tests basta con cualquier objeto que
  cumpla el contrato.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class ForgeTransport(Protocol):
    """Contrato mínimo del transporte.

    Reglas de diseño:
    - Síncrono: una operación lógica = una petición HTTP.
    - Las rutas son relativas a la URL base (p.ej. `servers/1/daemons`).
    - Los fallos (conexión, status no-2xx) se propagan como `httpx.HTTPError`.
    """

    def request(self, method: str, path: str, *, json: Any | None = None) -> httpx.Response:
        """Ejecuta la petición y devuelve la respuesta ya validada (2xx)."""

        ...
