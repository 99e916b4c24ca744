"""Errores del cliente.

Dos familias separadas a propósito:
- `InvalidArgumentError`: entrada inválida detectada antes de cualquier I/O.
- `TransportError`: fallo de la capa HTTP (conexión, status no-2xx). Es un
  alias de `httpx.HTTPError`; la librería nunca lo captura, envuelve ni reintenta.
"""

from __future__ import annotations

import httpx


class ForgeError(Exception):
    """Base de los errores propios del cliente."""


class InvalidArgumentError(ForgeError, ValueError):
    """Argumento rechazado por validación local (región, tamaño, PHP, campos requeridos)."""


TransportError = httpx.HTTPError

__all__ = ["ForgeError", "InvalidArgumentError", "TransportError"]
