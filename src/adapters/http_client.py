"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts, headers de autenticación y logging.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Sin reintentos: cada llamada es una única petición y los errores de
transporte (`httpx.HTTPError`) se propagan tal cual.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.log import get_logger

logger = get_logger("http_client")


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` apuntando a la API.

    Por qué un builder:
    - Centraliza timeouts/headers para que todos los comandos se comporten igual.
    - `transport` permite sustituir la red en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    if extra_headers:
        headers.update(extra_headers)

    base_url = settings.base_url
    if not base_url.endswith("/"):
        base_url += "/"

    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


class ForgeApi:
    """Transporte síncrono hacia la API (implementa `ForgeTransport`)."""

    def __init__(self, client: httpx.Client | None = None, *, settings: AppSettings | None = None) -> None:
        self._client = client or build_client(settings)

    @property
    def client(self) -> httpx.Client:
        return self._client

    def request(self, method: str, path: str, *, json: Any | None = None) -> httpx.Response:
        method = method.upper()
        logger.debug("%s %s", method, path)

        kwargs: dict[str, Any] = {}
        if json is not None:
            kwargs["json"] = json

        response = self._client.request(method, path.lstrip("/"), **kwargs)
        logger.debug("%s %s -> HTTP %s", method, path, response.status_code)
        response.raise_for_status()
        return response

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ForgeApi:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
