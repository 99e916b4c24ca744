"""Logging del cliente.

La librería solo obtiene loggers (`forge.*`); la configuración de handlers la
hace quien ejecuta (la CLI) mediante `configure_logging`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "forge"


def get_logger(name: str) -> logging.Logger:
    """Logger hijo de `forge` (p.ej. `forge.http_client`)."""

    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Instala un `RichHandler` en stderr sobre el logger raíz del cliente.

    Idempotente: llamadas repetidas solo ajustan el nivel.
    """

    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
