"""Catálogos de comandos sobre recursos de un servidor + su ejecutor.

Por qué descriptores:
- Cada comando es un `ResourceCommand` (verbo, ruta, modelo) declarado una vez.
- `run_command` es el único punto que habla con el transporte.
"""

from adapters.resource_commands import daemons, deployment, servers, sites
from adapters.resource_commands.runner import run_command

__all__ = [
    "daemons",
    "deployment",
    "run_command",
    "servers",
    "sites",
]
