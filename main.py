"""Atajo de desarrollo: `python main.py servers list`.

Sin instalación editable el layout `src/` no está en `sys.path`; este
script lo añade y delega en la CLI `forge`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    # Consolas Windows en cp1252 rompen las tablas de Rich.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
