"""Ejecuta la CLI desde un checkout sin instalar: `python main.py fetch <id>`.

Instalado con pip, el script `gistlink` apunta directo a `cli.main:run`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    # Contenido de Gists y textos decodificados suelen traer no-ASCII.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
