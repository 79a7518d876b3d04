"""Lanzador de la CLI desde dentro de `src/`.

Uso: `python main.py shapes` con `src/` como directorio actual. Instalado el
paquete, el mismo `run()` queda expuesto como el script `solid-d2`.
"""

from __future__ import annotations

import sys

from cli.main import run


def main() -> None:
    # Las tablas Rich usan caracteres de caja que cp1252 no codifica.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    run()


if __name__ == "__main__":
    main()
