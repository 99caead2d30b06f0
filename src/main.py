"""Entrypoint de desarrollo: `python src/main.py ...`.

El script instalado (`hac-console`) apunta directamente a `cli.main:run`.
"""

from __future__ import annotations

import sys

# ImpEx y scripts suelen traer caracteres no ASCII; las consolas cp1252 de
# Windows fallan al imprimirlos.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
