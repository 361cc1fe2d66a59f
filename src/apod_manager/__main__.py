"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m apod_manager` durante desarrollo.
- Mantiene un entrypoint simple además del script `apod-manager`.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8):
# APOD explanations regularly contain non-ASCII characters.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from apod_manager.cli.main import main

if __name__ == "__main__":
    main()
