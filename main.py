"""Arranque local de la CLI `beblocky` desde un checkout.

Uso: `python main.py get teacher --email a@b.com`.

Añade `src/` al path para importar `cli`, `core` y `adapters` sin instalar
el paquete; instalado, basta con el script `beblocky`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
