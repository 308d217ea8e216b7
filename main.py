"""Entry point de desarrollo (sin instalar el paquete).

Permite ejecutar las CLIs con:
- `python main.py fetch_input <year> <day>`
- `python main.py init_day <path> <year> <day>`

Motivo:
- El código vive en `src/` (layout tipo "src"), así que si no estás usando
  pip (editable install), Python no encuentra `cli`, `core`, etc.
"""

from __future__ import annotations

import sys
from pathlib import Path

TOOLS = ("fetch_input", "init_day")


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run_fetch_input, run_init_day  # noqa: PLC0415

    if len(sys.argv) < 2 or sys.argv[1] not in TOOLS:
        print(f"Usage: {Path(sys.argv[0]).name} {{{'|'.join(TOOLS)}}} [ARGS]...", file=sys.stderr)
        sys.exit(2)

    tool = sys.argv.pop(1)
    if tool == "fetch_input":
        run_fetch_input()
    else:
        run_init_day()


if __name__ == "__main__":
    main()
