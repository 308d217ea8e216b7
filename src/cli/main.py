"""CLIs `fetch_input` e `init_day` (Typer).

Por qué dos apps Typer de un solo comando:
- Cada herramienta es un ejecutable independiente con sus propios exit codes.
- La lógica vive en `core/` y `adapters/`; aquí solo hay parsing, mensajes
  y traducción de errores a exit codes.

Exit codes por error de uso (nº de argumentos): 2 en `fetch_input` (el de
click) y 1 en `init_day`, como en los scripts originales.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from typer.core import TyperCommand

from adapters.aoc_input import AdventOfCodeInputFetcher
from core.config import AppSettings, load_settings
from core.domain.models import Coordinate, ScaffoldRequest, read_credential
from core.logging_utils import configure_logging
from core.services.scaffolder import scaffold_day

USAGE_ERROR_EXIT_CODE = 2

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_err_console = Console(stderr=True, highlight=False, soft_wrap=True)


class UsageErrorExitsOneCommand(TyperCommand):
    """Comando cuyo error de uso termina con exit code 1 en vez de 2.

    Se traduce el exit code final y no la clase de excepción: según la versión,
    Typer usa click o su copia interna `typer._click`.
    """

    def main(self, *args: Any, **kwargs: Any) -> Any:
        try:
            return super().main(*args, **kwargs)
        except SystemExit as exc:
            if exc.code == USAGE_ERROR_EXIT_CODE:
                raise SystemExit(1) from exc
            raise


def _load_settings(prog: str) -> AppSettings:
    try:
        settings = load_settings()
    except ValidationError as exc:
        _err_console.print(f"[red]{prog}:[/red] invalid configuration\n{escape(str(exc))}")
        raise typer.Exit(code=1)
    configure_logging(settings.log_level, settings.log_file)
    return settings


fetch_app = typer.Typer(add_completion=False, context_settings=CONTEXT_SETTINGS)


@fetch_app.command()
def fetch_input(
    year: str = typer.Argument(..., help="Event year, e.g. 2023."),
    day: str = typer.Argument(..., help="Puzzle day, e.g. 5."),
) -> None:
    """Fetch Advent of Code puzzle input.

    Reads a session cookie from standard input and writes the puzzle input
    of the given day to standard output.
    """

    settings = _load_settings("fetch_input")
    credential = read_credential(typer.get_binary_stream("stdin"))
    coordinate = Coordinate(year=year, day=day)

    out = typer.get_binary_stream("stdout")
    try:
        AdventOfCodeInputFetcher(settings).fetch(coordinate, credential, out)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        _err_console.print(f"[red]fetch_input:[/red] {escape(str(exc) or exc.__class__.__name__)}")
        raise typer.Exit(code=1)


init_app = typer.Typer(add_completion=False, context_settings=CONTEXT_SETTINGS)


@init_app.command(cls=UsageErrorExitsOneCommand)
def init_day(
    path: str = typer.Argument(..., help="Directory to create; must not exist."),
    year: str = typer.Argument(..., help="Event year, e.g. 2023."),
    day: str = typer.Argument(..., help="Puzzle day, e.g. 5."),
) -> None:
    """Initialize a Rust crate for a specific day of Advent of Code.

    Reads a session cookie from standard input, copies the day crate template
    to PATH, names the crate after the day and downloads the puzzle input
    into PATH/input.
    """

    settings = _load_settings("init_day")
    credential = read_credential(typer.get_binary_stream("stdin"))
    request = ScaffoldRequest(
        output_path=Path(path),
        coordinate=Coordinate(year=year, day=day),
        credential=credential,
    )

    try:
        result = scaffold_day(request, fetcher=AdventOfCodeInputFetcher(settings), settings=settings)
    except FileExistsError:
        _err_console.print(f"{path} exists already", markup=False)
        raise typer.Exit(code=1)
    except FileNotFoundError as exc:
        _err_console.print(f"[red]init_day:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    if not result.fetch_ok:
        _err_console.print(
            f"[yellow]init_day:[/yellow] {escape(str(result.output_path))} created, "
            f"but fetching the input failed: {escape(result.fetch_error or '')}"
        )
        raise typer.Exit(code=1)


def run_fetch_input() -> None:
    fetch_app(prog_name="fetch_input")


def run_init_day() -> None:
    init_app(prog_name="init_day")
