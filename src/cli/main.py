"""CLI de hac-console (Typer).

Comandos:
- `impex validate|import FILE`
- `fxs QUERY` (o `@archivo`)
- `groovy FILE`
- `doctor run|setup`

El código de salida es 1 cuando el resultado trae un error de la consola.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.hac_client import HacConsoleClient
from cli import doctor
from cli.ui_components import print_result
from core.config import AppSettings
from core.domain.models import ConsoleResult, ImpexRequest
from core.domain.operations import OperationKind

app = typer.Typer(
    no_args_is_help=True,
    help="Run ImpEx, FlexibleSearch and Groovy scripts on a remote admin console.",
)
impex_app = typer.Typer(no_args_is_help=True, help="ImpEx validation and import.")
app.add_typer(impex_app, name="impex")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def build_console_client(settings: AppSettings | None = None) -> HacConsoleClient:
    return HacConsoleClient(settings or AppSettings())


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"cannot read {path}: {exc}") from exc


def _emit(ctx: typer.Context, result: ConsoleResult, kind: OperationKind) -> None:
    if ctx.obj and ctx.obj.get("json"):
        _console.print_json(result.model_dump_json())
    else:
        print_result(_console, result, kind)
    if result.has_error:
        raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    ctx.obj = {"json": as_json}
    _configure_logging(verbose)


def _impex_request(path: Path, max_threads: int, validation_mode: str, legacy: bool) -> ImpexRequest:
    return ImpexRequest(
        content=_read_text(path),
        max_threads=max_threads,
        validation_mode=validation_mode,
        legacy_mode=legacy,
    )


@impex_app.command("validate")
def impex_validate(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    max_threads: int = typer.Option(1, "--max-threads", min=1),
    validation_mode: str = typer.Option("IMPORT_STRICT", "--validation-mode"),
    legacy: bool = typer.Option(False, "--legacy", help="Use the legacy import mode."),
) -> None:
    """Validate an ImpEx file without importing it."""

    request = _impex_request(file, max_threads, validation_mode, legacy)
    with build_console_client() as client:
        result = client.validate_impex(request)
    _emit(ctx, result, OperationKind.VALIDATE_IMPORT)


@impex_app.command("import")
def impex_import(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    max_threads: int = typer.Option(1, "--max-threads", min=1),
    validation_mode: str = typer.Option("IMPORT_STRICT", "--validation-mode"),
    legacy: bool = typer.Option(False, "--legacy", help="Use the legacy import mode."),
) -> None:
    """Import an ImpEx file."""

    request = _impex_request(file, max_threads, validation_mode, legacy)
    with build_console_client() as client:
        result = client.import_impex(request)
    _emit(ctx, result, OperationKind.RUN_IMPORT)


@app.command("fxs")
def flexible_search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Query text, or @path to read it from a file."),
    sql: bool = typer.Option(False, "--sql", help="Send the query as plain SQL."),
    commit: bool = typer.Option(False, "--commit", help="Commit the transaction."),
    max_rows: Optional[int] = typer.Option(None, "--max-rows", min=1),
) -> None:
    """Run a FlexibleSearch (or plain SQL) query and print the rows."""

    content = _read_text(Path(query[1:])) if query.startswith("@") else query
    with build_console_client() as client:
        result = client.execute_flexible_search(
            content, commit=commit, plain_sql=sql, max_rows=max_rows
        )
    _emit(ctx, result, OperationKind.RUN_QUERY)


@app.command("groovy")
def groovy(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    commit: bool = typer.Option(False, "--commit", help="Commit the transaction."),
) -> None:
    """Execute a Groovy script."""

    content = _read_text(file)
    with build_console_client() as client:
        result = client.execute_groovy_script(content, commit=commit)
    _emit(ctx, result, OperationKind.RUN_SCRIPT)


def run() -> None:
    app()
