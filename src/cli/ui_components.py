"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en los comandos de consola y en `doctor`.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.models import ConsoleResult
from core.domain.operations import OperationKind


def build_result_panel(result: ConsoleResult, kind: OperationKind) -> Panel:
    """Panel para presentar un `ConsoleResult`.

    Verde si la operación fue correcta, rojo con el detalle si falló.
    """

    title = Text(f"{kind.label()} · HTTP {result.http_code}", style="bold")
    if result.has_error:
        parts: list[Text] = [Text(result.error_message or "", style="red")]
        if result.detail_message:
            parts.append(Text("\n" + result.detail_message, style="dim"))
        return Panel(Group(*parts), title=title, border_style="red")

    parts = [Text(result.output or "(no output)")]
    if result.result:
        parts.append(Text.assemble(("\nResult: ", "bold"), result.result))
    return Panel(Group(*parts), title=title, border_style="green")


def print_result(console: Console, result: ConsoleResult, kind: OperationKind) -> None:
    console.print(build_result_panel(result, kind))


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva (sin secretos)."""

    table = Table(title="hac-console settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Console URL", settings.base_url)
    table.add_row("Verify TLS", str(settings.verify_ssl))
    table.add_row("Session cookie", "set" if settings.session_id else "not set")
    table.add_row("CSRF token", "set" if settings.csrf_token else "not set")
    table.add_row("HTTP timeout (s)", f"{settings.http_timeout_seconds:g}")
    table.add_row("Execution timeout (s)", f"{settings.execution_timeout_seconds:g}")
    table.add_row("Default max rows", str(settings.default_max_rows))
    return table
