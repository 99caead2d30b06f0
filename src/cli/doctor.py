"""Doctor command: configuration checks and connection test."""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.hac_client import HacConsoleClient
from cli.ui_components import build_settings_table
from core.config import ENV_PREFIX, AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Configuration checks and connection test.")

_console = Console()


@app.command()
def run() -> None:
    """Show the effective configuration and test the console connection."""

    settings = AppSettings()
    _console.print(build_settings_table(settings))

    with HacConsoleClient(settings) as client:
        result = client.check_connection()

    if result.has_error:
        _console.print(
            f"[red]Connection to {settings.base_url} failed:[/red] {result.error_message}"
        )
        if result.http_code in (401, 403) or 300 <= result.http_code < 400:
            _console.print(
                "[yellow]Note:[/yellow] the console rejected the session. "
                f"Refresh {ENV_PREFIX}SESSION_ID / {ENV_PREFIX}CSRF_TOKEN."
            )
        raise typer.Exit(code=1)

    _console.print(f"[green]Connected to {settings.base_url}[/green] (HTTP {result.http_code})")


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = AppSettings()

    host = typer.prompt("Console host", default=current.host, show_default=True).strip()
    port = typer.prompt("Console port", default=current.port or "", show_default=True).strip()
    webroot = typer.prompt("Console webroot", default=current.webroot, show_default=True).strip()
    ssl = typer.confirm("Use https?", default=current.ssl)
    session_id = typer.prompt(
        "Session cookie (JSESSIONID, empty to skip)",
        default="",
        show_default=False,
        hide_input=True,
    ).strip()
    csrf_token = typer.prompt(
        "CSRF token (empty to skip)",
        default="",
        show_default=False,
        hide_input=True,
    ).strip()

    if not host:
        raise typer.BadParameter("host is required")

    env_path = write_user_env_vars(
        {
            f"{ENV_PREFIX}HOST": host,
            f"{ENV_PREFIX}PORT": port,
            f"{ENV_PREFIX}WEBROOT": webroot,
            f"{ENV_PREFIX}SSL": "true" if ssl else "false",
            f"{ENV_PREFIX}SESSION_ID": session_id or None,
            f"{ENV_PREFIX}CSRF_TOKEN": csrf_token or None,
        }
    )

    _console.print(f"[green]Saved console config to:[/green] {env_path}")
