"""Doctor command for environment diagnostics."""

from __future__ import annotations

import math

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.helper_launcher import resolve_helper
from core.config import AppSettings, get_user_env_file, load_settings, write_user_env_vars
from core.errors import ConfigError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _settings_or_defaults() -> tuple[AppSettings, str | None]:
    """Current settings, or the defaults plus the reason the config was rejected."""

    try:
        return load_settings(), None
    except ConfigError as exc:
        return AppSettings.model_construct(), str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings, config_problem = _settings_or_defaults()
    helper_path = resolve_helper(settings)

    table = Table(title="azureauth-cli Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    if config_problem:
        table.add_row("Config", "FAIL", escape(config_problem))
    else:
        table.add_row("Config", "OK", "valid")

    table.add_row("Helper", "OK", settings.helper_executable)
    if helper_path:
        table.add_row("Helper on PATH", "OK", helper_path)
    else:
        table.add_row("Helper on PATH", "FAIL", f"{settings.helper_executable} not found")

    table.add_row("Wait for helper", "OK", "yes" if settings.wait_for_helper else "no (detached)")
    if settings.helper_timeout_seconds is None:
        table.add_row("Helper timeout", "OPTIONAL", "None -> wait until the helper exits")
    else:
        table.add_row("Helper timeout", "OK", f"{settings.helper_timeout_seconds}s")

    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    _console.print(table)

    if not helper_path or config_problem:
        _console.print(
            "\n[yellow]Note:[/yellow] install the helper or run `doctor setup-helper` to fix the config."
        )
        raise typer.Exit(code=1)


@app.command(name="setup-helper")
def setup_helper() -> None:
    """Interactive helper setup (stores config in the user config .env).

    An empty timeout removes any previously saved one.
    """

    settings, _ = _settings_or_defaults()
    executable = typer.prompt(
        "Helper executable",
        default=settings.helper_executable,
        show_default=True,
    ).strip()
    timeout = typer.prompt(
        "Helper timeout in seconds (empty to wait forever)",
        default="",
        show_default=False,
    ).strip()

    if not executable:
        raise typer.BadParameter("helper executable is required")
    if timeout:
        try:
            seconds = float(timeout)
        except ValueError:
            raise typer.BadParameter(f"invalid timeout: {timeout!r}") from None
        if not math.isfinite(seconds) or seconds <= 0:
            raise typer.BadParameter("timeout must be a finite number greater than zero")

    env_path = write_user_env_vars(
        {
            "AZUREAUTH_CLI_HELPER_EXECUTABLE": executable,
            "AZUREAUTH_CLI_HELPER_TIMEOUT_SECONDS": timeout or None,
        }
    )

    _console.print(f"[green]Saved helper config to:[/green] {env_path}")
