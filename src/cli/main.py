"""azureauth-cli entry point.

Thin layer: parse options into a command model, translate it, hand the
result to the launcher, report the outcome. All real logic lives in
`core.services.translator`.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.helper_launcher import launch_helper
from cli import __version__
from cli.doctor import app as doctor_app
from cli.ui_components import build_argv_table, build_launch_panel, format_command_line
from core.config import AppSettings, load_settings
from core.domain.action import Action
from core.domain.models import build_command
from core.errors import ConfigError, HelperLaunchError
from core.logging_setup import configure_logging
from core.services.translator import translate

app = typer.Typer(no_args_is_help=True, help="Do the good auth: acquire or clear a cached token.")
app.add_typer(doctor_app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"azureauth-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    try:
        settings = load_settings()
    except ConfigError as exc:
        # doctor must stay usable so the broken config can be repaired
        if ctx.invoked_subcommand != "doctor":
            _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise typer.Exit(code=2) from exc
        settings = None

    log_level = settings.log_level if settings else logging.WARNING
    configure_logging(logging.DEBUG if verbose else log_level)
    ctx.obj = {"settings": settings, "verbose": verbose}


def _run(
    ctx: typer.Context,
    action: Action,
    *,
    client: str,
    tenant: str,
    scopes: List[str],
    dry_run: bool,
    helper: Optional[str],
) -> None:
    state = ctx.obj or {}
    settings: AppSettings = state.get("settings") or load_settings()
    if helper:
        settings = settings.model_copy(update={"helper_executable": helper})

    try:
        command = build_command(action, client=client, tenant=tenant, scopes=scopes)
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise typer.BadParameter(f"invalid {fields or 'command'}") from exc

    argv = translate(command)
    logger.debug("Translated %s into %s", action.value, argv)

    if dry_run:
        _console.print(build_argv_table(settings.helper_executable, argv))
        _console.print(
            format_command_line(settings.helper_executable, argv),
            soft_wrap=True,
            markup=False,
            highlight=False,
        )
        return

    try:
        result = launch_helper(argv, settings=settings)
    except HelperLaunchError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if state.get("verbose"):
        _console.print(build_launch_panel(result))

    if result.returncode is None:
        _console.print(
            f"Started {result.executable} (pid {result.pid}) to {action.value} a token "
            f"for {command.client} in {command.tenant}.",
            soft_wrap=True,
            markup=False,
            highlight=False,
        )
        return
    if result.returncode != 0:
        _err_console.print(
            f"[yellow]Warning:[/yellow] {escape(result.executable)} exited with code {result.returncode}",
        )
        raise typer.Exit(code=result.returncode)

    _console.print(
        f"{action.past_tense()} a token for {command.client} in {command.tenant} "
        f"with {json.dumps(list(command.scopes))}.",
        soft_wrap=True,
        markup=False,
        highlight=False,
    )


_CLIENT = typer.Option(..., "--client", help="Client ID.")
_TENANT = typer.Option(..., "--tenant", help="Tenant ID.")
_SCOPES = typer.Option(..., "--scope", "--scopes", help="Requested scope (repeat for several).")
_DRY_RUN = typer.Option(False, "--dry-run", help="Print the helper arguments instead of running it.")
_HELPER = typer.Option(None, "--helper", help="Helper executable (overrides config).")


@app.command()
def acquire(
    ctx: typer.Context,
    client: str = _CLIENT,
    tenant: str = _TENANT,
    scopes: List[str] = _SCOPES,
    dry_run: bool = _DRY_RUN,
    helper: Optional[str] = _HELPER,
) -> None:
    """Acquire a token."""

    _run(ctx, Action.ACQUIRE, client=client, tenant=tenant, scopes=scopes, dry_run=dry_run, helper=helper)


app.command(name="auth", hidden=True)(acquire)


@app.command()
def clear(
    ctx: typer.Context,
    client: str = _CLIENT,
    tenant: str = _TENANT,
    scopes: List[str] = _SCOPES,
    dry_run: bool = _DRY_RUN,
    helper: Optional[str] = _HELPER,
) -> None:
    """Clear a token."""

    _run(ctx, Action.CLEAR, client=client, tenant=tenant, scopes=scopes, dry_run=dry_run, helper=helper)


def run() -> None:
    app()
