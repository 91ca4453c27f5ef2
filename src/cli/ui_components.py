"""CLI UI components (Rich).

Keeps rendering details out of the command functions so `acquire`, `clear`
and `doctor` can share them.
"""

from __future__ import annotations

import shlex
from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.helper_launcher import LaunchResult


def build_argv_table(executable: str, argv: Sequence[str]) -> Table:
    """Table with one row per argument passed to the helper."""

    table = Table(title=f"{executable} arguments")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Argument", style="cyan")
    for index, arg in enumerate(argv):
        # repr keeps the blank resource placeholder visible
        table.add_row(str(index), Text(repr(arg)))
    return table


def format_command_line(executable: str, argv: Sequence[str]) -> str:
    """Shell-quoted command line, copy/paste friendly."""

    return shlex.join([executable, *argv])


def build_launch_panel(result: LaunchResult) -> Panel:
    """Summary of a finished (or detached) helper run."""

    body = Text()
    body.append(f"pid: {result.pid}\n")
    if result.returncode is None:
        body.append("status: running (not waited for)", style="yellow")
    elif result.returncode == 0:
        body.append("status: exited with code 0", style="green")
    else:
        body.append(f"status: exited with code {result.returncode}", style="red")
    return Panel(body, title=Text(result.executable, style="bold"), border_style="cyan")
