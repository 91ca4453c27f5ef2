"""Command -> helper argument vector.

This is the only part of the tool with real logic. It is a pure function:
no I/O, no shared state, safe to call from any thread.

The output is positional and order-sensitive:

    --client <client> --tenant <tenant> --resource " " (--scope <s>)+ [--clear]
"""

from __future__ import annotations

from core.domain.models import AcquireCommand, AuthTarget, ClearCommand
from core.errors import EmptyScopesError

# The helper reads a blank resource as "no specific resource requested".
# TODO: confirm with the helper owners whether a real resource id is expected here.
RESOURCE_PLACEHOLDER = " "


def _target_args(command: AuthTarget) -> list[str]:
    if not command.scopes:
        raise EmptyScopesError()

    args = [
        "--client",
        command.client,
        "--tenant",
        command.tenant,
        "--resource",
        RESOURCE_PLACEHOLDER,
    ]
    for scope in command.scopes:
        args.extend(("--scope", scope))
    return args


def translate(command: AcquireCommand | ClearCommand) -> list[str]:
    """Translate a validated command into the helper's argument list.

    Acquire yields `6 + 2 * len(scopes)` elements; Clear adds a trailing
    `--clear`.

    Raises:
        EmptyScopesError: the command carries no scopes (validation was bypassed).
        TypeError: `command` is not a known command variant.
    """

    # exact type match: subclasses need their own rule
    if type(command) is AcquireCommand:
        return _target_args(command)
    if type(command) is ClearCommand:
        args = _target_args(command)
        args.append("--clear")
        return args
    raise TypeError(f"no translation rule for {type(command).__name__}")
